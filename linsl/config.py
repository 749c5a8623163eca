from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (linsl package directory)
_LINSL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LINSL_DIR / 'prelude'
_DEFAULT_HISTFILE = Path('~/.linsl_history')
_DEFAULT_LOGLEVEL = logging.WARNING


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('LINSL_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_log_level() -> int:
    """Level named by LINSL_LOGLEVEL (e.g. DEBUG), WARNING when unset or unknown."""
    raw = os.environ.get('LINSL_LOGLEVEL', '').strip().upper()
    level = getattr(logging, raw, None) if raw else None
    return level if isinstance(level, int) else _DEFAULT_LOGLEVEL


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('LINSL_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def get_history_file() -> Path:
    raw = os.environ.get('LINSL_HISTFILE')
    return Path(raw or _DEFAULT_HISTFILE).expanduser()
