from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from linsl.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_SUFFIX = '.linsl'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str, name: str = ...) -> None: ...


def prelude_files(root: Path | None = None) -> list[Path]:
    """Prelude sources under `root`: core.linsl first, then the rest by name."""
    root = root if root is not None else get_prelude_root()
    files = sorted(root.glob(f'*{PRELUDE_SUFFIX}'))
    core = root / f'core{PRELUDE_SUFFIX}'
    if core in files:
        files.remove(core)
        files.insert(0, core)
    return files


def load_prelude(itp: _HasEvalPrelude, root: Path | None = None) -> None:
    files = prelude_files(root)
    if not files:
        raise FileNotFoundError(f"No prelude found in {root or get_prelude_root()}")
    for path in files:
        logger.debug("Loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'), str(path))
