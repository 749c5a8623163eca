# setup.py
from setuptools import setup, find_packages

setup(
    name="linsl",
    version="0.3.0",
    description="A small Lisp/Scheme-style interpreter with closures and macros",
    packages=find_packages(include=["linsl", "linsl.*"]),
    package_data={"linsl": ["prelude/*.linsl"]},
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["linsl=linsl.repl:main"],
    },
    zip_safe=False,
)
