#!/usr/bin/env python3
# =============================================================================
#  stategraph — setup.py
#
#  The version lives in stategraph/__init__.py; runtime requirements live in
#  requirements.txt.  This file reads both so there is a single source of
#  truth for each.
#
#  Typical use:
#      pip install -e ".[dev]"
#      python -m pytest
# =============================================================================

from __future__ import annotations

import re
from pathlib import Path

from setuptools import setup, find_packages

_HERE = Path(__file__).resolve().parent


def _read_version() -> str:
    """Extract ``__version__`` from the package without importing it."""
    init = _HERE / "stategraph" / "__init__.py"
    text = init.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


def _sibling_text(name: str) -> str:
    """Contents of a file next to setup.py, or ``""`` when it is missing."""
    path = _HERE / name
    return path.read_text(encoding="utf-8") if path.is_file() else ""


def _install_requires() -> list[str]:
    """Requirement lines from requirements.txt, comments and blanks dropped."""
    requires = []
    for line in _sibling_text("requirements.txt").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            requires.append(line)
    return requires


setup(
    name="stategraph",
    version=_read_version(),
    description=(
        "Reachability graphs, shortest and simple paths, and event-sequence "
        "replay for event-driven state machines."
    ),
    long_description=_sibling_text("README.md"),
    long_description_content_type="text/markdown",
    license="MIT",
    author="stategraph contributors",
    python_requires=">=3.10",
    packages=find_packages(
        include=[
            "stategraph",
            "stategraph.*",
        ],
        exclude=[
            "tests",
            "tests.*",
        ],
    ),
    package_data={
        "stategraph": ["py.typed"],
    },
    install_requires=_install_requires(),
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "ruff>=0.4",
            "mypy>=1.10",
            "black>=24.0",
            "isort>=5.13",
        ],
        "test": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Software Development :: Testing",
        "Typing :: Typed",
    ],
    keywords=[
        "state-machine",
        "statechart",
        "model-based-testing",
        "reachability",
        "shortest-path",
        "simple-paths",
    ],
    zip_safe=False,
)
