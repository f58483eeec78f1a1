"""Filesystem/path utility functions for the project."""

# all annotations are stored as strings and not evaluated at runtime, which can provide a minor performance improvement
from __future__ import annotations

import os
import typing as t
from functools import lru_cache

if t.TYPE_CHECKING:
    from pathlib import Path


@lru_cache
def project_root(file: str | Path | None = None) -> str:
    """Return the absolute project root directory.

    If ``file`` is provided, its path is appended relative to the project root.
    """
    # Go up from this file to src/, then one more level to the repository root
    parts = [os.path.dirname(__file__), "..", "..", ".."]
    if file:
        parts.append(str(file))
    return os.path.realpath(os.path.join(*parts))


def read_first_line(fname: str, limit: int = 4096) -> bytes:
    """Return the raw first line of a file, at most ``limit`` bytes.

    Raises OSError if the file cannot be opened or read.
    """
    with open(fname, "rb") as fh:
        return fh.readline(limit)


def read_link(fname: str) -> str | None:
    """Return the immediate target of a symlink, or None if ``fname`` is not one."""
    try:
        return os.readlink(fname)
    except (OSError, ValueError):
        return None
