"""Common utilities for tests."""

from pathlib import Path


def get_test_data_dir() -> Path:
    """Return path to the test data directory.

    This is the single source of truth for test data location (sample zone tables),
    used by both unittest TestCases and pytest fixtures.
    """
    return Path(__file__).parent.parent / "fixtures" / "data"


def write_zone_tab(path: Path, *rows: str) -> Path:
    """Write a zone table with one row per argument; fields given tab-separated."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{row}\n" for row in rows), encoding="utf-8")
    return path
