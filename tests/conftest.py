"""Root conftest.py with shared fixtures across all test types."""

import shutil

import pytest

from tests.utils import get_test_data_dir
from tzloc.config import load_config


@pytest.fixture
def test_data_dir():
    """Return path to the test data directory."""
    return get_test_data_dir()


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached configuration so each test sees its own environment."""
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point tzloc at a config without system fallback tables or a real /etc/localtime."""
    config_path = tmp_path / "tzloc_config.yaml"
    config_path.write_text(
        "zone_tab:\n"
        "  fallback_dirs: []\n"
        "local_tz:\n"
        f"  localtime_path: {tmp_path / 'localtime'}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TZLOC_CONFIG", str(config_path))
    monkeypatch.setenv("TZLOC_CONFIG_OVERRIDE", str(config_path))
    monkeypatch.delenv("TZ", raising=False)
    monkeypatch.delenv("TZDIR", raising=False)
    load_config.cache_clear()
    return config_path


@pytest.fixture
def tzdir(tmp_path, test_data_dir):
    """A TZDIR-style directory holding copies of the sample zone tables."""
    target = tmp_path / "zoneinfo"
    target.mkdir()
    for fname in ("zone1970.tab", "zone.tab"):
        shutil.copy2(test_data_dir / fname, target / fname)
    return target
