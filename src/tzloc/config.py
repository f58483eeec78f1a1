"""Manage app configuration loading and access."""

import os
import typing as t
from functools import lru_cache
from pathlib import Path

from munch import Munch, munchify

from tzloc.utils.data_utils import get_multi, merge_struct
from tzloc.utils.fs_utils import project_root
from tzloc.utils.yaml_utils import yaml_safe_load_file

DEFAULT_CONFIG: dict[str, t.Any] = {
    "zone_tab": {
        "filenames": ["zone1970.tab", "zone.tab"],
        "fallback_dirs": ["/usr/share/zoneinfo", "/usr/lib/zoneinfo"],
    },
    "local_tz": {
        "localtime_path": "/etc/localtime",
        "zoneinfo_marker": "/zoneinfo/",
    },
}


def _load_config(config_path: str, must_exist: bool = True, merge_into: dict = None) -> Munch[str, t.Any]:
    config_dict = yaml_safe_load_file(config_path, **({} if must_exist else {"default": {}}))
    if merge_into is not None:
        config_dict = merge_struct(merge_into, config_dict)
    return munchify(config_dict)


@lru_cache
def load_config() -> Munch[str, t.Any]:
    config = munchify(DEFAULT_CONFIG)
    if config_path := os.getenv("TZLOC_CONFIG"):
        config = _load_config(config_path, merge_into=config)
    else:
        config = _load_config(project_root("config.yaml"), merge_into=config, must_exist=False)
    if config_override_path := os.getenv("TZLOC_CONFIG_OVERRIDE"):
        config = _load_config(config_override_path, merge_into=config)
    else:
        config_override_path = str(Path.home() / ".tzloc_config_override.yaml")
        config = _load_config(config_override_path, merge_into=config, must_exist=False)
    return config


def get_config(datapath: str | None = None, default: t.Any | None = None) -> Munch[str, t.Any]:
    config = load_config()
    return get_multi(config, datapath, default) if datapath else config
