"""YAML helpers"""

import typing as t

import yaml

from tzloc.utils.data_utils import NotSpecified


def yaml_safe_load_file(fname: str, default: t.Any = NotSpecified) -> t.Any:
    """Load YAML content from a file safely.

    If ``default`` is given, a missing file yields ``default`` instead of an error.
    An empty file loads as ``None``.
    """
    try:
        with open(fname, "r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as e:
        if default is not NotSpecified:
            return default
        raise RuntimeError(f"Failed to load YAML file '{fname}': {e}") from e
    except Exception as e:
        raise RuntimeError(f"Failed to load YAML file '{fname}': {e}") from e


def yaml_dump_plain(data: t.Any) -> str:
    """Dump data as block-style YAML, keeping key order."""
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False).strip()
