"""Discover the host's configured IANA timezone name."""

import os
import typing as t

from tzloc.config import get_config
from tzloc.utils.fs_utils import read_first_line, read_link
from tzloc.utils.trace_utils import str_exc, warn

TZIF_MAGIC = "TZif"


def is_plausible_tz_name(name: str | None) -> bool:
    """True for area/location style names; rejects abbreviations like "UTC" or "PST"."""
    return bool(name) and "/" in name


def tz_from_env(env: t.Mapping[str, str]) -> str | None:
    name = env.get("TZ")
    return name if is_plausible_tz_name(name) else None


def tz_from_localtime_text(localtime: str, verbose: bool = False) -> str | None:
    """Read a timezone name stored as plain text in ``localtime``.

    Most systems keep a binary TZif file there; that and anything unprintable is rejected.
    """
    try:
        raw = read_first_line(localtime)
        text = raw.decode("utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        warn(f"Cannot read {localtime} as text: {str_exc(e)}", verbose)
        return None
    if text.startswith(TZIF_MAGIC) or not text.isprintable():
        return None
    return text if is_plausible_tz_name(text) else None


def tz_from_localtime_link(localtime: str, marker: str | None = None) -> str | None:
    """Derive the name from a ``.../zoneinfo/Area/Location`` symlink target."""
    marker = marker or get_config("local_tz.zoneinfo_marker", "/zoneinfo/")
    target = read_link(localtime)
    if not target or marker not in target:
        return None
    name = target.split(marker, 1)[1]
    return name if is_plausible_tz_name(name) else None


def get_local_tz_name(
    env: t.Mapping[str, str] | None = None,
    localtime: str | None = None,
    verbose: bool = False,
) -> str | None:
    """Return the local IANA timezone name, or None if it cannot be determined.

    Tried in order: ``$TZ``, the text content of /etc/localtime, then its symlink target.
    Each candidate must look like an Area/Location name.
    """
    env = os.environ if env is None else env
    localtime = localtime or get_config("local_tz.localtime_path", "/etc/localtime")
    if name := tz_from_env(env):
        return name
    if env.get("TZ"):
        warn(f"Ignoring implausible TZ={env['TZ']!r}", verbose)
    if name := tz_from_localtime_text(localtime, verbose):
        return name
    if name := tz_from_localtime_link(localtime):
        return name
    warn(f"No timezone name found via TZ or {localtime}", verbose)
    return None
