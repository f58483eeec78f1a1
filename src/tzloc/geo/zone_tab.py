"""Look up timezone coordinates in the tz database zone tables.

``zone1970.tab`` and ``zone.tab`` ship with the IANA tz database. Each data
line holds country code(s), a coordinate token and a timezone name::

    CA	+4916-12307	America/Vancouver	Pacific - BC (most areas)

The tables are searched in a fixed order and the first file that names the
timezone decides the result.
"""

import os
import re
import typing as t

from tzloc.config import get_config
from tzloc.errors import CoordinateError, MalformedCoordinateError
from tzloc.geo.coords import Coordinate, decode_coords
from tzloc.utils.trace_utils import str_exc, warn

FIELD_SEP_RE = re.compile(r"[ \t\r\n]+")
COMMENT = "#"


class ZoneRecord(t.NamedTuple):
    """One data line of a zone table."""

    country: str
    coords: str
    tz: str


def iter_zone_records(lines: t.Iterable[str]) -> t.Iterator[ZoneRecord]:
    """Yield records from zone table lines, skipping comments, blanks and short lines."""
    for line in lines:
        stripped = line.lstrip(" \t")
        if not stripped or stripped.startswith((COMMENT, "\n", "\r")):
            continue
        fields = FIELD_SEP_RE.split(stripped.strip(" \t\r\n"))
        if len(fields) < 3:
            continue
        yield ZoneRecord(fields[0], fields[1], fields[2])


def find_record(lines: t.Iterable[str], name: str) -> str | None:
    """Return the coordinate token of the first record named ``name``, or None."""
    for record in iter_zone_records(lines):
        if record.tz == name:
            return record.coords
    return None


def scan_zone_table(lines: t.Iterable[str], name: str, path: str | None = None) -> Coordinate | None:
    """Return decoded coordinates for ``name`` from one zone table, or None if absent.

    Only the first matching record counts. If its token cannot be decoded the
    lookup fails with MalformedCoordinateError instead of looking further.
    """
    token = find_record(lines, name)
    if token is None:
        return None
    try:
        return decode_coords(token)
    except CoordinateError as e:
        raise MalformedCoordinateError(name, token, path) from e


def zone_tab_paths(env: t.Mapping[str, str] | None = None) -> list[str]:
    """Build the ordered list of candidate zone table files.

    ``$TZDIR`` tables come first when the variable is set and non-empty,
    followed by the configured fallback directories.
    """
    env = os.environ if env is None else env
    filenames = list(get_config("zone_tab.filenames", []))
    dirs = list(get_config("zone_tab.fallback_dirs", []))
    if tzdir := env.get("TZDIR"):
        dirs.insert(0, tzdir)
    return [os.path.join(dirname, fname) for dirname in dirs for fname in filenames]


def lookup_tz_coords(
    name: str,
    env: t.Mapping[str, str] | None = None,
    paths: t.Iterable[str] | None = None,
    verbose: bool = False,
) -> Coordinate | None:
    """Resolve an IANA timezone name to approximate (lat, lon) from the zone tables.

    Args:
        name: Timezone name, e.g. "America/Vancouver". Compared case-sensitively.
        env: Environment mapping used for ``TZDIR``. Defaults to os.environ.
        paths: Explicit candidate files. Defaults to zone_tab_paths(env).
        verbose: Report skipped files on stderr.

    Returns:
        The Coordinate from the first readable table naming ``name``, or None.

    Raises:
        MalformedCoordinateError: the first matching entry has unusable coordinates.
    """
    if not name:
        return None
    for path in zone_tab_paths(env) if paths is None else paths:
        try:
            fh = open(path, "r", encoding="utf-8", errors="replace")  # pylint: disable=consider-using-with
        except OSError as e:
            warn(f"Skipping zone table {path}: {str_exc(e)}", verbose)
            continue
        try:
            with fh:
                coords = scan_zone_table(fh, name, path)
        except OSError as e:
            warn(f"Skipping zone table {path}: {str_exc(e)}", verbose)
            continue
        if coords is not None:
            return coords
        warn(f"{name} not in {path}", verbose)
    return None
