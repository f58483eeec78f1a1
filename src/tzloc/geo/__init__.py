"""Timezone name discovery and zone-table coordinate lookup.

This module provides stable import surfaces while avoiding heavy imports at
package import time. Functions are lazily imported from their submodules so
that reading configuration is deferred until the first call.
"""

import typing as t

__all__ = [
    "get_local_tz_name",
    "lookup_tz_coords",
    "local_tz_coords",
]

if t.TYPE_CHECKING:
    from .coords import Coordinate


def get_local_tz_name(
    env: t.Mapping[str, str] | None = None,
    localtime: str | None = None,
    verbose: bool = False,
) -> str | None:
    from .local_tz import get_local_tz_name as _impl  # pylint: disable=import-outside-toplevel

    return _impl(env, localtime, verbose=verbose)


def lookup_tz_coords(
    name: str,
    env: t.Mapping[str, str] | None = None,
    paths: t.Iterable[str] | None = None,
    verbose: bool = False,
) -> "Coordinate | None":
    from .zone_tab import lookup_tz_coords as _impl  # pylint: disable=import-outside-toplevel

    return _impl(name, env, paths, verbose=verbose)


def local_tz_coords(
    env: t.Mapping[str, str] | None = None,
    localtime: str | None = None,
    paths: t.Iterable[str] | None = None,
    verbose: bool = False,
) -> "Coordinate | None":
    """Coordinates of the local timezone, or None if the name or its table entry is missing."""
    name = get_local_tz_name(env, localtime, verbose=verbose)
    return lookup_tz_coords(name, env, paths, verbose=verbose) if name else None
