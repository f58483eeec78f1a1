"""Best-effort offline geolocation from the host's timezone configuration."""

from tzloc.errors import (
    CoordinateError,
    EmptyCoordinateError,
    MalformedCoordinateError,
    MalformedLengthError,
    MissingLongitudeSignError,
    NonNumericFieldError,
    TzLocError,
)
from tzloc.geo import get_local_tz_name, local_tz_coords, lookup_tz_coords
from tzloc.geo.coords import Coordinate, decode_coords

__all__ = [
    "Coordinate",
    "CoordinateError",
    "EmptyCoordinateError",
    "MalformedCoordinateError",
    "MalformedLengthError",
    "MissingLongitudeSignError",
    "NonNumericFieldError",
    "TzLocError",
    "decode_coords",
    "get_local_tz_name",
    "local_tz_coords",
    "lookup_tz_coords",
]
