"""Decode ISO 6709 style coordinate tokens from zone tables.

Zone tables store each location as a compact signed pair, latitude first::

    +4916-12307        49°16'N 123°07'W  (DDMM / DDDMM)
    +401234+0750000    40°12'34"N 75°00'00"E  (DDMMSS / DDDMMSS)

Each block starts with a sign. The digit runs are fixed width, so the run
length alone tells whether seconds are present.
"""

import typing as t

from tzloc.errors import EmptyCoordinateError, MalformedLengthError, MissingLongitudeSignError, NonNumericFieldError

SIGNS = "+-"
LAT_DEG_WIDTH = 2
LON_DEG_WIDTH = 3
LAT_LENGTHS = (4, 6)  # DDMM, DDMMSS
LON_LENGTHS = (5, 7)  # DDDMM, DDDMMSS


class Coordinate(t.NamedTuple):
    """Decimal degrees, north and east positive."""

    lat: float
    lon: float


def _field(digits: str, start: int, width: int, token: str) -> int:
    chunk = digits[start : start + width]
    if len(chunk) != width or not (chunk.isascii() and chunk.isdigit()):
        raise NonNumericFieldError(f"Non-numeric field {chunk!r} in coordinate token {token!r}")
    return int(chunk)


def _to_decimal(sign: str, digits: str, deg_width: int, token: str) -> float:
    """Convert one sign + digit run block to signed decimal degrees."""
    deg = _field(digits, 0, deg_width, token)
    minutes = _field(digits, deg_width, 2, token)
    # seconds only present in the long form
    sec = _field(digits, deg_width + 2, 2, token) if len(digits) > deg_width + 2 else 0
    value = deg + minutes / 60.0 + sec / 3600.0
    return -value if sign == "-" else value


def split_coords(token: str) -> tuple[str, str, str, str]:
    """Split a token into (lat_sign, lat_digits, lon_sign, lon_digits).

    Raises:
        EmptyCoordinateError: token is empty or None.
        MissingLongitudeSignError: no second sign after position 0.
        MalformedLengthError: a digit run has an unsupported length.
    """
    if not token:
        raise EmptyCoordinateError("Empty coordinate token")
    pos = next((i for i, char in enumerate(token) if i > 0 and char in SIGNS), None)
    if pos is None:
        raise MissingLongitudeSignError(f"No longitude sign in coordinate token {token!r}")
    lat_digits, lon_digits = token[1:pos], token[pos + 1 :]
    if len(lat_digits) not in LAT_LENGTHS:
        raise MalformedLengthError(f"Latitude {lat_digits!r} must have {LAT_LENGTHS} digits in {token!r}")
    if len(lon_digits) not in LON_LENGTHS:
        raise MalformedLengthError(f"Longitude {lon_digits!r} must have {LON_LENGTHS} digits in {token!r}")
    return token[0], lat_digits, token[pos], lon_digits


def decode_coords(token: str) -> Coordinate:
    """Decode a zone table coordinate token into decimal degrees.

    Values are not range checked; a malformed table yields whatever its digits say.

    >>> decode_coords("+4930-12310")
    Coordinate(lat=49.5, lon=-123.16666666666667)
    >>> decode_coords("+401234+0750000").lon
    75.0

    Raises:
        CoordinateError: one of its subclasses, see split_coords; NonNumericFieldError for non-digit fields.
    """
    lat_sign, lat_digits, lon_sign, lon_digits = split_coords(token)
    lat = _to_decimal(lat_sign, lat_digits, LAT_DEG_WIDTH, token)
    lon = _to_decimal(lon_sign, lon_digits, LON_DEG_WIDTH, token)
    return Coordinate(lat, lon)
