"""Exception hierarchy for timezone-to-coordinates resolution.

A missing timezone or table entry is not an error: lookups return ``None``.
These exceptions are reserved for data that was found but cannot be used.
"""


class TzLocError(Exception):
    """Base class for tzloc errors."""


class CoordinateError(TzLocError, ValueError):
    """A coordinate token does not fit the ``±DDMM[SS]±DDDMM[SS]`` grammar."""


class EmptyCoordinateError(CoordinateError):
    """The coordinate token is empty or missing."""


class MissingLongitudeSignError(CoordinateError):
    """No sign character separates the latitude and longitude blocks."""


class MalformedLengthError(CoordinateError):
    """A latitude or longitude digit run has an unsupported length."""


class NonNumericFieldError(CoordinateError):
    """A degree, minute or second field contains non-digit characters."""


class MalformedCoordinateError(TzLocError):
    """A zone table entry matched the timezone name but its coordinates are unusable."""

    def __init__(self, name: str, token: str, path: str | None = None):
        self.name = name
        self.token = token
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Malformed coordinates {token!r} for {name!r}{where}")
