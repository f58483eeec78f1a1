"""Diagnostic helpers"""

import sys


def str_exc(exc: BaseException) -> str:
    """Convert an exception to its string representation."""
    return f"{type(exc).__name__}: {exc}"


def warn(message: str, verbose: bool = True) -> None:
    """Print a diagnostic line to stderr when ``verbose`` is set."""
    if verbose:
        print(message, file=sys.stderr)
