"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from GoisortUserError.

Programming errors and bugs should NOT inherit from GoisortUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class GoisortUserError(Exception):
    """
    Base class for all user-facing errors in goisort.

    These errors indicate problems that the user can fix:
    malformed sources, stale line spans, unwritable files, bad config.
    """
    pass


class ParseError(GoisortUserError):
    """Source file could not be read or parsed."""

    def __init__(self, path: PathLike, cause: object):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to parse {path}: {cause}")


class LengthMismatchError(GoisortUserError):
    """Recorded import span no longer fits the file being rewritten."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mismatching file lengths; expected at least {expected} but got {actual}"
        )


class RewriteError(GoisortUserError):
    """Filesystem failure while rewriting a file."""

    def __init__(self, path: PathLike, cause: object):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to rewrite {path}: {cause}")


class ConfigError(GoisortUserError):
    """Invalid configuration file or standard library list."""
    pass


__all__ = [
    "GoisortUserError",
    "ParseError",
    "LengthMismatchError",
    "RewriteError",
    "ConfigError",
]
