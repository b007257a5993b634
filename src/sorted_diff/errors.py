"""Exceptions raised when a representation cannot be parsed.

All parse failures derive from ``ParseError`` (itself a ``ValueError``) so
callers can fall back to the raw text with a single ``except`` clause.
"""

from __future__ import annotations

__all__ = ["ParseError", "UnbalancedDelimitersError", "UnsupportedTokenError"]


class ParseError(ValueError):
    """Base class for representations outside the supported notation.

    Attributes:
        offset: Character offset in the input where the problem was found,
            or None when it applies to the input as a whole.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class UnbalancedDelimitersError(ParseError):
    """An opening delimiter was never closed, or a close did not match."""


class UnsupportedTokenError(ParseError):
    """A token is not expressible in the notation, e.g. ``NaN`` or ``[1,,2]``."""
