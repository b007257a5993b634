"""NormalizedText and SortedComparison dataclasses for normalization output.

This module provides the result types returned by ``try_normalize()`` and
``compare()`` calls.  Parse failures are carried as data, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass

from sorted_diff.errors import ParseError

__all__ = ["NormalizedText", "SortedComparison"]


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """Either the canonical form of a representation or its raw fallback.

    Attributes:
        text:  The canonical text when parsing succeeded, otherwise the
            original text unchanged.
        error: The ParseError that forced the fallback, or None.
    """

    text: str
    error: ParseError | None = None

    @property
    def normalized(self) -> bool:
        """True when the input parsed.

        Inside a ``SortedComparison`` the text may still be raw because the
        other side failed; see ``SortedComparison.fully_sorted``.
        """
        return self.error is None


@dataclass(frozen=True, slots=True)
class SortedComparison:
    """Result of comparing two representations through the sorted path.

    Both texts are sorted, or both are the raw inputs when either side
    failed to parse.

    Attributes:
        left:  Normalized (or raw fallback) left representation.
        right: Normalized (or raw fallback) right representation.
        equal: The equality decision: the caller's predicate when one was
            given, otherwise whether the two texts are identical.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
    """

    left: NormalizedText
    right: NormalizedText
    equal: bool
    computation_time_ms: float

    @property
    def fully_sorted(self) -> bool:
        """True when both texts are sorted; False when both are raw."""
        return self.left.normalized and self.right.normalized
