"""Public API functions for sorted-diff.

This module provides the user-facing functions: normalize_text, try_normalize,
compare and is_equivalent.  Each call creates a fresh SortedComparator (or
TreeParser) to guarantee zero global state between calls.
"""

from __future__ import annotations

from collections.abc import Callable

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.serializer import normalize
from sorted_diff.comparator import SortedComparator
from sorted_diff.result import NormalizedText, SortedComparison
from sorted_diff.tree.parser import parse

__all__ = [
    "compare",
    "is_equivalent",
    "normalize_text",
    "try_normalize",
]


def normalize_text(text: str, config: NormalizeConfig | None = None) -> str:
    """Return the canonical form of ``text``.

    Args:
        text:   A raw representation, e.g. ``{"y": 2, "x": 1}``.
        config: Parse, sort and layout settings.  Defaults to
                ``NormalizeConfig()`` when None.

    Returns:
        The sorted text, e.g. ``{"x": 1, "y": 2}``.

    Raises:
        ParseError: If ``text`` is not in the supported notation.  Use
            ``try_normalize`` to fall back to the raw text instead.
    """
    return normalize(parse(text, config), config)


def try_normalize(text: str, config: NormalizeConfig | None = None) -> NormalizedText:
    """Return the canonical form of ``text``, or ``text`` itself if unparseable.

    Never raises for malformed input; the ``ParseError`` is returned in
    ``NormalizedText.error``.
    """
    return SortedComparator(config=config).normalize(text)


def compare(
    left: str,
    right: str,
    equals: Callable[[], bool] | None = None,
    config: NormalizeConfig | None = None,
) -> SortedComparison:
    """Normalize two representations and return a SortedComparison.

    Creates a fresh ``SortedComparator`` per call to guarantee zero global
    state between calls.

    Args:
        left:   Raw left representation.
        right:  Raw right representation.
        equals: Equality predicate over the original values.  When None, the
                normalized texts are compared.
        config: Parse, sort and layout settings.  Defaults to
                ``NormalizeConfig()`` when None.

    Returns:
        A ``SortedComparison`` holding both normalized (or raw fallback) texts
        and the equality decision.
    """
    comparator = SortedComparator(config=config)
    return comparator.compare(left, right, equals=equals)


def is_equivalent(
    left: str,
    right: str,
    config: NormalizeConfig | None = None,
) -> bool:
    """Return True if the two representations are identical once sorted.

    Args:
        left:   Raw left representation.
        right:  Raw right representation.
        config: Parse, sort and layout settings.

    Returns:
        True if ``compare(left, right, config=config).equal``.
    """
    return compare(left, right, config=config).equal
