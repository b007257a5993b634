"""SortedComparator: orchestrator that wires TreeParser + CanonicalSorter.

This is the central wiring layer between the parsing/sorting primitives and
the public API.  It turns raw representations into ``NormalizedText`` values,
falling back to the raw text whenever parsing fails, and packages the two
sides plus the equality decision into a ``SortedComparison``.

Architecture:
- normalize() parses a text into a fresh tree, sorts and serializes it, and
  discards the tree.  A ``ParseError`` is logged at DEBUG level and turned
  into a raw fallback; no other exception is caught.
- Results are cached per instance in an LRU cache keyed by the raw text, so
  repeatedly comparing the same representation parses it once.  Cached values
  are immutable strings; trees are never cached or shared.
- compare() never raises for malformed input. If either side cannot be
  parsed, both sides are reported as their raw text so that the two texts
  are always in the same form; the equality decision never depends on it.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from cachetools import LRUCache

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.serializer import normalize
from sorted_diff.errors import ParseError
from sorted_diff.result import NormalizedText, SortedComparison
from sorted_diff.tree.parser import TreeParser

__all__ = ["SortedComparator"]

logger = logging.getLogger(__name__)


class SortedComparator:
    """Normalizes and compares textual representations.

    Each instance owns its ``LRUCache``; two instances never share cache
    state.  An instance is not synchronized, so create one per thread when
    comparing concurrently (the module-level API functions already create a
    fresh comparator per call).

    Example::

        from sorted_diff.comparator import SortedComparator

        cmp = SortedComparator()
        result = cmp.compare('{"y": 2, "x": 1}', '{"x": 1, "y": 2}')
        print(result.left.text)   # {"x": 1, "y": 2}
        print(result.equal)       # True
    """

    def __init__(
        self,
        config: NormalizeConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Parse, sort and layout settings.  Defaults to
                ``NormalizeConfig()``.
            max_cache_size: Maximum number of normalized texts held in the
                per-instance LRU cache.  When exceeded, the least-recently-used
                entry is silently evicted.  Defaults to 512.
                This is an infrastructure parameter, NOT part of
                ``NormalizeConfig`` (which governs output only).

        Raises:
            ValueError: If ``max_cache_size`` is less than 1.
        """
        if max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {max_cache_size}"
            raise ValueError(msg)
        self._config: NormalizeConfig = (
            config if config is not None else NormalizeConfig()
        )
        self._parser = TreeParser.from_config(self._config)
        self._cache: LRUCache[str, NormalizedText] = LRUCache(maxsize=max_cache_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> NormalizeConfig:
        return self._config

    @property
    def max_cache_size(self) -> int:
        """The maximum number of entries this comparator can cache."""
        return int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The current number of cached entries."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def normalize(self, text: str) -> NormalizedText:
        """Return the canonical form of ``text``, or ``text`` itself on failure.

        Args:
            text: A raw representation, e.g. the ``repr()`` of a dict.

        Returns:
            A ``NormalizedText`` whose ``error`` is set when ``text`` is not in
            the supported notation.
        """
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        try:
            tree = self._parser.parse(text)
        except ParseError as exc:
            logger.debug("Representation left unsorted: %s", exc)
            result = NormalizedText(text=text, error=exc)
        else:
            result = NormalizedText(text=normalize(tree, self._config))

        self._cache[text] = result
        return result

    def compare(
        self,
        left: str,
        right: str,
        equals: Callable[[], bool] | None = None,
    ) -> SortedComparison:
        """Normalize both representations and record the equality decision.

        If either side cannot be parsed, both sides fall back to their raw
        text.  Each side keeps its own ``error``, so the result tells which
        side forced the fallback.

        Args:
            left:   Raw left representation.
            right:  Raw right representation.
            equals: The caller's equality predicate, typically a closure over
                the original typed values.  When None, the two resulting texts
                are compared instead.

        Returns:
            A ``SortedComparison`` with both texts, the equality decision and
            the wall-clock timing.
        """
        t0 = time.perf_counter()

        left_text = self.normalize(left)
        right_text = self.normalize(right)
        if not (left_text.normalized and right_text.normalized):
            # Both texts are sorted or both are raw.
            left_text = NormalizedText(text=left, error=left_text.error)
            right_text = NormalizedText(text=right, error=right_text.error)
        equal = equals() if equals is not None else left_text.text == right_text.text

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return SortedComparison(
            left=left_text,
            right=right_text,
            equal=bool(equal),
            computation_time_ms=elapsed_ms,
        )
