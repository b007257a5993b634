"""pytest plugin providing the ``assert_eq_sorted`` fixture.

Registered under the ``pytest11`` entry point ``sorted_diff``, so installing
the package is enough for pytest to load it.  A failing assertion reports a
unified diff of the two values' sorted ``repr()``, one entry per line, so that
dict and set ordering never shows up as a difference.
"""

from __future__ import annotations

import difflib
from typing import Any

import pytest

from sorted_diff import NormalizeConfig, SortedComparator, SortedComparison

# Multi-line layout keeps the diff to one changed line per differing entry.
DEFAULT_PLUGIN_CONFIG = NormalizeConfig(indent=4)


def format_failure(comparison: SortedComparison, msg: str | None = None) -> str:
    """Render the AssertionError message for a failed sorted comparison."""
    header = "assertion failed: `(left == right)`"
    if msg:
        header = f"{header}: {msg}"

    diff = list(
        difflib.unified_diff(
            comparison.left.text.splitlines(),
            comparison.right.text.splitlines(),
            fromfile="left",
            tofile="right",
            lineterm="",
        )
    )
    if not diff:
        diff = ["(sorted representations are identical)"]

    notes = [
        f"  {side} shown unsorted: {text.error}"
        for side, text in (("left", comparison.left), ("right", comparison.right))
        if text.error is not None
    ]
    return "\n".join([header, "", *diff, *notes])


@pytest.fixture(scope="session")
def assert_eq_sorted() -> Any:
    """Fixture that returns a callable equality asserter with sorted diffs.

    The fixture is session-scoped because the returned callable is stateless
    (it creates a fresh SortedComparator for every failing assertion).

    Usage in tests::

        def test_tags(assert_eq_sorted):
            assert_eq_sorted(build_tags(), {"red", "green"})

        def test_mismatch(assert_eq_sorted):
            with pytest.raises(AssertionError, match=r"left == right"):
                assert_eq_sorted({"x": 1}, {"x": 2})

    Args:
        No arguments -- the fixture is injected by pytest.

    Returns:
        A callable ``_assert(left, right, msg=None, *, config=None) -> None``
        that raises ``AssertionError`` when ``left != right``.
    """

    def _assert(
        left: Any,
        right: Any,
        msg: str | None = None,
        *,
        config: NormalizeConfig | None = None,
    ) -> None:
        """Assert that two values are equal, showing a sorted diff if not.

        Args:
            left:   The actual value produced by the code under test.
            right:  The expected value.
            msg:    Optional text appended to the failure header.
            config: Optional NormalizeConfig for the displayed diff.
                    Defaults to the multi-line layout with 4-space indent.

        Raises:
            AssertionError: When ``left != right``, with a unified diff of
                the sorted ``repr()`` of both values.
        """
        if left == right:
            return
        comparator = SortedComparator(config=config or DEFAULT_PLUGIN_CONFIG)
        comparison = comparator.compare(
            repr(left), repr(right), equals=lambda: left == right
        )
        raise AssertionError(format_failure(comparison, msg))

    return _assert
