"""Sorted ``repr()`` helpers for Python values.

``SortedRepr`` wraps a value so that displaying it prints its ``repr()`` with
every dict, set and nested collection in canonical order.  This is useful
when a value containing sets or dicts built in varying order has to appear in
a failure message or a snapshot.

Not every ``repr()`` is sortable: a custom ``__repr__`` outside the nested
bracket notation, or a float such as ``nan``, is shown unsorted.  Don't use
this to test ordering, since sorting discards it.
"""

from __future__ import annotations

from typing import Any

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.api import try_normalize

__all__ = ["SortedRepr", "sorted_repr"]


def sorted_repr(value: Any, config: NormalizeConfig | None = None) -> str:
    """Return ``repr(value)`` sorted at every nesting level.

    Falls back to the plain ``repr(value)`` when it cannot be parsed.

    Example::

        sorted_repr({"b": {3, 1, 2}, "a": None})
        # "{'a': None, 'b': {1, 2, 3}}"
    """
    return try_normalize(repr(value), config).text


class SortedRepr:
    """Wrapper whose ``repr()`` is the sorted ``repr()`` of the wrapped value.

    Equality delegates to the wrapped values, so two wrappers compare equal
    exactly when the values do.

    Example::

        print(SortedRepr({"b": 1, "a": 2}))   # {'a': 2, 'b': 1}
    """

    __slots__ = ("_config", "value")

    def __init__(self, value: Any, config: NormalizeConfig | None = None) -> None:
        self.value = value
        self._config = config

    def __repr__(self) -> str:
        return sorted_repr(self.value, self._config)

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SortedRepr):
            return bool(self.value == other.value)
        return NotImplemented
