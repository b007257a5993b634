"""Sorted diff - canonical ordering for debug-style value representations."""

from __future__ import annotations

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.serializer import normalize
from sorted_diff.api import (
    compare,
    is_equivalent,
    normalize_text,
    try_normalize,
)
from sorted_diff.comparator import SortedComparator
from sorted_diff.display import SortedRepr, sorted_repr
from sorted_diff.errors import (
    ParseError,
    UnbalancedDelimitersError,
    UnsupportedTokenError,
)
from sorted_diff.result import NormalizedText, SortedComparison
from sorted_diff.tree.nodes import Composite, DelimiterKind, Leaf, Node
from sorted_diff.tree.parser import parse

__version__: str = "0.1.0"
__all__: list[str] = [
    "Composite",
    "DelimiterKind",
    "Leaf",
    "Node",
    "NormalizeConfig",
    "NormalizedText",
    "ParseError",
    "SortedComparator",
    "SortedComparison",
    "SortedRepr",
    "UnbalancedDelimitersError",
    "UnsupportedTokenError",
    "compare",
    "is_equivalent",
    "normalize",
    "normalize_text",
    "parse",
    "sorted_repr",
    "try_normalize",
]
