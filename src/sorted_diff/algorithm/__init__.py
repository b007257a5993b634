"""algorithm subpackage: public API for canonical sorting.

Provides the sort pass, the serializer, their shared configuration, and the
``normalize`` entry point.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from sorted_diff.algorithm import NormalizeConfig, normalize
    from sorted_diff.tree import parse

    normalize(parse('{"y": 2, "x": 1}'))
    # '{"x": 1, "y": 2}'
"""

from __future__ import annotations

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.serializer import CanonicalSerializer, normalize
from sorted_diff.algorithm.sorter import CanonicalSorter

__all__ = ["CanonicalSerializer", "CanonicalSorter", "NormalizeConfig", "normalize"]
