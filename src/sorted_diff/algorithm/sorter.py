"""CanonicalSorter: post-order sort of every composite in a parsed tree.

Each composite's children are ordered by their canonical key, the compact
serialization of the child after its own subtree has been sorted.  Keys are
compared as Python strings (code point order) and the sort is stable, so
children with identical keys keep their input order and are never merged.

Because a child's key is computed from its already-sorted subtree, two
children that differ only in the order of their own contents get the same
key.  Equal nested structures therefore end up adjacent and in the same
relative position in every tree that contains them.
"""

from __future__ import annotations

import re

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.tree.nodes import Composite, Leaf, Node

__all__ = ["KEY_SEPARATOR", "CanonicalSorter"]

# Joiner used inside sort keys, independent of the configured layout.
KEY_SEPARATOR = ", "

_IDENTIFIER = re.compile(r"[A-Za-z_]\w*")


class CanonicalSorter:
    """Reorders the children of every composite in place.

    Example::

        sorter = CanonicalSorter()
        tree = parse("[{b: 1, a: 2}, {a: 0}]")
        sorter.sort(tree)   # returns "[{a: 0}, {a: 2, b: 1}]"
    """

    def __init__(self, config: NormalizeConfig | None = None) -> None:
        self._config = config if config is not None else NormalizeConfig()

    def sort(self, node: Node) -> str:
        """Sort ``node``'s subtree in place and return its canonical key.

        Nodes are visited with an explicit stack, so nesting depth is bounded
        by memory rather than the interpreter's recursion limit.

        Args:
            node: Root of a parsed tree.  Its composites are mutated.

        Returns:
            The compact canonical text of the sorted subtree.
        """
        # Pre-order walk; reversed, every node comes after its descendants.
        order: list[Node] = []
        stack: list[Node] = [node]
        while stack:
            current = stack.pop()
            order.append(current)
            if isinstance(current, Composite):
                stack.extend(current.children)
                if current.tail is not None:
                    stack.append(current.tail)

        keys: dict[int, str] = {}
        for current in reversed(order):
            if isinstance(current, Leaf):
                keys[id(current)] = current.text
            else:
                keys[id(current)] = self._sort_children(current, keys)
        return keys[id(node)]

    def _sort_children(self, node: Composite, keys: dict[int, str]) -> str:
        child_keys = [keys[id(child)] for child in node.children]
        if self._should_sort(node):
            order = sorted(range(len(child_keys)), key=child_keys.__getitem__)
            node.children = [node.children[i] for i in order]
            child_keys = [child_keys[i] for i in order]

        tail = keys[id(node.tail)] if node.tail is not None else ""
        trailing = "," if node.is_singleton_tuple else ""
        return (
            f"{node.prefix}{node.kind.opening}"
            f"{KEY_SEPARATOR.join(child_keys)}{trailing}"
            f"{node.kind.closing}{tail}"
        )

    def _should_sort(self, node: Composite) -> bool:
        if node.kind not in self._config.sorted_kinds:
            return False
        if not self._config.unsorted_names:
            return True
        names = _IDENTIFIER.findall(node.prefix)
        return self._config.unsorted_names.isdisjoint(names)
