"""CanonicalSerializer and the normalize() entry point.

Renders a (sorted) tree back into the notation it was parsed from, in one of
two layouts selected by ``NormalizeConfig.indent``:

Compact (``indent=None``)::

    Foo {a: 1, b: [2, 3]}

Multi-line (``indent=4``), one child per line with a trailing comma::

    Foo {
        a: 1,
        b: [
            2,
            3,
        ],
    }

Both layouts parse back to the same tree, so normalizing either output again
yields the same text.
"""

from __future__ import annotations

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.sorter import KEY_SEPARATOR, CanonicalSorter
from sorted_diff.tree.nodes import Composite, Leaf, Node

__all__ = ["CanonicalSerializer", "normalize"]

# Literal text, or a node still to be rendered at a nesting depth.
_Piece = str | tuple[Node, int]


class CanonicalSerializer:
    """Serializes a tree without changing its order."""

    def __init__(self, config: NormalizeConfig | None = None) -> None:
        self._config = config if config is not None else NormalizeConfig()

    def serialize(self, node: Node, depth: int = 0) -> str:
        """Render ``node`` at nesting level ``depth``.

        Prefixes, tails and leaf text are emitted verbatim; only the
        whitespace around children is produced by the layout.  The tree is
        walked with an explicit stack, so deep nesting cannot exhaust the
        interpreter's recursion limit.
        """
        parts: list[str] = []
        stack: list[_Piece] = [(node, depth)]
        while stack:
            piece = stack.pop()
            if isinstance(piece, str):
                parts.append(piece)
                continue
            current, level = piece
            if isinstance(current, Leaf):
                parts.append(current.text)
            else:
                stack.extend(reversed(self._layout(current, level)))
        return "".join(parts)

    def _layout(self, node: Composite, depth: int) -> list[_Piece]:
        """Return the text and child placeholders making up ``node``."""
        opening, closing = node.kind.opening, node.kind.closing
        indent = self._config.indent
        pieces: list[_Piece] = [f"{node.prefix}{opening}"]

        if indent is None:
            for i, child in enumerate(node.children):
                if i:
                    pieces.append(self._config.separator)
                pieces.append((child, depth))
            if node.is_singleton_tuple:
                pieces.append(",")
        elif node.children:
            pad = " " * (indent * (depth + 1))
            pieces.append("\n")
            for child in node.children:
                pieces.extend((pad, (child, depth + 1), ",\n"))
            if (
                node.is_tuple
                and len(node.children) == 1
                and not node.trailing_separator
            ):
                # ``(x,)`` would turn a parenthesized value into a tuple.
                pieces[-1] = "\n"
            pieces.append(" " * (indent * depth))

        pieces.append(closing)
        if node.tail is not None:
            pieces.append((node.tail, depth))
        return pieces


def normalize(node: Node, config: NormalizeConfig | None = None) -> str:
    """Sort ``node`` at every nesting level and serialize it.

    Deterministic and idempotent: parsing and normalizing the output again
    returns the same string.  Never fails for a successfully parsed tree.

    Args:
        node:   Root of a parsed tree.  Child order is rearranged in place.
        config: Layout and sort settings.  Defaults to ``NormalizeConfig()``.

    Returns:
        The canonical text in the configured layout.
    """
    config = config if config is not None else NormalizeConfig()
    key = CanonicalSorter(config).sort(node)
    if config.indent is None and config.separator == KEY_SEPARATOR:
        # The sort key already is the default compact rendering.
        return key
    return CanonicalSerializer(config).serialize(node)
