"""TreeParser: converts a textual representation into a Leaf/Composite tree.

The parser walks the token stream once, keeping a stack of open composites.
Each open composite collects the child currently being scanned in an
``_Element``; a separator or closing delimiter turns that element into a node.

An element is a run of text that may contain one or more closed composites,
e.g. ``count: {1: 2}`` or ``Foo { a: 1 }: "foo"``. The text before a composite
becomes its prefix and whatever follows it becomes its tail.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sorted_diff.errors import UnbalancedDelimitersError, UnsupportedTokenError
from sorted_diff.tree.nodes import Composite, DelimiterKind, Leaf, Node
from sorted_diff.tree.tokenizer import Token, Tokenizer, TokenKind

if TYPE_CHECKING:
    from sorted_diff.algorithm.config import NormalizeConfig

__all__ = ["DEFAULT_QUOTE_CHARS", "DEFAULT_UNSUPPORTED_LEAVES", "TreeParser", "parse"]

DEFAULT_QUOTE_CHARS = "\"'"

# Float spellings whose text does not round-trip or compare stably.
DEFAULT_UNSUPPORTED_LEAVES: frozenset[str] = frozenset(
    {"NaN", "nan", "inf", "-inf", "+inf", "Infinity", "-Infinity"}
)

# Label/value boundary inside an atom: the value of ``x=nan`` or ``v:NaN``
# is the last part.
_ATOM_PARTS = re.compile(r"[:=]")


@dataclass(slots=True)
class _Element:
    """The child currently being scanned inside one open block.

    Leading whitespace is trimmed from the element only: text following a
    closed composite keeps its gap, so ``Foo {} "x"`` reads back unchanged.
    """

    composites: list[Composite] = field(default_factory=list)
    text: list[str] = field(default_factory=list)

    def take_prefix(self) -> str:
        prefix = "".join(self.text)
        self.text.clear()
        return prefix if self.composites else prefix.lstrip()

    def build(self) -> Node | None:
        """Link the collected segments into a single node, or None if empty."""
        trailing = "".join(self.text).rstrip()
        if not self.composites:
            trailing = trailing.lstrip()
        node: Node | None = Leaf(trailing) if trailing else None
        for composite in reversed(self.composites):
            composite.tail = node
            node = composite
        return node


@dataclass(slots=True)
class _Frame:
    composite: Composite
    offset: int
    element: _Element = field(default_factory=_Element)


class TreeParser:
    """Parses the nested bracket notation into a tree of nodes.

    Parsing is a pure function of the input: a parser holds only its
    settings and compiled tokenizer, so one instance can be reused.

    Example::

        parser = TreeParser()
        tree = parser.parse('Foo { b: 2, a: 1 }')
        # Composite(kind=CURLY, prefix="Foo ",
        #           children=[Leaf("b: 2"), Leaf("a: 1")])
    """

    def __init__(
        self,
        quote_chars: str = DEFAULT_QUOTE_CHARS,
        unsupported_leaves: frozenset[str] = DEFAULT_UNSUPPORTED_LEAVES,
    ) -> None:
        """Initialise the parser.

        Args:
            quote_chars: Characters that open an opaque quoted run.
            unsupported_leaves: Bare leaf values that make the input
                unsupported, e.g. ``NaN``.
        """
        self._unsupported_leaves = unsupported_leaves
        self._tokenizer = Tokenizer(quote_chars)

    @classmethod
    def from_config(cls, config: NormalizeConfig) -> TreeParser:
        """Build a parser using the parsing settings of ``config``."""
        return cls(
            quote_chars=config.quote_chars,
            unsupported_leaves=config.unsupported_leaves,
        )

    def parse(self, text: str) -> Node:
        """Parse ``text`` into a tree.

        Args:
            text: A single representation, e.g. ``{"a": [1, 2]}``.

        Returns:
            A Leaf when the text contains no delimited block, otherwise the
            outermost Composite.  Empty input parses to ``Leaf("")``.

        Raises:
            UnbalancedDelimitersError: If a delimiter is unmatched or closed by
                the wrong kind.
            UnsupportedTokenError: For an empty element, a separator outside
                any block, an unterminated quote or an unstable leaf value.
        """
        root = _Element()
        stack: list[_Frame] = []

        for token in self._tokenizer.tokenize(text):
            element = stack[-1].element if stack else root

            if token.kind == TokenKind.OPEN:
                composite = Composite(
                    kind=DelimiterKind.from_opening(token.text),
                    prefix=element.take_prefix(),
                )
                element.composites.append(composite)
                stack.append(_Frame(composite=composite, offset=token.offset))

            elif token.kind == TokenKind.CLOSE:
                self._close(token, stack)

            elif token.kind == TokenKind.SEPARATOR:
                if not stack:
                    raise UnsupportedTokenError(
                        "separator outside of a delimited block", token.offset
                    )
                frame = stack[-1]
                child = frame.element.build()
                if child is None:
                    raise UnsupportedTokenError("empty element", token.offset)
                frame.composite.children.append(child)
                frame.element = _Element()

            else:
                if token.kind == TokenKind.ATOM:
                    self._check_atom(token)
                element.text.append(token.text)

        if stack:
            frame = stack[-1]
            raise UnbalancedDelimitersError(
                f"{frame.composite.kind.opening!r} is never closed", frame.offset
            )

        tree = root.build()
        return tree if tree is not None else Leaf("")

    def _close(self, token: Token, stack: list[_Frame]) -> None:
        kind = DelimiterKind.from_closing(token.text)
        if not stack:
            raise UnbalancedDelimitersError(
                f"{token.text!r} has no matching {kind.opening!r}", token.offset
            )
        frame = stack.pop()
        if frame.composite.kind != kind:
            raise UnbalancedDelimitersError(
                f"{token.text!r} closes {frame.composite.kind.opening!r} "
                f"opened at offset {frame.offset}",
                token.offset,
            )
        # An empty final element is either an empty block or a trailing
        # separator; both are accepted.
        child = frame.element.build()
        if child is not None:
            frame.composite.children.append(child)
        elif frame.composite.children:
            frame.composite.trailing_separator = True

    def _check_atom(self, token: Token) -> None:
        value = _ATOM_PARTS.split(token.text)[-1]
        if value in self._unsupported_leaves:
            raise UnsupportedTokenError(
                f"unsupported leaf value {value!r}", token.offset
            )


def parse(text: str, config: NormalizeConfig | None = None) -> Node:
    """Parse ``text`` with a fresh ``TreeParser``.

    See ``TreeParser.parse`` for the accepted notation and raised errors.
    """
    parser = TreeParser.from_config(config) if config is not None else TreeParser()
    return parser.parse(text)
