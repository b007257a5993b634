"""Leaf and Composite node dataclasses plus the DelimiterKind StrEnum.

A parsed representation is a tree whose nodes are either a ``Leaf`` holding a
raw text span, or a ``Composite`` holding a delimited block of child nodes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

__all__ = ["Composite", "DelimiterKind", "Leaf", "Node"]


class DelimiterKind(StrEnum):
    """The three block delimiters of the supported notation.

    The member value is the opening character:
    - CURLY  -> "{" : maps, sets and struct-like blocks
    - SQUARE -> "[" : sequences
    - PAREN  -> "(" : tuples and tuple structs
    """

    CURLY = "{"
    SQUARE = "["
    PAREN = "("

    @property
    def opening(self) -> str:
        return self.value

    @property
    def closing(self) -> str:
        return _CLOSING[self]

    @classmethod
    def from_opening(cls, char: str) -> DelimiterKind:
        """Return the kind opened by ``char``.

        Raises:
            ValueError: If ``char`` is not an opening delimiter.
        """
        return cls(char)

    @classmethod
    def from_closing(cls, char: str) -> DelimiterKind:
        """Return the kind closed by ``char``.

        Raises:
            ValueError: If ``char`` is not a closing delimiter.
        """
        for kind, closing in _CLOSING.items():
            if closing == char:
                return kind
        raise ValueError(f"{char!r} is not a closing delimiter")


_CLOSING: dict[DelimiterKind, str] = {
    DelimiterKind.CURLY: "}",
    DelimiterKind.SQUARE: "]",
    DelimiterKind.PAREN: ")",
}

OPENING_CHARS: frozenset[str] = frozenset(kind.opening for kind in DelimiterKind)
CLOSING_CHARS: frozenset[str] = frozenset(_CLOSING.values())

# A prefix ending in a name makes a paren block a call, e.g. ``Some(x)``.
_NAMED = re.compile(r"\w$")


@dataclass(slots=True)
class Leaf:
    """An atomic value such as ``42``, ``"hello, world"`` or ``key: true``.

    Attributes:
        text: The raw span, trimmed of whitespace at both edges.  A tail
            leaf keeps the whitespace between the closing delimiter and its
            text, e.g. the `` "x"`` in ``Foo {} "x"``.
    """

    text: str


@dataclass(slots=True)
class Composite:
    """A delimited block with an ordered list of children.

    Attributes:
        kind:      Which delimiter pair encloses the children.
        prefix:    Text before the opening delimiter (a type name, variant or
                   ``key: `` label), kept verbatim including any whitespace
                   between it and the delimiter.
        children:  Child nodes in their current order. Must use
                   field(default_factory=list) so instances never share a list.
        tail:      Node following the closing delimiter inside the same
                   element, e.g. the ``: "foo"`` in ``Foo { a: 1 }: "foo"``.
                   None when the element ends at the closing delimiter.
        trailing_separator: Whether the last child was followed by a
                   separator.  Layout only, so it is excluded from equality;
                   it matters for ``is_singleton_tuple``.
    """

    kind: DelimiterKind
    prefix: str = ""
    children: list[Node] = field(default_factory=list)
    tail: Node | None = None
    trailing_separator: bool = field(default=False, compare=False)

    @property
    def is_tuple(self) -> bool:
        """True for an unnamed paren block such as ``(1, 2)`` or ``'k': (1,)``.

        A paren block after a name, e.g. ``Some(x)``, is a call instead.
        """
        return self.kind is DelimiterKind.PAREN and not _NAMED.search(self.prefix)

    @property
    def is_singleton_tuple(self) -> bool:
        """True for a one-element tuple written as ``(1,)``.

        The separator is part of such a value: ``(1)`` is not a tuple.
        """
        return self.is_tuple and self.trailing_separator and len(self.children) == 1


Node = Leaf | Composite
