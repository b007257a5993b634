"""Tree subpackage for text-to-tree conversion primitives.

Re-exports the public API for the tree module:
- Leaf / Composite: dataclasses for the two node kinds (``Node`` is their union)
- DelimiterKind: StrEnum of the three block delimiters ({}, [], ())
- Tokenizer / Token / TokenKind: lexical scan of the nested notation
- TreeParser / parse: converts a representation into a Node tree
"""

from sorted_diff.tree.nodes import Composite, DelimiterKind, Leaf, Node
from sorted_diff.tree.parser import TreeParser, parse
from sorted_diff.tree.tokenizer import Token, Tokenizer, TokenKind

__all__ = [
    "Composite",
    "DelimiterKind",
    "Leaf",
    "Node",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TreeParser",
    "parse",
]
