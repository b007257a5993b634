"""NormalizeConfig: settings shared by the parser and the canonical sorter.

NormalizeConfig is a frozen (immutable) dataclass validated on construction.
The defaults reproduce the compact one-line layout with every delimiter kind
sorted.
"""

from __future__ import annotations

from dataclasses import dataclass

from sorted_diff.tree.nodes import CLOSING_CHARS, OPENING_CHARS, DelimiterKind
from sorted_diff.tree.parser import DEFAULT_QUOTE_CHARS, DEFAULT_UNSUPPORTED_LEAVES

__all__ = ["NormalizeConfig"]


@dataclass(frozen=True, slots=True)
class NormalizeConfig:
    """Immutable configuration for parsing and canonical serialization.

    Attributes:
        indent: None for the compact layout (children joined by ``separator``
            on one line).  An int selects the multi-line layout: one child
            per line, indented by ``indent`` spaces per level, each followed
            by a trailing comma.
        separator: Joiner between children in the compact layout.  Must
            start with ``,`` so the output reparses to the same tree.
        sorted_kinds: Delimiter kinds whose children are reordered.
        unsorted_names: Type or field names whose blocks keep their input
            order.  A composite is left unsorted when any identifier in its
            prefix is listed: ``{"Order"}`` keeps the fields of
            ``Order { .. }`` and ``{"history"}`` keeps ``history: [..]``.
            Children of such a block are still canonicalized.
        quote_chars: Characters that open an opaque quoted run.
        unsupported_leaves: Bare words rejected by the parser.
    """

    indent: int | None = None
    separator: str = ", "
    sorted_kinds: frozenset[DelimiterKind] = frozenset(DelimiterKind)
    unsorted_names: frozenset[str] = frozenset()
    quote_chars: str = DEFAULT_QUOTE_CHARS
    unsupported_leaves: frozenset[str] = DEFAULT_UNSUPPORTED_LEAVES

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0 or None, got {self.indent}"
            raise ValueError(msg)
        if not self.separator.startswith(",") or self.separator[1:].strip():
            msg = (
                "separator must be ',' plus optional whitespace, "
                f"got {self.separator!r}"
            )
            raise ValueError(msg)
        if not self.quote_chars:
            msg = "quote_chars must not be empty"
            raise ValueError(msg)
        reserved = OPENING_CHARS | CLOSING_CHARS | {",", "\\"}
        clashing = sorted(set(self.quote_chars) & reserved)
        if clashing:
            msg = f"quote_chars must not contain delimiters, got {clashing}"
            raise ValueError(msg)
