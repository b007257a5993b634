"""Tokenizer: splits a representation into delimiter, separator and atom tokens.

Every character of the input belongs to exactly one token, so joining the
token texts reproduces the input. Quoted strings become a single QUOTED token
and are never inspected for delimiters, which keeps ``"a, {b}"`` opaque.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from sorted_diff.errors import UnsupportedTokenError

__all__ = ["Token", "TokenKind", "Tokenizer"]


class TokenKind(StrEnum):
    """Lexical classes of the nested notation.

    - OPEN       -> "open"       : one of ``{ [ (``
    - CLOSE      -> "close"      : one of ``} ] )``
    - SEPARATOR  -> "separator"  : ``,``
    - ATOM       -> "atom"       : run of any other non-whitespace characters
    - QUOTED     -> "quoted"     : a complete quoted string, escapes included
    - WHITESPACE -> "whitespace" : run of whitespace
    """

    OPEN = auto()
    CLOSE = auto()
    SEPARATOR = auto()
    ATOM = auto()
    QUOTED = auto()
    WHITESPACE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit and its position in the input."""

    kind: TokenKind
    text: str
    offset: int


class Tokenizer:
    """Regex-driven scanner for the nested bracket notation.

    The scanner is compiled once per set of quote characters and is stateless
    afterwards, so one instance can tokenize any number of inputs.

    Example::

        tokenizer = Tokenizer()
        [t.kind for t in tokenizer.tokenize("[1, 'a']")]
        # [OPEN, ATOM, SEPARATOR, WHITESPACE, QUOTED, CLOSE]
    """

    def __init__(self, quote_chars: str = "\"'") -> None:
        quoted = "|".join(
            rf"{re.escape(q)}(?:[^{re.escape(q)}\\]|\\.)*{re.escape(q)}"
            for q in quote_chars
        )
        stop = re.escape("{}[](),\\" + quote_chars)
        # Group order matters: QUOTED must win over the unterminated fallback.
        self._pattern = re.compile(
            rf"(?P<whitespace>\s+)"
            rf"|(?P<open>[{{\[(])"
            rf"|(?P<close>[}}\])])"
            rf"|(?P<separator>,)"
            rf"|(?P<quoted>{quoted})"
            rf"|(?P<atom>(?:[^\s{stop}]|\\.)+|\\)"
            rf"|(?P<unterminated>[{re.escape(quote_chars)}])"
            r"|(?P<unexpected>.)",
            re.DOTALL,
        )

    def tokenize(self, text: str) -> Iterator[Token]:
        """Yield the tokens of ``text`` from left to right.

        Raises:
            UnsupportedTokenError: If a quote is opened but never closed.
        """
        # The last alternative matches any character, so matches are
        # contiguous and cover the whole input.
        for match in self._pattern.finditer(text):
            group, offset = match.lastgroup, match.start()
            if group == "unterminated":
                raise UnsupportedTokenError("unterminated quoted string", offset)
            if group == "unexpected" or group is None:
                raise UnsupportedTokenError(
                    f"unexpected character {match.group()!r}", offset
                )
            yield Token(kind=TokenKind(group), text=match.group(), offset=offset)
