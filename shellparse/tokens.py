"""Token kinds, classification of raw words and per-type counts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kind of a lexical token on a command line."""

    WORD = 0
    INPUT_RDR = 1
    OUTPUT_RDR = 2
    DOUBLE_OUTPUT_RDR = 3
    DOUBLE_INPUT_RDR = 4
    PIPE = 5


_OPERATORS = {
    "<": TokenType.INPUT_RDR,
    ">": TokenType.OUTPUT_RDR,
    "|": TokenType.PIPE,
    "<<": TokenType.DOUBLE_INPUT_RDR,
    ">>": TokenType.DOUBLE_OUTPUT_RDR,
}

_REDIRECTIONS = {
    "<": TokenType.INPUT_RDR,
    ">": TokenType.OUTPUT_RDR,
    "<<": TokenType.DOUBLE_INPUT_RDR,
    ">>": TokenType.DOUBLE_OUTPUT_RDR,
}


@dataclass
class Token:
    """A piece of the command line together with its kind."""

    text: str
    type: TokenType = TokenType.WORD


@dataclass
class TypeCounts:
    """How many tokens of each family a line holds."""

    rdr: int = 0
    heredoc: int = 0
    pipe: int = 0
    word: int = 0

    @property
    def total(self) -> int:
        return self.rdr + self.heredoc + self.pipe + self.word


def classify(text: str) -> TokenType:
    """Return the kind of a single token.

    Only the exact operators ``<``, ``>``, ``|``, ``<<`` and ``>>`` are
    operators; anything else, including malformed operator runs, is a word.
    """
    return _OPERATORS.get(text, TokenType.WORD)


def classify_tokens(texts: Iterable[str]) -> list[Token]:
    """Turn raw token texts into classified tokens, keeping their order."""
    return [Token(text, classify(text)) for text in texts]


def redirection_type(text: str) -> TokenType:
    """Return the redirection kind of a word inside a command.

    Words that do not start with ``<`` or ``>`` are plain words. A word that
    starts with one of them but is not a known redirection counts as an input
    redirection.
    """
    if not text.startswith(("<", ">")):
        return TokenType.WORD
    return _REDIRECTIONS.get(text, TokenType.INPUT_RDR)


def count_types(tokens: Iterable[Token]) -> TypeCounts:
    """Count the tokens of each family."""
    counts = TypeCounts()
    for token in tokens:
        if token.type in (
            TokenType.INPUT_RDR,
            TokenType.OUTPUT_RDR,
            TokenType.DOUBLE_OUTPUT_RDR,
        ):
            counts.rdr += 1
        elif token.type == TokenType.WORD:
            counts.word += 1
        elif token.type == TokenType.DOUBLE_INPUT_RDR:
            counts.heredoc += 1
        elif token.type == TokenType.PIPE:
            counts.pipe += 1
    return counts