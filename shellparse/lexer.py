"""Splitting a command line into words and operator tokens."""

from __future__ import annotations

from dataclasses import dataclass, field

from shellparse.quotes import QuoteState
from shellparse.tokens import Token, TypeCounts, classify_tokens, count_types

_OPERATOR_CHARS = ("|", "<", ">")
_REDIRECT_CHARS = ("<", ">")


def _printable(char: str) -> bool:
    return " " <= char <= "~"


@dataclass
class Lexed:
    """The tokens of one line and the quote left open at its end, if any."""

    tokens: list[Token] = field(default_factory=list)
    open_quote: str | None = None

    @property
    def texts(self) -> list[str]:
        return [token.text for token in self.tokens]

    @property
    def counts(self) -> TypeCounts:
        return count_types(self.tokens)


def split_words(line: str, state: QuoteState | None = None) -> list[str]:
    """Split a line on unquoted blanks and control characters.

    Leading and trailing spaces are ignored. An unquoted ``#`` ends the word
    before it, and any ``#`` ends the scan. A word still inside an open quote
    when the line ends is dropped; ``state`` then reports the open quote.
    """
    state = QuoteState() if state is None else state
    text = line.split("\0", 1)[0].strip(" ")
    words: list[str] = []
    start = 0
    between = False
    for index, char in enumerate(text + "\0"):
        inside = state.feed(char) == 1
        if not inside and not between and (
            char == " " or not _printable(char) or char == "#"
        ):
            if index > start:
                words.append(text[start:index])
            start = index + 1
            between = True
        elif between and _printable(char) and char != " ":
            start = index
            between = False
        if char == "#":
            break
    return words


def _pending(word: str, index: int, start: int) -> str | None:
    """Return the text before an operator, if it forms a token of its own."""
    previous = word[index - 1] if index > 0 else word[0]
    if _printable(previous) and previous not in _OPERATOR_CHARS:
        return word[start:index]
    return None


def split_operators(word: str, state: QuoteState | None = None) -> list[str]:
    """Cut a blank-free word at unquoted pipes and redirection runs.

    A run of up to three ``<``/``>`` characters forms one token, so malformed
    runs such as ``<>`` survive for the syntax check to report.
    """
    state = QuoteState() if state is None else state
    if not word:
        return []
    pieces: list[str] = []
    start = 0
    index = 0
    while index < len(word):
        char = word[index]
        inside = state.feed(char) == 1
        if not inside and char in _OPERATOR_CHARS:
            width = 1
            if char != "|" and word[index + 1 : index + 2] in _REDIRECT_CHARS:
                width = 3 if word[index + 2 : index + 3] in _REDIRECT_CHARS else 2
            before = _pending(word, index, start)
            if before is not None:
                pieces.append(before)
            pieces.append(word[index : index + width])
            start = index + width
            index += width - 1
        index += 1
    if word[-1] not in _OPERATOR_CHARS:
        pieces.append(word[start:])
    return pieces


def tokenize(line: str) -> Lexed:
    """Split and classify a whole command line."""
    state = QuoteState()
    words = split_words(line, state)
    texts = [piece for word in words for piece in split_operators(word)]
    open_quote = state.quote_char if state.inside else None
    return Lexed(classify_tokens(texts), open_quote)