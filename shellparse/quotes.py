"""Quote tracking and removal of quote characters from words."""

from __future__ import annotations

QUOTE_CHARS = "\"'"


class QuoteState:
    """Tracks whether a scan is currently inside single or double quotes."""

    def __init__(self) -> None:
        self.depth = 0
        self.quote_char: str | None = None

    @property
    def inside(self) -> bool:
        return self.depth == 1

    def feed(self, char: str) -> int:
        """Advance over one character; return 1 while inside quotes, else 0.

        The opening quote already counts as inside; the closing quote does not.
        A quote of the other kind inside a quoted run is ordinary text.
        """
        if self.depth == 0 and char in QUOTE_CHARS:
            self.quote_char = char
        if char == self.quote_char:
            self.depth += 1
        if self.depth % 2 == 0:
            self.reset()
        return self.depth

    def reset(self) -> None:
        """Forget any open quote."""
        self.depth = 0
        self.quote_char = None


def has_quotes(text: str) -> bool:
    """Return True if the text holds a single or double quote."""
    return any(ch in QUOTE_CHARS for ch in text)


def trim_quotes(text: str) -> str:
    """Remove the quote pairs from a word, keeping what they enclose.

    An unterminated quote extends to the end of the word.
    """
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch in QUOTE_CHARS:
            for inner in chars:
                if inner == ch:
                    break
                out.append(inner)
        else:
            out.append(ch)
    return "".join(out)