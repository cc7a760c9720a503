"""Expansion of ``$NAME``, ``$?`` and a leading ``~`` in words."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from shellparse.quotes import QuoteState
from shellparse.tokens import Token

_T = TypeVar("_T", str, Token)


def is_name_char(char: str) -> bool:
    """Return True for characters that may follow ``$`` in a reference."""
    return (char.isascii() and char.isalnum()) or char in ("_", "?")


def needs_expansion(text: str) -> bool:
    """Return True if the text holds a ``$`` or a ``~``."""
    return "$" in text or "~" in text


def lookup(name: str, env: Mapping[str, str] | None = None, last_status: int = 0) -> str:
    """Return what ``$name`` expands to; unknown names give an empty string."""
    if name == "?":
        return str(last_status)
    offset = name.index("=") + 1 if "=" in name else len(name) + 1
    for key, value in (env or {}).items():
        entry = f"{key}={value}"
        if entry.startswith(name) and len(key) <= len(name):
            return entry[offset:]
    return ""


class _Expander:
    """Expansion state shared by the words of one line."""

    def __init__(
        self, env: Mapping[str, str] | None, last_status: int, home: str | None
    ) -> None:
        self.env = env or {}
        self.status = last_status
        self.home = home or ""
        self.state = QuoteState()

    def word(self, text: str) -> str:
        if not needs_expansion(text):
            return text
        index = 0
        while index < len(text):
            text = self._step(text, index)
            index += 1
        return text

    def _step(self, text: str, index: int) -> str:
        self.state.feed(text[index])
        if self.state.quote_char != "'" and index > 0 and text[index - 1] == "$":
            text = self._replace(text, self._reference(text, index), tilde=False)
            self.state.reset()
            return text
        if text[index] == "~" and (text == "~" or text.startswith("~/")):
            return self._replace(text, text, tilde=True)
        return text

    @staticmethod
    def _reference(text: str, index: int) -> str:
        end = index
        while end < len(text) and is_name_char(text[end]) and text[end - 1] != "?":
            end += 1
        path = text[index - 1 : end]
        if len(path) >= 3 and path.endswith("?"):
            path = path[:-1]
        return path

    def _first_expandable(self, text: str) -> int:
        for index, char in enumerate(text):
            self.state.feed(char)
            if self.state.quote_char != "'" and char in ("$", "~"):
                return index
        return len(text)

    def _value(self, text: str, path: str) -> str:
        value = ""
        for char in text:
            if self.state.quote_char != "'" and char == "$":
                value = lookup(path[1:], self.env, self.status)
                self.status = 0
                break
            if char == "~":
                value = self.home
        return value

    def _replace(self, text: str, path: str, tilde: bool) -> str:
        self.state.reset()
        index = self._first_expandable(text)
        head = text[:index]
        tail = text[index + 1 :] if tilde else text[len(path) + index :]
        return head + self._value(text, path) + tail


def expand_word(
    word: str,
    env: Mapping[str, str] | None = None,
    last_status: int = 0,
    home: str | None = None,
) -> str:
    """Expand the references in one word.

    Single-quoted references stay as they are. ``home`` replaces ``~`` and
    ``~/...``; an empty string is used when it is None.
    """
    return _Expander(env, last_status, home).word(word)


def expand_tokens(
    tokens: Iterable[_T],
    env: Mapping[str, str] | None = None,
    last_status: int = 0,
    home: str | None = None,
) -> list[_T]:
    """Expand every token of a line, keeping token kinds.

    Once any ``$`` reference has been expanded, later ``$?`` references on the
    line give 0.
    """
    expander = _Expander(env, last_status, home)
    result: list[_T] = []
    for token in tokens:
        if isinstance(token, Token):
            result.append(Token(expander.word(token.text), token.type))
        else:
            result.append(expander.word(token))
    return result