"""Syntax checks run on a tokenized command line before it is executed."""

from __future__ import annotations

from collections.abc import Iterable

from shellparse.tokens import Token

_NEAR = "syntax error near unexpected token '{}'"

# Malformed runs of redirection characters and the token reported for each.
_BAD_REDIRECTIONS = {
    ">>>": ">",
    "<<<": "<",
    ">><": "<",
    "<<>": ">",
    "><": "<",
    "<>": ">",
    "<><": "<",
    "<>>": ">",
    "><<": "<",
    "><>": ">",
}


class ShellSyntaxError(Exception):
    """A command line the shell refuses to run; carries its exit status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class EmptyInput(Exception):
    """The line held nothing to run."""

    status = 0


def _near(status: int, token: str) -> ShellSyntaxError:
    return ShellSyntaxError(status, _NEAR.format(token))


def _check_redirection(text: str, following: str | None) -> None:
    if text in _BAD_REDIRECTIONS:
        raise _near(258, _BAD_REDIRECTIONS[text])
    if following is None:
        raise _near(258, "newline")
    if following == "|":
        raise _near(258, "|")


def check_syntax(tokens: Iterable[str | Token], open_quote: str | None) -> list[str]:
    """Validate the token texts of a line and return them as a list.

    ``open_quote`` is the quote character left unclosed at the end of the
    line, or None. Raises EmptyInput for an empty line and ShellSyntaxError
    for misplaced pipes, dangling or malformed redirections and open quotes.
    """
    if open_quote == '"':
        raise _near(1, '"')
    if open_quote == "'":
        raise _near(1, "'")
    texts = [tok.text if isinstance(tok, Token) else tok for tok in tokens]
    if not texts or not texts[0]:
        raise EmptyInput()
    if texts[0] == "|":
        raise _near(258, "|")
    for index, text in enumerate(texts):
        following = texts[index + 1] if index + 1 < len(texts) else None
        if text == "|":
            if following is None or following == "|":
                raise _near(1, "|")
        elif text.startswith(("<", ">")):
            _check_redirection(text, following)
    return texts