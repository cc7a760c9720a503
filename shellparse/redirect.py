"""Applying the redirections of a command and reading here-documents."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from shellparse.commands import Command
from shellparse.tokens import TokenType

ReadLine = Callable[[str], "str | None"]

HEREDOC_PROMPT = "> "


@dataclass
class RedirectResult:
    """A command's words once its redirections have been taken out."""

    words: list[str] = field(default_factory=list)
    input_name: str | None = None
    output: str | None = None
    append: bool = False
    interrupted: bool = False


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def last_redirection_index(
    words: Sequence[str], start: int = 0, first_only: bool = False
) -> int:
    """Locate redirection words, those starting with ``<`` or ``>``.

    With ``first_only`` the index of the first one is returned, or 0 when
    there is none. Otherwise the index just past the last one's target is
    returned, which is 2 when there is none.
    """
    found = 0
    for index, word in enumerate(words[start:], start):
        if word[:1] in ("<", ">"):
            found = index
            if first_only:
                return found
    return found if first_only else found + 2


def strip_redirections(
    words: Sequence[str],
    count: int,
    leading: bool = False,
    input_name: str | None = None,
) -> list[str]:
    """Keep the words before ``count``, or from ``count`` on when ``leading``.

    An input file name, if given, is appended as a final argument.
    """
    kept = list(words[count:]) if leading else list(words[:count])
    if input_name is not None:
        kept.append(input_name)
    return kept


def write_heredoc(
    delimiter: str,
    read_line: ReadLine | None = None,
    path: str | os.PathLike[str] = "heredoc.txt",
) -> bool:
    """Read lines until ``delimiter`` or end of input and store them at ``path``.

    Returns False if reading was interrupted; the file is then left empty.
    """
    read_line = read_line or _read_line
    with open(path, "w", encoding="utf-8") as handle:
        try:
            while True:
                line = read_line(HEREDOC_PROMPT)
                if line is None or line == delimiter:
                    return True
                handle.write(f"{line}\n")
        except KeyboardInterrupt:
            handle.seek(0)
            handle.truncate()
            return False


def apply_redirections(
    command: Command,
    read_line: ReadLine | None = None,
    heredoc_path: str | os.PathLike[str] = "heredoc.txt",
) -> RedirectResult:
    """Process every redirection of a command in order.

    Output files are created (``>`` truncates, ``>>`` appends) and the last
    one is reported. An input file or here-document becomes the command's
    last argument.
    """
    result = RedirectResult()
    words, types = command.words, command.types
    if not words:
        return result
    pairs = iter(zip(words, types))
    for _, kind in pairs:
        if kind == TokenType.WORD:
            continue
        target = next(pairs, (None, None))[0]
        if target is None:
            raise ValueError("redirection without a target")
        if kind == TokenType.OUTPUT_RDR:
            open(target, "w", encoding="utf-8").close()
            result.output, result.append = target, False
        elif kind == TokenType.DOUBLE_OUTPUT_RDR:
            open(target, "a", encoding="utf-8").close()
            result.output, result.append = target, True
        elif kind == TokenType.INPUT_RDR:
            result.input_name = target
        elif kind == TokenType.DOUBLE_INPUT_RDR:
            result.interrupted = not write_heredoc(target, read_line, heredoc_path)
            result.input_name = os.fspath(heredoc_path)
    leading = types[0] != TokenType.WORD
    count = last_redirection_index(words, 0, first_only=not leading)
    result.words = strip_redirections(words, count, leading, result.input_name)
    return result