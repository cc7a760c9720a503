"""The full parse of one command line: lex, check, expand, group, unquote."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from shellparse.commands import Command, group_commands
from shellparse.errors import check_syntax
from shellparse.expand import expand_tokens
from shellparse.lexer import tokenize
from shellparse.quotes import has_quotes, trim_quotes
from shellparse.tokens import Token, TypeCounts


@dataclass
class ParseResult:
    """The commands of a line, its expanded tokens and their counts."""

    commands: list[Command] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    counts: TypeCounts = field(default_factory=TypeCounts)


def _unquote(command: Command) -> Command:
    words = [trim_quotes(word) if has_quotes(word) else word for word in command.words]
    return Command(words, list(command.types))


def parse(
    line: str,
    env: Mapping[str, str] | None = None,
    last_status: int = 0,
    home: str | None = None,
) -> ParseResult:
    """Parse a command line into its pipeline of commands.

    ``env`` defaults to the process environment and ``home`` to its HOME.
    Raises EmptyInput for a blank line and ShellSyntaxError for a line the
    shell refuses.
    """
    if env is None:
        env = dict(os.environ)
    if home is None:
        home = os.environ.get("HOME")
    lexed = tokenize(line)
    counts = lexed.counts
    check_syntax(lexed.tokens, lexed.open_quote)
    tokens = expand_tokens(lexed.tokens, env, last_status, home)
    commands = [_unquote(command) for command in group_commands(tokens)]
    return ParseResult(commands, tokens, counts)