"""Grouping of a line's tokens into the commands of a pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from shellparse.tokens import Token, TokenType, redirection_type


@dataclass
class Command:
    """One stage of a pipeline: its words and the kind of each word."""

    words: list[str] = field(default_factory=list)
    types: list[TokenType] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.types and self.words:
            self.types = [redirection_type(word) for word in self.words]
        if len(self.types) != len(self.words):
            raise ValueError("a command needs exactly one type per word")

    @property
    def has_redirection(self) -> bool:
        """True if any word of the command is a redirection operator."""
        return any(kind != TokenType.WORD for kind in self.types)


def group_commands(tokens: Iterable[str | Token]) -> list[Command]:
    """Split tokens into commands at every token that starts with ``|``.

    Empty tokens are dropped. A trailing pipe does not open a further
    command, while a leading or doubled pipe gives an empty one.
    """
    texts = [tok.text if isinstance(tok, Token) else tok for tok in tokens]
    if not texts:
        return []
    commands: list[Command] = []
    current: list[str] = []
    for text in texts:
        if text.startswith("|"):
            commands.append(Command(current))
            current = []
        elif text:
            current.append(text)
    if not texts[-1].startswith("|"):
        commands.append(Command(current))
    return commands