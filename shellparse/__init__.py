"""Parse shell command lines into tokens, commands and redirections."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "errors",
    "expand",
    "lexer",
    "parser",
    "quotes",
    "redirect",
    "tokens",
]