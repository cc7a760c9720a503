# shellparse

`shellparse` turns one line of shell input into the commands of a
pipeline. It splits the line into words and the `|`, `<`, `>`, `<<` and
`>>` operators, checks the line for syntax errors, expands `$NAME`, `$?`
and `~`, groups the tokens at each pipe and removes the quotes. A
separate step applies the redirections of a command: it creates output
files, records the input file and collects here-documents.

## Installing

    pip install shellparse

## Parsing a line

```python
from shellparse.parser import parse
from shellparse.redirect import apply_redirections

result = parse(
    'echo "$USER" hi | grep h > out.txt',
    env={"USER": "alice"},
    last_status=0,
    home="/home/alice",
)

result.commands[0].words   # ['echo', 'alice', 'hi']
result.commands[1].words   # ['grep', 'h', '>', 'out.txt']

redirected = apply_redirections(result.commands[1])
redirected.words           # ['grep', 'h']
redirected.output          # 'out.txt' (created, truncated)
```

`parse` returns a `ParseResult` with the `commands`, the expanded
`tokens` and their `counts` (a `TypeCounts`). When `env` is not given the
process environment is used, and when `home` is not given, `HOME` from
it.

`parse` raises `ShellSyntaxError` (from `shellparse.errors`) for a line
the shell refuses, such as a pipe with nothing after it, a redirection
without a target, a malformed run like `<>` or an unclosed quote. The
exception's `status` is the exit status to report (1 or 258) and its
`message` reads like `syntax error near unexpected token '|'`. A blank
line raises `EmptyInput`, whose `status` is 0.

## The pieces

Each step can be used on its own:

- `shellparse.tokens`: `TokenType`, `Token`, `TypeCounts`, `classify`,
  `classify_tokens`, `redirection_type` and `count_types`.
- `shellparse.quotes`: `QuoteState`, which follows opening and closing
  quotes one character at a time (`feed`, `reset`), plus `has_quotes`
  and `trim_quotes`.
- `shellparse.lexer`: `split_words`, `split_operators` and `tokenize`,
  which returns a `Lexed` holding the tokens and any quote left open.
  A `#` ends the scan of the line.
- `shellparse.expand`: `is_name_char`, `needs_expansion`, `lookup`,
  `expand_word` and `expand_tokens`. Nothing is expanded inside single
  quotes.
- `shellparse.errors`: `check_syntax`, `ShellSyntaxError` and
  `EmptyInput`.
- `shellparse.commands`: `Command` and `group_commands`, which split a
  token list at each pipe.
- `shellparse.redirect`: `apply_redirections`, `write_heredoc`,
  `strip_redirections`, `last_redirection_index` and `RedirectResult`.

## Here-documents

`write_heredoc` and `apply_redirections` take a `read_line` callable that
receives the prompt `"> "` and returns the next line, or `None` at end of
input. Without one, lines are read with `input()`. The lines up to the
delimiter are written to `heredoc.txt` unless another path is given, and
that path becomes the command's last argument. If `read_line` raises
`KeyboardInterrupt`, the file is left empty and the result's
`interrupted` is true.

## What it does not do

`shellparse` is a library for parsing. It does not run commands, has no
built-in commands, no interactive prompt or history, and no command of
its own. `apply_redirections` creates the files named by `>` and `>>`
but does not connect them to any process.

## Running the tests

    pip install -e ".[test]"
    pytest