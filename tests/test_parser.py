import pytest

from shellparse.errors import EmptyInput, ShellSyntaxError
from shellparse.parser import parse
from shellparse.tokens import TokenType

W = TokenType.WORD


def test_simple_pipeline():
    result = parse("echo hi | cat > out", {}, 0, "/home/u")
    assert [cmd.words for cmd in result.commands] == [["echo", "hi"], ["cat", ">", "out"]]
    assert result.commands[1].types == [W, TokenType.OUTPUT_RDR, W]
    assert not result.commands[0].has_redirection
    assert result.commands[1].has_redirection


def test_counts():
    counts = parse("cat < a | wc >> b", {}, 0, "/h").counts
    assert (counts.rdr, counts.pipe, counts.word, counts.heredoc) == (2, 1, 4, 0)


def test_quotes_are_removed():
    result = parse('echo "a b" c', {}, 0, "/h")
    assert result.commands[0].words == ["echo", "a b", "c"]


def test_quoted_pipe_stays_in_word():
    result = parse('echo "a|b"', {}, 0, "/h")
    assert [cmd.words for cmd in result.commands] == [["echo", "a|b"]]


def test_quoted_operator_stays_a_word():
    (cmd,) = parse('echo ">" x', {}, 0, "/h").commands
    assert cmd.words == ["echo", ">", "x"]
    assert cmd.types == [W, W, W]


def test_variable_expansion():
    result = parse("echo $USER", {"USER": "alice"}, 0, "/h")
    assert result.commands[0].words == ["echo", "alice"]


def test_single_quotes_block_expansion():
    result = parse("echo '$USER'", {"USER": "alice"}, 0, "/h")
    assert result.commands[0].words == ["echo", "$USER"]


def test_last_status_expansion():
    assert parse("echo $?", {}, 42, "/h").commands[0].words == ["echo", "42"]


def test_tilde_expansion():
    assert parse("cd ~/x", {}, 0, "/home/u").commands[0].words == ["cd", "/home/u/x"]


def test_tokens_keep_quotes_and_types():
    result = parse('echo "a" | wc', {}, 0, "/h")
    assert [tok.text for tok in result.tokens] == ["echo", '"a"', "|", "wc"]
    assert result.tokens[2].type == TokenType.PIPE


def test_empty_line():
    with pytest.raises(EmptyInput):
        parse("   ", {}, 0, "/h")


def test_trailing_pipe_is_error():
    with pytest.raises(ShellSyntaxError) as info:
        parse("echo |", {}, 0, "/h")
    assert info.value.status == 1


def test_dangling_redirection_is_error():
    with pytest.raises(ShellSyntaxError) as info:
        parse("cat <", {}, 0, "/h")
    assert info.value.status == 258
    assert info.value.message == "syntax error near unexpected token 'newline'"


def test_open_quote_is_error():
    with pytest.raises(ShellSyntaxError) as info:
        parse('echo "abc', {}, 0, "/h")
    assert info.value.status == 1


def test_leading_pipe_is_error():
    with pytest.raises(ShellSyntaxError) as info:
        parse("| ls", {}, 0, "/h")
    assert info.value.status == 258