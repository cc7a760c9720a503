import pytest

from shellparse.tokens import (
    Token,
    TokenType,
    TypeCounts,
    classify,
    classify_tokens,
    count_types,
    redirection_type,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<", TokenType.INPUT_RDR),
        (">", TokenType.OUTPUT_RDR),
        ("|", TokenType.PIPE),
        ("<<", TokenType.DOUBLE_INPUT_RDR),
        (">>", TokenType.DOUBLE_OUTPUT_RDR),
        ("echo", TokenType.WORD),
        ("<>", TokenType.WORD),
        ("||", TokenType.WORD),
        ("|x", TokenType.WORD),
        ("", TokenType.WORD),
    ],
)
def test_classify(text, expected):
    assert classify(text) == expected


def test_classify_tokens_keeps_text_and_order():
    texts = ["cat", "<", "in", "|", "wc"]
    tokens = classify_tokens(texts)
    assert [t.text for t in tokens] == texts
    assert [t.type for t in tokens] == [
        TokenType.WORD,
        TokenType.INPUT_RDR,
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
    ]


def test_classify_tokens_empty():
    assert classify_tokens([]) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<", TokenType.INPUT_RDR),
        (">", TokenType.OUTPUT_RDR),
        ("<<", TokenType.DOUBLE_INPUT_RDR),
        (">>", TokenType.DOUBLE_OUTPUT_RDR),
        ("<>", TokenType.INPUT_RDR),
        ("ls", TokenType.WORD),
        ("|", TokenType.WORD),
    ],
)
def test_redirection_type(text, expected):
    assert redirection_type(text) == expected


def test_count_types_mixed_line():
    tokens = classify_tokens(["cat", "<", "a", "|", "wc", ">>", "b", "<<", "x"])
    counts = count_types(tokens)
    assert counts == TypeCounts(rdr=2, heredoc=1, pipe=1, word=5)
    assert counts.total == len(tokens)


def test_count_types_output_redirections_count_as_rdr():
    tokens = [Token(">", TokenType.OUTPUT_RDR), Token(">>", TokenType.DOUBLE_OUTPUT_RDR)]
    counts = count_types(tokens)
    assert counts.rdr == len(tokens)
    assert counts.heredoc == 0


def test_count_types_empty():
    assert count_types([]) == TypeCounts()