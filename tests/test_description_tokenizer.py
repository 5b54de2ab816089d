import io

import pytest
from hypothesis import given

from _dfascan.tokenizer import DescriptionTokenizer, TransitionTokenizer
from _dfascan.tokenizer.errors import TokenizationError
from _dfascan.tokenizer.token_kind import TokenKind

from .generators.table_descriptions import table_descriptions


def tokenize(contents):
    stream = io.StringIO(contents)
    return [(t.kind, t.get_value(stream)) for t in DescriptionTokenizer(stream)]


def test_tokenize_header_line():
    assert tokenize("states 3\n") == [
        (TokenKind.WORD, "states"),
        (TokenKind.WORD, "3"),
        (TokenKind.NEWLINE, "\n"),
    ]


@pytest.mark.parametrize("delimiter", [" ", "\t", "  \t ", "\r"])
def test_tokenize_delimiters(delimiter):
    assert tokenize(f"{delimiter}0{delimiter}2/1s{delimiter}\n{delimiter}") == [
        (TokenKind.WORD, "0"),
        (TokenKind.WORD, "2/1s"),
        (TokenKind.NEWLINE, "\n"),
    ]


def test_tokenize_blank_lines():
    assert tokenize("\n\n") == [(TokenKind.NEWLINE, "\n")] * 2


def test_tokenize_without_final_newline():
    assert tokenize("0 2/1s") == [(TokenKind.WORD, "0"), (TokenKind.WORD, "2/1s")]


def test_tokenize_empty():
    assert tokenize("") == []


@given(table_descriptions())
def test_tokenize_description(description):
    tokens = tokenize(description)
    assert sum(1 for kind, _ in tokens if kind == TokenKind.NEWLINE) == (
        description.count("\n")
    )
    words = [value for kind, value in tokens if kind == TokenKind.WORD]
    assert words == description.split()


def tokenize_transition(word):
    stream = io.StringIO(word)
    return [(t.kind, t.get_value(stream)) for t in TransitionTokenizer(stream)]


def test_tokenize_transition():
    assert tokenize_transition("10/99d") == [
        (TokenKind.CLASS_ID, "10"),
        (TokenKind.SLASH, "/"),
        (TokenKind.DESTINATION, "99"),
        (TokenKind.ACTION, "d"),
    ]


def test_tokenize_transition_any_action_character():
    assert tokenize_transition("2/1x")[-1] == (TokenKind.ACTION, "x")


@pytest.mark.parametrize(
    "word", ["", "2", "2/", "2/1", "/1s", "2-1s", "a/1s", "2/bs", "2/1ss", "2/1s,"]
)
def test_tokenize_malformed_transition(word):
    with pytest.raises(TokenizationError):
        tokenize_transition(word)
