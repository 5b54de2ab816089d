import io

import pytest

from _dfascan.char_class import CharClass
from _dfascan.exceptions import (
    MalformedHeaderError,
    MalformedRowError,
    MalformedTransitionError,
)
from _dfascan.parser import (
    StateRow,
    TableHeader,
    TableParser,
    TransitionSpec,
    leading_int,
    split_lines,
)
from _dfascan.table import REJECT, Action
from _dfascan.tokenizer import DescriptionTokenizer

HEADER = "states 4\nstart 0\naccept 3\n"


def make_parser(contents):
    stream = io.StringIO(contents)
    return TableParser(iter(DescriptionTokenizer(stream)), stream)


@pytest.mark.parametrize(
    "text, expected",
    [("5", 5), ("5,", 5), ("12ab", 12), ("007", 7), ("0", 0), ("", None), ("a5", None)],
)
def test_leading_int(text, expected):
    assert leading_int(text) == expected


def test_leading_int_only_ascii_digits():
    assert leading_int("١") is None


def test_split_lines():
    stream = io.StringIO("a b\n\nc")
    lines = [
        (number, [w.get_value(stream) for w in words])
        for number, words in split_lines(iter(DescriptionTokenizer(stream)))
    ]
    assert lines == [(1, ["a", "b"]), (2, []), (3, ["c"])]


def test_parse_header():
    assert make_parser("n 4,\nstart 1\nfinal 3").parse_header() == TableHeader(4, 1, 3)


@pytest.mark.parametrize(
    "contents, match",
    [
        ("", "ended before the number of states"),
        ("states 4\nstart 0\n", "ended before the accept state"),
        ("states\nstart 0\naccept 3\n", "line 1: expected a label"),
        ("\nstates 4\nstart 0\naccept 3\n", "line 1: expected a label"),
        ("states x\nstart 0\naccept 3\n", "line 1: number of states 'x'"),
        ("states 4\nstart -1\naccept 3\n", "line 2: start state '-1'"),
        ("states 4\nstart 0\naccept ,3\n", "line 3: accept state ',3'"),
        ("states 0\nstart 0\naccept 0\n", "at least one state"),
        ("states 4\nstart 4\naccept 3\n", "line 2: start state 4 is not one"),
        ("states 4\nstart 0\naccept 7\n", "line 3: accept state 7 is not one"),
    ],
)
def test_malformed_header(contents, match):
    with pytest.raises(MalformedHeaderError, match=match):
        make_parser(contents).parse_header()


def test_header_trailing_words_warns():
    with pytest.warns(UserWarning, match="trailing words"):
        header = make_parser("states 4 extra\nstart 0\naccept 3\n").parse_header()
    assert header.num_states == 4


def test_parse_rows():
    parser = make_parser(HEADER + "2 2/1s 9/99d\n\n0,\t1/3x\n")
    with pytest.warns(UserWarning, match="treating it as drop"):
        rows = list(parser)

    assert rows == [
        StateRow(
            2,
            (
                TransitionSpec(CharClass.ALPHA, 1, "s"),
                TransitionSpec(CharClass.EOF, REJECT, "d"),
            ),
            4,
        ),
        StateRow(0, (TransitionSpec(CharClass.NEWLINE, 3, "x"),), 6),
    ]
    assert rows[1].transitions[0].action == Action.DROP


def test_parse_row_without_transitions():
    assert list(make_parser(HEADER + "1")) == [StateRow(1, (), 4)]


def test_iterating_parses_header():
    parser = make_parser(HEADER + "1 2/1s\n")
    assert [row.state for row in parser] == [1]
    assert parser.header == TableHeader(4, 0, 3)


@pytest.mark.parametrize(
    "row, match",
    [
        ("x 2/1s", "line 4: state 'x' is not a number"),
        ("4 2/1s", "line 4: state 4 is not one of the 4 states"),
        ("99 2/1s", "state 99 is not one of"),
    ],
)
def test_malformed_row(row, match):
    with pytest.raises(MalformedRowError, match=match):
        list(make_parser(HEADER + row + "\n"))


@pytest.mark.parametrize(
    "row, match",
    [
        ("0 2/1", "'2/1' is not of the form"),
        ("0 2:1s", "'2:1s' is not of the form"),
        ("0 2/1s,", "'2/1s,' is not of the form"),
        ("0 12/1s", "unknown character class 12"),
        ("0 2/4s", "destination 4 in '2/4s'"),
        ("0 2/98d", "destination 98"),
    ],
)
def test_malformed_transition(row, match):
    with pytest.raises(MalformedTransitionError, match=match):
        list(make_parser(HEADER + row + "\n"))
