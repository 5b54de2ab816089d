import string

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _dfascan.char_class import EOF, NUM_CLASSES, CharClass, classify


def test_num_classes():
    assert NUM_CLASSES == 12
    assert [int(c) for c in CharClass] == list(range(NUM_CLASSES))


@pytest.mark.parametrize(
    "symbols, expected",
    [
        ("\t ", CharClass.WHITESPACE),
        ("\n", CharClass.NEWLINE),
        (string.ascii_letters + "_", CharClass.ALPHA),
        ("0", CharClass.DIGIT_0),
        ("1234567", CharClass.DIGIT_1_7),
        ("89", CharClass.DIGIT_8_9),
        ("/", CharClass.SLASH),
        ("*", CharClass.STAR),
        ("%+-", CharClass.ARITH_OP),
        ("#@!.,;:()[]{}'\"\r\x0b\x0c\x00\x7f\xe6\xff", CharClass.OTHER),
    ],
)
def test_classify(symbols, expected):
    assert all(classify(symbol) == expected for symbol in symbols)


def test_classify_eof():
    assert classify(EOF) == CharClass.EOF


def test_classify_is_total():
    domain = [chr(code) for code in range(256)] + [EOF]
    classes = [classify(symbol) for symbol in domain]

    assert all(isinstance(c, CharClass) for c in classes)
    assert CharClass.ERROR not in classes
    assert set(classes) == set(CharClass) - {CharClass.ERROR}


@given(st.characters())
def test_classify_any_character(character):
    assert classify(character) in set(CharClass) - {CharClass.EOF, CharClass.ERROR}


@pytest.mark.parametrize(
    "symbol, expected",
    [(b"a", CharClass.ALPHA), (b"\n", CharClass.NEWLINE), (b"", CharClass.EOF)],
)
def test_classify_bytes(symbol, expected):
    assert classify(symbol) == expected


def test_classify_rejects_strings():
    with pytest.raises(ValueError, match="single symbol"):
        classify("ab")
