"""
A parser consumes from an iterator of tokens (see _dfascan.tokenizer) and
generates the contents of a transition matrix description: first the header
(number of states, start state and accept state) and then one StateRow for
each non-blank line following the header.
"""

import io
import warnings
from dataclasses import dataclass

from _dfascan.char_class import NUM_CLASSES, CharClass
from _dfascan.exceptions import (
    MalformedHeaderError,
    MalformedRowError,
    MalformedTransitionError,
)
from _dfascan.table import REJECT, Action, destination_from_code
from _dfascan.tokenizer import TransitionTokenizer
from _dfascan.tokenizer.errors import TokenizationError
from _dfascan.tokenizer.token_kind import TokenKind

HEADER_FIELDS = ("number of states", "start state", "accept state")


def leading_int(text):
    """
    Converts the leading digits of text to an integer, ignoring any
    trailing characters, ie. leading_int("5,") == 5.

    :returns: The integer, or None if text does not start with a digit.
    """
    num_digits = 0
    while num_digits < len(text) and text[num_digits] in "0123456789":
        num_digits += 1
    if num_digits == 0:
        return None
    return int(text[:num_digits])


@dataclass(frozen=True)
class TableHeader:
    num_states: int
    start: int
    accept: int


@dataclass(frozen=True)
class TransitionSpec:
    char_class: CharClass
    destination: object
    action_char: str

    @property
    def action(self):
        return Action.from_char(self.action_char)


@dataclass(frozen=True)
class StateRow:
    state: int
    transitions: tuple
    line: int


def split_lines(tokens):
    """
    Groups tokens into lines.

    :param tokens: iterator of WORD and NEWLINE tokens.
    :returns: generator of (line number, list of WORD tokens) for each line,
        including blank lines.
    """
    line_number = 1
    words = []
    for token in tokens:
        if token.kind == TokenKind.NEWLINE:
            yield line_number, words
            line_number += 1
            words = []
        else:
            words.append(token)
    if words:
        yield line_number, words


class TableParser:
    """
    Parser of transition matrix descriptions.

    >>> from _dfascan.tokenizer import DescriptionTokenizer
    >>> buffer = io.StringIO("states 2\\nstart 0\\naccept 1\\n0 2/1s\\n")
    >>> parser = TableParser(iter(DescriptionTokenizer(buffer)), buffer)
    >>> parser.parse_header()
    TableHeader(num_states=2, start=0, accept=1)
    >>> [row.state for row in parser]
    [0]

    Iterating the parser parses the header first if parse_header has
    not been called.
    """

    def __init__(self, tokens, stream):
        """
        :param tokens: iterator of tokens, ie. DescriptionTokenizer.
        :param stream: The stream of characters the tokens refer to.
        """
        self.stream = stream
        self.lines = split_lines(tokens)
        self.header = None

    def parse_header(self):
        values = []
        for field in HEADER_FIELDS:
            try:
                line_number, words = next(self.lines)
            except StopIteration as err:
                raise MalformedHeaderError(
                    f"Description ended before the {field} line"
                ) from err
            if len(words) < 2:
                raise MalformedHeaderError(
                    f"line {line_number}: expected a label followed by the {field}"
                )
            if len(words) > 2:
                warnings.warn(
                    f"line {line_number}: ignoring trailing words after the {field}",
                    stacklevel=2,
                )
            value_str = words[1].get_value(self.stream)
            value = leading_int(value_str)
            if value is None:
                raise MalformedHeaderError(
                    f"line {line_number}: {field} {value_str!r} is not a number"
                )
            values.append(value)

        num_states, start, accept = values
        if num_states < 1:
            raise MalformedHeaderError("line 1: a table must have at least one state")
        for line_number, field, state in (
            (2, "start state", start),
            (3, "accept state", accept),
        ):
            if state >= num_states:
                raise MalformedHeaderError(
                    f"line {line_number}: {field} {state} is not one of the"
                    f" {num_states} states"
                )

        self.header = TableHeader(num_states, start, accept)
        return self.header

    def __iter__(self):
        if self.header is None:
            self.parse_header()
        for line_number, words in self.lines:
            if words:
                yield self.parse_row(line_number, words)

    def parse_row(self, line_number, words):
        """
        Parse the words of a state row, ie. the state id followed by
        any number of transitions.
        """
        state_str = words[0].get_value(self.stream)
        state = leading_int(state_str)
        if state is None:
            raise MalformedRowError(
                f"line {line_number}: state {state_str!r} is not a number"
            )
        if state >= self.header.num_states:
            raise MalformedRowError(
                f"line {line_number}: state {state} is not one of the"
                f" {self.header.num_states} states"
            )
        transitions = tuple(
            self.parse_transition(line_number, word.get_value(self.stream))
            for word in words[1:]
        )
        return StateRow(state, transitions, line_number)

    def parse_transition(self, line_number, word):
        """
        Parse a single transition word, such as "2/1s".
        """
        stream = io.StringIO(word)
        try:
            class_token, _, destination_token, action_token = TransitionTokenizer(
                stream
            )
        except TokenizationError as err:
            raise MalformedTransitionError(
                f"line {line_number}: transition {word!r} is not of the form"
                " <class>/<destination><action>"
            ) from err

        class_id = int(class_token.get_value(stream))
        if class_id >= NUM_CLASSES:
            raise MalformedTransitionError(
                f"line {line_number}: unknown character class {class_id} in {word!r}"
            )

        destination = destination_from_code(int(destination_token.get_value(stream)))
        if destination is not REJECT and destination >= self.header.num_states:
            raise MalformedTransitionError(
                f"line {line_number}: destination {destination} in {word!r} is"
                f" neither one of the {self.header.num_states} states nor"
                f" {REJECT.value}"
            )

        action_char = action_token.get_value(stream)
        if action_char not in (Action.SHIFT.value, Action.DROP.value):
            warnings.warn(
                f"line {line_number}: action {action_char!r} in {word!r} is"
                " neither 's' nor 'd', treating it as drop",
                stacklevel=2,
            )
        return TransitionSpec(CharClass(class_id), destination, action_char)
