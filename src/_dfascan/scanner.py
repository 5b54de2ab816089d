"""
The scanner runs a transition table over a stream, one character at a
time, and generates scan events:

* StateVisited for each state the automaton is in, which is the start state
  when a new token is attempted and the destination after each transition.
* Recognized when the accept state is reached, with the characters shifted
  since the last token.
* Rejected when the reject destination is reached. The scanner then skips
  all characters up to and including the next whitespace or newline, and
  restarts from the start state.
* EndOfInput when the end of the stream is consumed by a transition.

When the stream ends while skipping characters after a rejection, the
events end without EndOfInput.
"""
from dataclasses import dataclass
from enum import Enum, auto, unique

from _dfascan.char_class import CharClass, as_symbol, classify
from _dfascan.exceptions import LexemeTooLongError
from _dfascan.table import REJECT, Action


@dataclass(frozen=True)
class StateVisited:
    state: object


@dataclass(frozen=True)
class Recognized:
    lexeme: str


@dataclass(frozen=True)
class Rejected:
    pass


@dataclass(frozen=True)
class EndOfInput:
    pass


# Character classes that end skipping after a rejection
RESYNC_CLASSES = (CharClass.WHITESPACE, CharClass.NEWLINE, CharClass.EOF)


@unique
class ScannerMode(Enum):
    SCANNING = auto()
    RECOVERING = auto()
    TERMINATED = auto()


class Scanner:
    """
    Scans a stream using a transition table.

    >>> import io
    >>> from _dfascan.reading import build
    >>> table = build("states 3\\nstart 0\\naccept 2\\n0 2/1s\\n1 2/1s 0/2d\\n")
    >>> scanner = Scanner(table, trace=False)
    >>> [type(event).__name__ for event in scanner.scan(io.StringIO("ab "))]
    ['Recognized', 'EndOfInput']

    A Scanner consumes the stream it is given, and is used for one
    stream only. The table is never modified, so one table can be
    used by several scanners.
    """

    def __init__(self, table, max_lexeme_length=None, trace=True):
        """
        :param table: The TransitionTable to run.
        :param max_lexeme_length: If given, LexemeTooLongError is raised
            when more characters than this is shifted into one lexeme.
        :param trace: Whether to generate StateVisited events.
        """
        self.table = table
        self.max_lexeme_length = max_lexeme_length
        self.trace = trace
        self.mode = ScannerMode.SCANNING
        self.state = table.start
        self.lexeme = []

    def reset(self):
        self.state = self.table.start
        self.lexeme = []

    def scan(self, stream):
        """
        :param stream: text stream (or byte stream, read as latin-1).
        :returns: generator of scan events.
        """
        while self.mode != ScannerMode.TERMINATED:
            symbol = as_symbol(stream.read(1))
            if self.mode == ScannerMode.RECOVERING:
                self.recover(symbol)
            else:
                yield from self.step(symbol)

    def recover(self, symbol):
        char_class = classify(symbol)
        if char_class in RESYNC_CLASSES:
            self.reset()
            self.mode = ScannerMode.SCANNING
        if char_class == CharClass.EOF:
            self.mode = ScannerMode.TERMINATED

    def step(self, symbol):
        if not self.lexeme:
            yield from self.visit(self.state)

        char_class = classify(symbol)
        transition = self.table.transition(self.state, char_class)
        if transition.action == Action.SHIFT:
            self.shift(symbol)
        self.state = transition.destination
        yield from self.visit(self.state)

        if char_class == CharClass.EOF:
            self.mode = ScannerMode.TERMINATED
            yield EndOfInput()
        elif self.state == self.table.accept:
            lexeme = "".join(self.lexeme)
            self.reset()
            yield Recognized(lexeme)
        elif self.state is REJECT:
            # the lexeme and state are reset once a whitespace is found
            self.mode = ScannerMode.RECOVERING
            yield Rejected()

    def visit(self, state):
        if self.trace:
            yield StateVisited(state)

    def shift(self, symbol):
        if (
            self.max_lexeme_length is not None
            and len(self.lexeme) >= self.max_lexeme_length
        ):
            self.mode = ScannerMode.TERMINATED
            raise LexemeTooLongError(
                f"Lexeme {''.join(self.lexeme)!r}... is longer than"
                f" {self.max_lexeme_length} characters"
            )
        self.lexeme.append(symbol)


def scan(table, stream, max_lexeme_length=None, trace=True):
    """
    Scan the stream with the given transition table, ie.

    >>> import io
    >>> from _dfascan.reading import build
    >>> table = build(
    ...     "states 3\\nstart 0\\naccept 2\\n"
    ...     "0 0/0d 1/0d 2/1s 9/0d\\n1 0/2d 1/2d 2/1s 9/2d\\n"
    ... )
    >>> for event in scan(table, io.StringIO("abc ")):
    ...     print(event)
    StateVisited(state=0)
    StateVisited(state=1)
    StateVisited(state=1)
    StateVisited(state=1)
    StateVisited(state=2)
    Recognized(lexeme='abc')
    StateVisited(state=0)
    StateVisited(state=0)
    EndOfInput()

    for a table recognizing words followed by whitespace.
    See Scanner for the parameters.
    """
    scanner = Scanner(table, max_lexeme_length=max_lexeme_length, trace=trace)
    return scanner.scan(stream)


def recognized_lexemes(table, stream, max_lexeme_length=None):
    """
    Scan the stream and generate only the recognized lexemes.
    """
    for event in scan(table, stream, max_lexeme_length=max_lexeme_length, trace=False):
        if isinstance(event, Recognized):
            yield event.lexeme
