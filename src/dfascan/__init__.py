import dfascan.version
from _dfascan.char_class import EOF, NUM_CLASSES, CharClass, classify
from _dfascan.exceptions import (
    LexemeTooLongError,
    MalformedHeaderError,
    MalformedRowError,
    MalformedTransitionError,
    ScanError,
    TableBuildError,
)
from _dfascan.reading import build, read_table
from _dfascan.scanner import (
    EndOfInput,
    Recognized,
    Rejected,
    Scanner,
    StateVisited,
    recognized_lexemes,
    scan,
)
from _dfascan.table import (
    REJECT,
    Action,
    State,
    TableBuilder,
    Transition,
    TransitionTable,
)
from _dfascan.writing import format_event, format_table, write_table, write_trace

__version__ = dfascan.version.version

__all__ = [
    "Action",
    "CharClass",
    "EOF",
    "EndOfInput",
    "LexemeTooLongError",
    "MalformedHeaderError",
    "MalformedRowError",
    "MalformedTransitionError",
    "NUM_CLASSES",
    "REJECT",
    "Recognized",
    "Rejected",
    "ScanError",
    "Scanner",
    "State",
    "StateVisited",
    "TableBuildError",
    "TableBuilder",
    "Transition",
    "TransitionTable",
    "build",
    "classify",
    "format_event",
    "format_table",
    "read_table",
    "recognized_lexemes",
    "scan",
    "write_table",
    "write_trace",
]
