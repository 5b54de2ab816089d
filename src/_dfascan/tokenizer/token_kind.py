from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    # Description tokens
    WORD = auto()
    NEWLINE = auto()
    # Parts of a single transition word
    CLASS_ID = auto()
    SLASH = auto()
    DESTINATION = auto()
    ACTION = auto()
