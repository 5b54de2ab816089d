from enum import IntEnum, unique

# What stream.read(1) returns once the stream is exhausted.
EOF = ""


@unique
class CharClass(IntEnum):
    """
    The character classes of the scanner. The integer value of each class is
    the column index used in transition matrix files.
    """

    WHITESPACE = 0
    NEWLINE = 1
    ALPHA = 2
    DIGIT_0 = 3
    DIGIT_1_7 = 4
    DIGIT_8_9 = 5
    SLASH = 6
    STAR = 7
    ARITH_OP = 8
    EOF = 9
    OTHER = 10
    ERROR = 11


NUM_CLASSES = len(CharClass)

_single_classes = {
    "\t": CharClass.WHITESPACE,
    " ": CharClass.WHITESPACE,
    "\n": CharClass.NEWLINE,
    "_": CharClass.ALPHA,
    "0": CharClass.DIGIT_0,
    "8": CharClass.DIGIT_8_9,
    "9": CharClass.DIGIT_8_9,
    "/": CharClass.SLASH,
    "*": CharClass.STAR,
    "%": CharClass.ARITH_OP,
    "+": CharClass.ARITH_OP,
    "-": CharClass.ARITH_OP,
    EOF: CharClass.EOF,
}


def as_symbol(symbol):
    """
    If given a byte like symbol, decode it as latin-1 so that every byte
    value is one symbol, otherwise do nothing.
    """
    if hasattr(symbol, "decode"):
        symbol = symbol.decode("latin-1")
    return symbol


def classify(symbol):
    """
    The character class of the given symbol.

    :param symbol: A string (or bytes) of length one, or EOF.
    :returns: The CharClass of the symbol. Every symbol belongs to exactly
        one class, CharClass.ERROR is never returned.
    """
    symbol = as_symbol(symbol)
    if len(symbol) > 1:
        raise ValueError(f"Expected a single symbol, got {symbol!r}")
    if symbol in _single_classes:
        return _single_classes[symbol]
    if "A" <= symbol <= "Z" or "a" <= symbol <= "z":
        return CharClass.ALPHA
    if "1" <= symbol <= "7":
        return CharClass.DIGIT_1_7
    return CharClass.OTHER
