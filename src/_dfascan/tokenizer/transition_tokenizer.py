from _dfascan.tokenizer.combinators import bind
from _dfascan.tokenizer.common import tokenize_literal, tokenize_while
from _dfascan.tokenizer.errors import TokenizationError
from _dfascan.tokenizer.token import Token
from _dfascan.tokenizer.token_kind import TokenKind


def is_digit(char):
    # str.isdigit also accepts non-ascii digits
    return char in "0123456789"


class TransitionTokenizer:
    """
    Tokenizes a single transition, ie. yields

    [
        Token(TokenKind.CLASS_ID, 0, 1),
        Token(TokenKind.SLASH, 1, 2),
        Token(TokenKind.DESTINATION, 2, 4),
        Token(TokenKind.ACTION, 4, 5),
    ]

    for a stream containing "2/10s". Raises TokenizationError if the stream
    contains anything else, including trailing characters after the action.
    """

    def __init__(self, stream):
        self.stream = stream

    def __iter__(self):
        return self.tokenize_transition()

    def tokenize_transition(self):
        yield from bind(
            tokenize_while(self.stream, is_digit, TokenKind.CLASS_ID),
            tokenize_literal(self.stream, "/", TokenKind.SLASH),
            tokenize_while(self.stream, is_digit, TokenKind.DESTINATION),
            self.tokenize_action,
        )()
        yield from self.tokenize_end_of_transition()

    def tokenize_action(self):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if not read_char or read_char.isspace():
            self.stream.seek(start)
            raise TokenizationError(f"Expected action character at {start}")
        yield Token(TokenKind.ACTION, start, self.stream.tell())

    def tokenize_end_of_transition(self):
        start = self.stream.tell()
        rest = self.stream.read()
        if rest:
            self.stream.seek(start)
            raise TokenizationError(
                f"Unexpected {rest!r} after action character at {start}"
            )
        return iter([])
