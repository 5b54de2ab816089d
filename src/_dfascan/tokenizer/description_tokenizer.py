from _dfascan.tokenizer.combinators import bind, dropped, one_of, repeated
from _dfascan.tokenizer.common import tokenize_literal, tokenize_while
from _dfascan.tokenizer.errors import TokenizationError
from _dfascan.tokenizer.token_kind import TokenKind


def is_delimiter(char):
    return char.isspace() and char != "\n"


def is_word_character(char):
    return not char.isspace()


class DescriptionTokenizer:
    """
    The description tokenizer is an iterable for the tokens of a
    transition matrix description, ie. yields

    [
        Token(TokenKind.WORD, 0, 6),
        Token(TokenKind.WORD, 7, 8),
        Token(TokenKind.NEWLINE, 8, 9),
    ]

    for a stream containing "states 3\\n". Spaces, tabs and other
    whitespace besides newline delimit words but yield no tokens.

    The stream has to be seekable, with tell() giving character offsets
    (such as io.StringIO).
    """

    def __init__(self, stream):
        self.stream = stream

    def __iter__(self):
        return self.tokenize_description()

    def tokenize_description(self):
        yield from repeated(one_of(self.tokenize_newline, self.tokenize_word))()
        yield from self.tokenize_end_of_file()

    @property
    def tokenize_delimiter(self):
        return repeated(dropped(tokenize_while(self.stream, is_delimiter, None)))

    @property
    def tokenize_newline(self):
        return bind(
            self.tokenize_delimiter,
            tokenize_literal(self.stream, "\n", TokenKind.NEWLINE),
        )

    @property
    def tokenize_word(self):
        return bind(
            self.tokenize_delimiter,
            tokenize_while(self.stream, is_word_character, TokenKind.WORD),
        )

    def tokenize_end_of_file(self):
        yield from self.tokenize_delimiter()
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char:
            self.stream.seek(start)
            raise TokenizationError(
                f"Expected end of description at {start} got {read_char!r}"
            )
