from _dfascan.tokenizer.errors import TokenizationError
from _dfascan.tokenizer.token import Token


def tokenize_literal(stream, literal, kind):
    """
    Token combinator for fixed tokens, ie. when the stream contains '/'
    tokenize_literal(stream, '/', TokenKind.SLASH) will yield
    Token(kind=TokenKind.SLASH, 0, 1).

    :returns: Tokenizer for the given literal, yielding a token
        of the given kind.
    :param literal: Any string to be matched by the tokenizer.
    :param kind: The kind of token yielded by the tokenizer.
    """
    literal_len = len(literal)

    def literal_tokenizer():
        start = stream.tell()

        token = stream.read(literal_len)
        if token == literal:
            end = stream.tell()
            yield Token(kind, end - literal_len, end)
        else:
            stream.seek(start)
            raise TokenizationError(f"Token {repr(token)} did not match {literal!r}")

    return literal_tokenizer


def tokenize_while(stream, predicate, kind):
    """
    Token combinator for tokens consisting of one or more characters
    satisfying predicate, ie. tokenize_while(stream, str.isalpha, kind)
    yields Token(kind, 0, 3) for stream containing "abc1".

    :param predicate: Function from a single character to bool.
    :param kind: The kind of token yielded by the tokenizer.
    """

    def while_tokenizer():
        start = stream.tell()
        end = start
        read_char = stream.read(1)
        while read_char and predicate(read_char):
            end = stream.tell()
            read_char = stream.read(1)
        stream.seek(end)
        if end == start:
            raise TokenizationError(f"Expected {kind} at {start}, got {read_char!r}")
        yield Token(kind, start, end)

    return while_tokenizer
