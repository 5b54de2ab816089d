from dataclasses import dataclass

from _dfascan.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in a transition matrix description, refers to the characters
    between start and end of the stream it was tokenized from.
    """

    kind: TokenKind
    start: int
    end: int

    def get_value(self, stream):
        """
        :returns: The characters of the token, ie. for a token of
            kind=TokenKind.WORD the string returned could be "2/1s".
        """
        go_back = stream.tell()
        stream.seek(self.start)
        value = stream.read(self.end - self.start)
        stream.seek(go_back)
        return value
