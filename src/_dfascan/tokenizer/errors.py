class TokenizationError(Exception):
    """
    Raised by a tokenizer when the characters at the start of the stream
    are not the token it expects. The stream is left where the tokenizer
    started, so that another tokenizer can be tried.
    """

    pass
