from _dfascan.tokenizer.errors import TokenizationError


def bind(*tokenizers):
    """
    Combinator for tokenizers.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that yields the tokens of each tokenizer in
        sequence, and fails as soon as one of them fails.
    """

    def bound_tokenizer():
        for tok in tokenizers:
            yield from tok()

    return bound_tokenizer


def one_of(*tokenizers):
    """
    Combinator for tokenizers.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that yields tokens from the
    first tokenizer in tokenizers that succeeds.
    """

    def one_of_tokenizer():
        errors = []
        for tok in tokenizers:
            try:
                yield from tok()
                return
            except TokenizationError as err:
                errors.append(str(err))

        raise TokenizationError(
            "Tokenization failed, due to one of\n*" + ("\n*".join(errors))
        )

    return one_of_tokenizer


def repeated(tokenizer):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from tokenizer()
        except TokenizationError:
            pass

    return repeated_tokenizer


def dropped(tokenizer):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that consumes what the given tokenizer consumes, but
        yields no tokens.
    """

    def dropping_tokenizer():
        for _ in tokenizer():
            pass
        yield from ()

    return dropping_tokenizer
