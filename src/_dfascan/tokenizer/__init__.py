"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

A transition matrix description is tokenized in two levels. The
DescriptionTokenizer splits the description into words and newlines, and the
TransitionTokenizer splits a single word of a state row into the parts of a
transition (class id, slash, destination and action character).

The tokenizers have to be given seekable text streams.
"""

from .description_tokenizer import DescriptionTokenizer
from .transition_tokenizer import TransitionTokenizer

__all__ = ["DescriptionTokenizer", "TransitionTokenizer"]
