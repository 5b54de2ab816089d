import io
import pathlib
from contextlib import contextmanager

from _dfascan.exceptions import TableBuildError
from _dfascan.parser import TableParser
from _dfascan.table import TableBuilder
from _dfascan.tokenizer import DescriptionTokenizer


def as_text(textlike):
    """
    If a bytelike object, decode it as utf-8, otherwise do nothing.
    """
    if hasattr(textlike, "decode"):
        try:
            textlike = textlike.decode("utf-8")
        except UnicodeDecodeError as err:
            raise TableBuildError(f"Description is not valid utf-8: {err}") from err
    return textlike


def build(description):
    """
    Builds the transition table of a transition matrix description, ie.

    >>> from _dfascan.char_class import CharClass
    >>> table = build("states 2\\nstart 0\\naccept 1\\n0 2/0s 0/1d\\n")
    >>> table.transition(0, CharClass.ALPHA)
    Transition(char_class=<CharClass.ALPHA: 2>, destination=0, action=<Action.SHIFT: 's'>)

    Transitions not given in the description go to REJECT with the drop
    action. When a state row gives the same class more than once, possibly
    over several rows for the same state, the last one is used.

    :param description: The contents of a transition matrix file, as a
        string or as utf-8 encoded bytes.
    :raises TableBuildError: If the description is malformed.
    """
    stream = io.StringIO(as_text(description))
    parser = TableParser(iter(DescriptionTokenizer(stream)), stream)
    header = parser.parse_header()

    builder = TableBuilder(header.num_states, header.start, header.accept)
    for row in parser:
        for spec in row.transitions:
            builder.set_transition(
                row.state, spec.char_class, spec.destination, spec.action
            )

    return builder.build()


@contextmanager
def open_description(filelike):
    """
    Context manager giving a stream for the filelike, opening (and
    closing) the file if given a path.
    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        yield file_stream
    finally:
        if did_open:
            file_stream.close()


def read_table(filelike):
    """
    Reads a transition matrix file and returns its transition table,
    ie. table = read_table("/my/file.tm").

    :param filelike: Path to the file (str or pathlib.Path) or an opened
        text or byte stream.
    :raises OSError: If the file cannot be opened.
    :raises TableBuildError: If the description is malformed.
    """
    with open_description(filelike) as stream:
        description = stream.read()
    return build(description)
