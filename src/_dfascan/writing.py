import pathlib
from functools import wraps

from _dfascan.char_class import CharClass
from _dfascan.scanner import EndOfInput, Recognized, Rejected, StateVisited
from _dfascan.table import Action, destination_code


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, encoding="utf-8") as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def format_transition(transition):
    return f"{destination_code(transition.destination):4d}{transition.action.value}"


def format_table(table):
    """
    The transition matrix of the table as text, with one column per
    character class and one row per state, ie.

         0    1    2    3 ...
     0  99d   0d   1s  99d ...
    """
    lines = ["Scanning using the following matrix:"]
    lines.append(
        " " + "".join(f"{int(char_class):5d}" for char_class in CharClass)
    )
    for state in table.states:
        lines.append(
            f"{state.id:2d}" + "".join(format_transition(t) for t in state.row)
        )
    return "\n".join(lines) + "\n"


def format_event(event):
    """
    The text of a scan event in the scan trace, where all visited states of
    one token are on a single line, followed by the result of the token.
    """
    if isinstance(event, StateVisited):
        return f"{destination_code(event.state)} "
    if isinstance(event, Recognized):
        return f"recognized '{event.lexeme}'\n"
    if isinstance(event, Rejected):
        return "rejected\n"
    if isinstance(event, EndOfInput):
        return "EOF\n"
    raise ValueError(f"Unknown scan event {event!r}")


@takes_stream(0, "w")
def write_trace(stream, events):
    """
    Writes the scan trace of the events to the stream as the events
    are generated.
    """
    for event in events:
        stream.write(format_event(event))
        if not isinstance(event, StateVisited):
            stream.flush()


def transition_words(table, state):
    """
    The transitions of the given state which differ from the default
    (reject with the drop action), as written in transition matrix files.
    """
    for transition in table.row(state).row:
        if transition.rejects and transition.action == Action.DROP:
            continue
        yield (
            f"{int(transition.char_class)}/"
            f"{destination_code(transition.destination)}"
            f"{transition.action.value}"
        )


@takes_stream(0, "w")
def write_table(file_stream, table):
    """
    Writes the transition matrix description of the table, so that
    read_table gives back an equal table.

    :param file_stream: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param table: The TransitionTable to write.
    """
    file_stream.write(f"states {table.num_states}\n")
    file_stream.write(f"start {table.start}\n")
    file_stream.write(f"accept {table.accept}\n")

    for state in range(table.num_states):
        words = list(transition_words(table, state))
        if words:
            file_stream.write(" ".join([str(state)] + words) + "\n")
