class TableBuildError(Exception):
    """
    Raised when a transition matrix description cannot be turned into a
    transition table.
    """

    pass


class MalformedHeaderError(TableBuildError):
    """
    Raised when one of the three header lines (number of states, start
    state and accept state) is missing or does not contain a valid number.
    """

    pass


class MalformedRowError(TableBuildError):
    """
    Raised when a state row does not start with the id of a state in the
    table.
    """

    pass


class MalformedTransitionError(TableBuildError):
    """
    Raised when a transition in a state row is not of the form
    <class>/<destination><action>, or refers to an unknown class or state.
    """

    pass


class ScanError(Exception):
    """
    Base class of failures while scanning. Reaching the reject state is
    not a failure, it is reported as a Rejected event.
    """

    pass


class LexemeTooLongError(ScanError):
    """
    Raised by the scanner when a lexeme grows beyond the maximum length
    it was configured with.
    """

    pass
