"""
The transition table is the data model of the automaton: for each state
and each character class there is exactly one transition, giving the
destination state and whether the consumed character is part of the
lexeme (shift) or not (drop).

The table is stored as dense (num_states, NUM_CLASSES) numpy arrays which
are made read-only once the table is constructed, so that one table can be
shared by any number of scanners.

Transitions that do not continue any token go to the reject destination.
In transition matrix files this is encoded as the state id 99, but within
the table it is the distinct value REJECT and never a state id.
"""
from dataclasses import dataclass
from enum import Enum, unique

import numpy as np

from _dfascan.char_class import NUM_CLASSES, CharClass


@unique
class Action(Enum):
    SHIFT = "s"
    DROP = "d"

    @classmethod
    def from_char(cls, char):
        """
        The action for the given action character of a transition matrix
        file, 's' is shift and any other character is drop.
        """
        if char == cls.SHIFT.value:
            return cls.SHIFT
        return cls.DROP


@unique
class Reject(Enum):
    REJECT = 99


REJECT = Reject.REJECT


def destination_from_code(code):
    """
    :param code: A destination as written in transition matrix files.
    :returns: REJECT for the reject code, otherwise the code itself.
    """
    if code == REJECT.value:
        return REJECT
    return code


def destination_code(destination):
    """
    Inverse of destination_from_code.
    """
    if destination is REJECT:
        return REJECT.value
    return destination


@dataclass(frozen=True)
class Transition:
    char_class: CharClass
    destination: object
    action: Action

    @property
    def rejects(self):
        return self.destination is REJECT


@dataclass(frozen=True)
class State:
    """
    A state and its row of transitions. The row is indexed by character
    class, ie. state.row[CharClass.ALPHA].char_class == CharClass.ALPHA.
    """

    id: int
    row: tuple

    def __post_init__(self):
        if len(self.row) != NUM_CLASSES:
            raise ValueError(
                f"State {self.id} has {len(self.row)} transitions,"
                f" expected {NUM_CLASSES}"
            )
        for char_class, transition in zip(CharClass, self.row):
            if transition.char_class != char_class:
                raise ValueError(
                    f"Transition for {transition.char_class!r} of state {self.id}"
                    f" found in the column of {char_class!r}"
                )

    def __getitem__(self, char_class):
        return self.row[char_class]


def read_only(array):
    array.setflags(write=False)
    return array


class TransitionTable:
    """
    An immutable transition table.

    >>> table = TransitionTable(
    ...     np.full((1, NUM_CLASSES), 0), np.zeros((1, NUM_CLASSES), bool),
    ...     np.zeros((1, NUM_CLASSES), bool), start=0, accept=0)
    >>> table.transition(0, CharClass.ALPHA)
    Transition(char_class=<CharClass.ALPHA: 2>, destination=0, action=<Action.DROP: 'd'>)

    Usually constructed with TableBuilder, or from a transition matrix
    description, see dfascan.build.
    """

    def __init__(self, destinations, rejects, shifts, start, accept):
        """
        :param destinations: Integer array of shape (num_states, NUM_CLASSES)
            with the destination state of each transition. Ignored where
            rejects is true.
        :param rejects: Boolean array of the same shape, true for transitions
            to REJECT.
        :param shifts: Boolean array of the same shape, true for transitions
            with the shift action.
        :param start: The start state.
        :param accept: The accept state.
        """
        destinations = np.array(destinations, dtype=np.int32)
        rejects = np.array(rejects, dtype=np.bool_)
        shifts = np.array(shifts, dtype=np.bool_)

        if destinations.ndim != 2 or destinations.shape[1] != NUM_CLASSES:
            raise ValueError(
                f"Expected transitions of shape (states, {NUM_CLASSES}),"
                f" got {destinations.shape}"
            )
        if rejects.shape != destinations.shape or shifts.shape != destinations.shape:
            raise ValueError(
                "destinations, rejects and shifts must have the same shape,"
                f" got {destinations.shape}, {rejects.shape} and {shifts.shape}"
            )

        num_states = destinations.shape[0]
        for name, state in (("start", start), ("accept", accept)):
            if not 0 <= state < num_states:
                raise ValueError(
                    f"{name} state {state} is not one of the {num_states} states"
                )

        destinations[rejects] = REJECT.value
        kept = destinations[~rejects]
        if np.any((kept < 0) | (kept >= num_states)):
            raise ValueError(
                f"Transition destinations must be in [0, {num_states}) or REJECT"
            )

        self._destinations = read_only(destinations)
        self._rejects = read_only(rejects)
        self._shifts = read_only(shifts)
        self._start = int(start)
        self._accept = int(accept)

    @property
    def destinations(self):
        return self._destinations

    @property
    def rejects(self):
        return self._rejects

    @property
    def shifts(self):
        return self._shifts

    @property
    def start(self):
        return self._start

    @property
    def accept(self):
        return self._accept

    @property
    def num_states(self):
        return self._destinations.shape[0]

    def __len__(self):
        return self.num_states

    def transition(self, state, char_class):
        """
        :param state: Id of a state in the table.
        :param char_class: Any CharClass.
        :returns: The Transition from state on char_class.
        """
        if state is REJECT:
            raise ValueError("The reject state has no transitions")
        if not 0 <= state < self.num_states:
            raise IndexError(f"No state {state} in table of {self.num_states} states")
        char_class = CharClass(char_class)
        if self._rejects[state, char_class]:
            destination = REJECT
        else:
            destination = int(self._destinations[state, char_class])
        if self._shifts[state, char_class]:
            action = Action.SHIFT
        else:
            action = Action.DROP
        return Transition(char_class, destination, action)

    def row(self, state):
        return State(
            state, tuple(self.transition(state, char_class) for char_class in CharClass)
        )

    @property
    def states(self):
        return tuple(self.row(state) for state in range(self.num_states))

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return (
            self.start == other.start
            and self.accept == other.accept
            and np.array_equal(self._destinations, other._destinations)
            and np.array_equal(self._rejects, other._rejects)
            and np.array_equal(self._shifts, other._shifts)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"TransitionTable(num_states={self.num_states},"
            f" start={self.start}, accept={self.accept})"
        )


class TableBuilder:
    """
    Accumulates transitions for a table with the given number of states.
    Every transition starts out as (REJECT, Action.DROP) and setting a
    transition twice keeps the last one.
    """

    def __init__(self, num_states, start, accept):
        shape = (num_states, NUM_CLASSES)
        self.destinations = np.full(shape, REJECT.value, dtype=np.int32)
        self.rejects = np.ones(shape, dtype=np.bool_)
        self.shifts = np.zeros(shape, dtype=np.bool_)
        self.start = start
        self.accept = accept

    @property
    def num_states(self):
        return self.destinations.shape[0]

    def set_transition(self, state, char_class, destination, action):
        if destination is REJECT:
            self.destinations[state, char_class] = REJECT.value
            self.rejects[state, char_class] = True
        else:
            self.destinations[state, char_class] = destination
            self.rejects[state, char_class] = False
        self.shifts[state, char_class] = action == Action.SHIFT

    def build(self):
        return TransitionTable(
            self.destinations, self.rejects, self.shifts, self.start, self.accept
        )
