"""
Fair Dice - Game Engine Base Classes

This module defines the enums and immutable records shared across the game
engine. Records are frozen dataclasses so they can be passed between phases
without being mutated along the way.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class Phase(Enum):
    """Phases of a game session, in the order they are entered."""
    INIT = auto()
    FIRST_MOVE = auto()
    DICE_SELECTION = auto()
    ROLL_EXCHANGE = auto()
    DONE = auto()


class Participant(Enum):
    """The two sides of a session."""
    COMPUTER = "computer"
    USER = "user"


class EventKind(Enum):
    """Events emitted by a session as it moves between phases."""
    COMMITMENT_DISCLOSED = auto()
    PROMPT = auto()
    FIRST_MOVE_RESOLVED = auto()
    DICE_ASSIGNED = auto()
    FAIR_NUMBER = auto()
    ROLL_RESOLVED = auto()
    GAME_FINISHED = auto()
    INPUT_REJECTED = auto()
    HELP = auto()
    SESSION_CANCELLED = auto()


@dataclass(frozen=True)
class Commitment:
    """
    A committed random value for one fairness round.

    Only ``tag`` and ``range`` are disclosed when the round opens; ``value``
    and ``secret`` stay out of the repr so they cannot leak through logs.

    Attributes:
        range: Exclusive upper bound of the committed value
        tag: Hex HMAC of ``str(value)`` keyed by ``secret``
        value: The committed value, in ``[0, range)``
        secret: HMAC key, at least 256 bits
    """
    range: int
    tag: str
    value: int = field(repr=False)
    secret: bytes = field(repr=False)


@dataclass(frozen=True)
class Reveal:
    """Held-back fields of a commitment, disclosed after the counterpart answers."""
    value: int
    secret: bytes

    @property
    def secret_hex(self) -> str:
        """The secret as uppercase hex, the form shown to the user."""
        return self.secret.hex().upper()


@dataclass(frozen=True)
class DiceConfiguration:
    """
    Parsed startup input.

    Attributes:
        values: Integers supplied on the command line
    """
    values: tuple[int, ...]


@dataclass(frozen=True)
class ProbabilityRow:
    """Estimated chance that ``user_faces`` beats ``computer_faces``."""
    user_faces: tuple[int, ...]
    computer_faces: tuple[int, ...]
    win_probability: float


@dataclass(frozen=True)
class SessionEvent:
    """A single observable step of a session."""
    kind: EventKind
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]
