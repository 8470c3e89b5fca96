"""
Fair Dice Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the commit-reveal protocol, dice, and the session state machine.
"""

from src.engine.base import (
    Commitment,
    DiceConfiguration,
    EventKind,
    Participant,
    Phase,
    ProbabilityRow,
    Reveal,
    SessionEvent,
)
from src.engine.dice import DicePool, Die
from src.engine.errors import (
    ConfigurationError,
    FairDiceError,
    InputFormatError,
    IntegrityFault,
    PoolIndexError,
    SessionFinishedError,
    ValidationError,
)
from src.engine.fair_random import FairRandomProtocol
from src.engine.session import GameSession, decide_winner

__all__ = [
    # Data Classes
    "Commitment",
    "DiceConfiguration",
    "ProbabilityRow",
    "Reveal",
    "SessionEvent",
    # Enums
    "EventKind",
    "Participant",
    "Phase",
    # Errors
    "ConfigurationError",
    "FairDiceError",
    "InputFormatError",
    "IntegrityFault",
    "PoolIndexError",
    "SessionFinishedError",
    "ValidationError",
    # Engine
    "DicePool",
    "Die",
    "FairRandomProtocol",
    "GameSession",
    "decide_winner",
]
