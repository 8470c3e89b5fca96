"""
Fair Dice - Engine Errors

Recoverable errors (bad input at a prompt) are handled by the session and
turned into rejection events. The rest abort the session.
"""


class FairDiceError(Exception):
    """Base class for every error raised by the engine."""


class ConfigurationError(FairDiceError, ValueError):
    """A die was built from an empty or non-integer face list."""


class ValidationError(FairDiceError, ValueError):
    """Startup dice input does not hold enough integers."""


class InputFormatError(FairDiceError, ValueError):
    """Prompt input is not an integer in the accepted range."""


class PoolIndexError(FairDiceError, IndexError):
    """Dice index does not point into the remaining pool."""


class IntegrityFault(FairDiceError, RuntimeError):
    """A revealed secret does not reproduce the disclosed HMAC."""


class SessionFinishedError(FairDiceError, RuntimeError):
    """Input was submitted to a session that is not accepting any."""
