"""
Fair Dice - Input Validation Utilities

Provides validation functions for engine inputs. All validators either
return validated data or raise one of the engine's ``ValueError`` subclasses.
"""

from typing import Sequence

from src.engine.base import DiceConfiguration
from src.engine.errors import ConfigurationError, InputFormatError, ValidationError


def _to_int(text: str) -> int:
    """Parse an optionally signed run of ASCII digits, nothing else."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not (body.isascii() and body.isdigit()):
        raise ValueError(text)
    return int(text)


def validate_faces(faces: Sequence[int]) -> tuple[int, ...]:
    """
    Validate and normalize the faces of a die.

    Args:
        faces: Face values; repeats are allowed and act as weights

    Returns:
        Validated faces as a tuple

    Raises:
        ConfigurationError: If the sequence is empty or holds a non-integer
    """
    if isinstance(faces, (str, bytes)):
        raise ConfigurationError("Die faces must be a sequence of integers, got a string.")
    try:
        faces_tuple = tuple(faces)
    except TypeError:
        raise ConfigurationError(
            f"Die faces must be a sequence of integers, got {type(faces).__name__}."
        ) from None

    if not faces_tuple:
        raise ConfigurationError("A die needs at least one face.")

    for i, value in enumerate(faces_tuple):
        # bool is an int subclass but never a meaningful face
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"Die face at index {i} must be an integer, got {type(value).__name__}."
            )

    return faces_tuple


def parse_dice_configuration(text: str | None, min_count: int = 3) -> DiceConfiguration:
    """
    Parse the comma-separated startup input.

    Args:
        text: Raw input such as ``"2,2,4,4,9,9"``
        min_count: Minimum number of integers required

    Returns:
        DiceConfiguration holding the parsed integers

    Raises:
        ValidationError: If the input is missing, holds a non-integer,
            or has fewer than ``min_count`` values
    """
    if text is None or not text.strip():
        raise ValidationError(f"At least {min_count} dice values required, got none.")

    values = []
    for i, part in enumerate(text.split(",")):
        try:
            values.append(_to_int(part.strip()))
        except ValueError:
            raise ValidationError(
                f"Dice value at position {i} is not an integer: {part.strip()!r}."
            ) from None

    if len(values) < min_count:
        raise ValidationError(
            f"At least {min_count} dice values required, got {len(values)}."
        )

    return DiceConfiguration(values=tuple(values))


def parse_integer(text: str) -> int:
    """
    Parse a single integer typed at a prompt.

    Raises:
        InputFormatError: If the text is empty, contains a comma,
            or is not an integer
    """
    stripped = text.strip()
    if not stripped:
        raise InputFormatError("Empty input, expected a number.")
    if "," in stripped:
        raise InputFormatError(f"Expected a single number without commas, got {stripped!r}.")
    try:
        return _to_int(stripped)
    except ValueError:
        raise InputFormatError(f"Expected a whole number, got {stripped!r}.") from None


def parse_choice(text: str, low: int, high: int) -> int:
    """
    Parse an integer that must lie in ``[low, high]``.

    Args:
        text: Raw prompt input
        low: Smallest accepted value
        high: Largest accepted value

    Returns:
        The parsed integer

    Raises:
        InputFormatError: If the input is malformed or out of range
    """
    value = parse_integer(text)
    if not (low <= value <= high):
        raise InputFormatError(f"Expected a number between {low} and {high}, got {value}.")
    return value
