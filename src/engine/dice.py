"""
Fair Dice - Dice and Dice Pool

A die is an immutable tuple of faces. Rolling picks a uniformly random
*index*, so a face listed twice is twice as likely as a face listed once.

The pool hands out dice by index; once taken, a die cannot be taken again.
"""

import random
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence

from src.engine.errors import PoolIndexError
from src.engine.validators import validate_faces


@dataclass(frozen=True)
class Die:
    """
    Immutable weighted die.

    Attributes:
        faces: Face values in order; repeated values carry extra weight
    """
    faces: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate and normalize faces."""
        object.__setattr__(self, "faces", validate_faces(self.faces))

    def __len__(self) -> int:
        return len(self.faces)

    def __str__(self) -> str:
        return "[" + ",".join(str(v) for v in self.faces) + "]"

    @classmethod
    def from_sequence(cls, faces: Sequence[int]) -> "Die":
        """Create a Die from any sequence type."""
        return cls(faces=tuple(faces))

    def roll(self, rng: random.Random | None = None) -> int:
        """Draw one face.

        Args:
            rng: Random source; the module-level generator when omitted

        Returns:
            A value taken from ``faces``
        """
        source = rng if rng is not None else random
        return self.faces[source.randrange(len(self.faces))]


class DicePool:
    """
    Ordered, shrinking collection of dice.

    Dice leave the pool only through :meth:`take`, so no index is ever
    handed out twice.
    """

    PRESET_FACES: ClassVar[tuple[tuple[int, ...], ...]] = (
        (2, 2, 4, 4, 9, 9),
        (1, 1, 6, 6, 8, 8),
        (3, 3, 5, 5, 7, 7),
    )

    def __init__(self, dice: Sequence[Die]) -> None:
        self._dice: list[Die] = list(dice)

    @classmethod
    def preset(cls) -> "DicePool":
        """Build the fixed non-transitive set of three dice."""
        return cls([Die.from_sequence(faces) for faces in cls.PRESET_FACES])

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(tuple(self._dice))

    @property
    def dice(self) -> tuple[Die, ...]:
        """Snapshot of the remaining dice in pool order."""
        return tuple(self._dice)

    def remaining_count(self) -> int:
        return len(self._dice)

    def take(self, index: int) -> Die:
        """
        Remove and return the die at ``index``.

        Args:
            index: Position in the remaining pool (0-based)

        Returns:
            The removed Die

        Raises:
            PoolIndexError: If ``index`` is not a valid position
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise PoolIndexError(f"Dice index must be an integer, got {type(index).__name__}.")
        if not (0 <= index < len(self._dice)):
            raise PoolIndexError(
                f"Dice index {index} is out of range. "
                f"Must be between 0 and {len(self._dice) - 1}."
            )
        return self._dice.pop(index)
