"""
Fair Dice - Win Probability Estimates

Monte Carlo estimates behind the ``?`` help command. Read-only: the dice
passed in are never modified and no session state is touched.
"""

import random
from itertools import combinations
from typing import Sequence

from src.engine.base import ProbabilityRow
from src.engine.dice import Die


def estimate_win_probability(
    user_die: Die,
    computer_die: Die,
    trials: int = 10000,
    rng: random.Random | None = None,
) -> float:
    """
    Estimate how often ``user_die`` rolls strictly higher than ``computer_die``.

    Args:
        user_die: Die rolled for the user
        computer_die: Die rolled for the computer
        trials: Number of independent roll pairs
        rng: Random source shared by both dice

    Returns:
        Win percentage in ``[0, 100]``
    """
    if trials <= 0:
        raise ValueError(f"Trials must be positive, got {trials}.")

    wins = 0
    for _ in range(trials):
        if user_die.roll(rng) > computer_die.roll(rng):
            wins += 1
    return wins / trials * 100


def probability_table(
    dice: Sequence[Die],
    trials: int = 10000,
    rng: random.Random | None = None,
) -> tuple[ProbabilityRow, ...]:
    """Estimate win chances for every unordered pair of ``dice`` in order."""
    return tuple(
        ProbabilityRow(
            user_faces=user_die.faces,
            computer_faces=computer_die.faces,
            win_probability=estimate_win_probability(user_die, computer_die, trials, rng),
        )
        for user_die, computer_die in combinations(dice, 2)
    )
