"""
Fair Dice - Win Probability Tests
"""

import pytest
from src.engine.dice import DicePool, Die
from src.engine.probability import estimate_win_probability, probability_table


class TestEstimateWinProbability:
    """Tests for estimate_win_probability()."""

    def test_always_higher(self):
        assert estimate_win_probability(Die((6,)), Die((1,)), trials=50) == 100.0

    def test_never_higher(self):
        assert estimate_win_probability(Die((1,)), Die((6,)), trials=50) == 0.0

    def test_tie_is_not_a_win(self):
        assert estimate_win_probability(Die((3,)), Die((3,)), trials=50) == 0.0

    def test_non_transitive_pair_near_expected(self, seeded_rng):
        # [2,2,4,4,9,9] beats [1,1,6,6,8,8] with probability 5/9
        p = estimate_win_probability(
            Die((2, 2, 4, 4, 9, 9)), Die((1, 1, 6, 6, 8, 8)), trials=20000, rng=seeded_rng
        )
        assert 52.0 < p < 59.0

    def test_zero_trials_rejected(self):
        with pytest.raises(ValueError):
            estimate_win_probability(Die((1,)), Die((2,)), trials=0)

    def test_dice_unchanged(self, seeded_rng):
        a, b = Die((1, 2)), Die((3, 4))
        estimate_win_probability(a, b, trials=10, rng=seeded_rng)
        assert a.faces == (1, 2) and b.faces == (3, 4)


class TestProbabilityTable:
    """Tests for probability_table()."""

    def test_three_pairs_in_pool_order(self, preset_faces, seeded_rng):
        rows = probability_table(DicePool.preset().dice, trials=100, rng=seeded_rng)
        assert [(r.user_faces, r.computer_faces) for r in rows] == [
            (preset_faces[0], preset_faces[1]),
            (preset_faces[0], preset_faces[2]),
            (preset_faces[1], preset_faces[2]),
        ]

    def test_probabilities_are_percentages(self, seeded_rng):
        rows = probability_table(DicePool.preset().dice, trials=100, rng=seeded_rng)
        assert all(0.0 <= r.win_probability <= 100.0 for r in rows)
