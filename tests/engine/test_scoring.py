"""
Farkle - Scoring Engine Tests

Tests for triplet and single-die scoring, leftovers, and bust detection.
"""

import itertools

import pytest
from src.engine.dice import DiceRoll, FaceValue
from src.engine.scoring import (
    ScoringCategory,
    calculate_score,
    has_any_combination,
)


class TestEmptySelection:
    """An empty selection is a precondition failure, not a bust."""

    def test_empty_is_not_valid(self):
        result = calculate_score(())
        assert not result.is_valid
        assert result.is_empty

    def test_empty_has_no_leftover(self):
        result = calculate_score(())
        assert result.leftover == ()
        assert result.points == 0

    def test_empty_has_no_combination(self):
        assert not calculate_score(()).has_combination


class TestSingleDieScoring:
    """Tests for single die scoring (1s and 5s)."""

    def test_single_one_scores_100(self):
        result = calculate_score((1,))
        assert result.is_valid
        assert result.points == 100

    def test_single_five_scores_50(self):
        result = calculate_score((5,))
        assert result.is_valid
        assert result.points == 50

    def test_two_ones_score_200(self):
        assert calculate_score((1, 1)).points == 200

    def test_one_and_five_score_150(self):
        result = calculate_score((5, 1))
        assert result.points == 150
        assert [b.category for b in result.breakdown] == [
            ScoringCategory.SINGLE_ONE,
            ScoringCategory.SINGLE_FIVE,
        ]

    @pytest.mark.parametrize("value", [2, 3, 4, 6])
    def test_non_scoring_single_is_leftover(self, value: int):
        result = calculate_score((value,))
        assert not result.is_valid
        assert not result.is_empty
        assert result.leftover == (value,)


class TestThreeOfAKind:
    """Tests for triplet scoring."""

    def test_three_ones_scores_1000(self):
        result = calculate_score((1, 1, 1))
        assert result.points == 1000
        assert result.breakdown[0].category == ScoringCategory.THREE_OF_A_KIND

    @pytest.mark.parametrize("value,expected", [
        (2, 200),
        (3, 300),
        (4, 400),
        (5, 500),
        (6, 600),
    ])
    def test_three_of_kind_scores_value_times_100(self, value: int, expected: int):
        result = calculate_score((value, value, value))
        assert result.is_valid
        assert result.points == expected

    def test_four_fours_leaves_one_four(self):
        result = calculate_score((4, 4, 4, 4))
        assert not result.is_valid
        assert result.leftover == (4,)

    def test_four_ones_scores_triplet_plus_single(self):
        assert calculate_score((1, 1, 1, 1)).points == 1100

    def test_five_ones_scores_triplet_plus_two_singles(self):
        assert calculate_score((1, 1, 1, 1, 1)).points == 1200

    def test_six_ones_scores_two_triplets(self):
        result = calculate_score((1, 1, 1, 1, 1, 1))
        assert result.points == 2000
        assert len(result.breakdown) == 2

    @pytest.mark.parametrize("value", [2, 3, 4, 6])
    def test_six_of_a_kind_scores_two_triplets(self, value: int):
        result = calculate_score((value,) * 6)
        assert result.is_valid
        assert result.points == value * 200

    def test_two_different_triplets(self):
        result = calculate_score((6, 2, 6, 2, 6, 2))
        assert result.points == 800
        assert [b.dice_values[0] for b in result.breakdown] == [2, 6]


class TestMixedCombinations:
    """Tests for triplets combined with singles."""

    def test_ones_and_fives_triplets(self):
        assert calculate_score((1, 1, 1, 5, 5, 5)).points == 1500

    def test_triplet_plus_single_five(self):
        assert calculate_score((4, 4, 4, 5)).points == 450

    def test_triplets_plus_six_leaves_six(self):
        result = calculate_score((1, 1, 1, 5, 5, 6))
        assert not result.is_valid
        assert result.leftover == (6,)
        assert result.has_combination

    def test_leftover_keeps_input_order(self):
        result = calculate_score((6, 1, 2, 5, 3))
        assert result.leftover == (6, 2, 3)

    def test_fixture_valid_rolls(self, valid_scoring_rolls):
        for name, (dice, expected) in valid_scoring_rolls.items():
            result = calculate_score(dice)
            assert result.is_valid, name
            assert result.points == expected, name

    def test_fixture_invalid_rolls(self, invalid_scoring_rolls):
        for name, (dice, leftover) in invalid_scoring_rolls.items():
            result = calculate_score(dice)
            assert not result.is_valid, name
            assert result.leftover == leftover, name


class TestOrderIndependence:
    """Scoring depends on the multiset only."""

    @pytest.mark.parametrize("dice", [
        (1, 1, 1, 5, 5, 5),
        (4, 4, 4, 5),
        (1, 1, 1, 1, 5),
        (2, 2, 2, 3, 3, 3),
    ])
    def test_all_permutations_score_the_same(self, dice: tuple[int, ...]):
        expected = calculate_score(dice).points
        for permutation in set(itertools.permutations(dice)):
            result = calculate_score(permutation)
            assert result.is_valid
            assert result.points == expected

    def test_permutations_leave_the_same_multiset(self):
        for permutation in set(itertools.permutations((1, 4, 4, 6, 5))):
            leftover = calculate_score(permutation).leftover
            assert sorted(leftover) == [4, 4, 6]


class TestInputTypes:
    """Tests for accepted inputs."""

    def test_accepts_dice_roll(self):
        roll = DiceRoll.from_sequence([5, 5, 5])
        assert calculate_score(roll).points == 500

    def test_leftover_values_are_face_values(self):
        result = calculate_score([2])
        assert isinstance(result.leftover[0], FaceValue)

    @pytest.mark.parametrize("value", [0, 7, -1])
    def test_rejects_invalid_face(self, value: int):
        with pytest.raises(ValueError):
            calculate_score((1, value))


class TestHasAnyCombination:
    """Bust detection counts partial scoring."""

    def test_bust_roll(self):
        assert not has_any_combination((2, 3, 4, 6, 2, 3))

    def test_partial_roll_counts(self):
        assert has_any_combination((2, 3, 4, 6, 2, 5))

    def test_full_roll_counts(self):
        assert has_any_combination((1, 1, 1, 5, 5, 5))

    def test_pair_is_bust(self):
        assert not has_any_combination((4, 4))


class TestScoringResultStr:
    def test_valid_result_lists_breakdown(self):
        text = str(calculate_score((4, 4, 4, 5)))
        assert "Total: 450 points" in text
        assert "Three 4s: 400" in text
        assert "Single 5: 50" in text

    def test_invalid_result_lists_unused(self):
        assert str(calculate_score((2, 3))) == "Invalid combination, unused dice: [2, 3]"
