"""Unit tests for the draw probability engine."""

import itertools
import math

import pytest

from utils.math_utils import (
    CalculationResult,
    TargetGroup,
    calculate_draw_probabilities,
    combinations,
    probability_at_least,
    probability_exactly,
)

C_40_5 = 658008
C_60_7 = 386206920


class TestCombinations:
    """Tests for the exact binomial coefficient."""

    def test_small_values(self) -> None:
        assert combinations(5, 2) == 10
        assert combinations(10, 3) == 120
        assert combinations(40, 5) == C_40_5
        assert combinations(60, 7) == C_60_7

    def test_edges_return_one(self) -> None:
        assert combinations(0, 0) == 1
        assert combinations(7, 0) == 1
        assert combinations(7, 7) == 1

    def test_out_of_range_is_zero(self) -> None:
        assert combinations(4, 5) == 0
        assert combinations(4, -1) == 0
        assert combinations(-5, 2) == 0

    def test_symmetry(self) -> None:
        for n in range(0, 30):
            for k in range(0, n + 1):
                assert combinations(n, k) == combinations(n, n - k)

    def test_large_values_stay_exact(self) -> None:
        """C(200, 100) is far beyond 64 bits and must not lose precision."""
        assert combinations(200, 100) == math.comb(200, 100)
        assert combinations(200, 100) > 2**64
        assert combinations(300, 150) == combinations(299, 149) + combinations(299, 150)


class TestProbabilityExactly:
    """Tests for the exactly-k probability across one or more groups."""

    def test_single_card_from_twenty(self) -> None:
        assert probability_exactly(20, 1, [TargetGroup(1, 1)]) == pytest.approx(1 / 20)

    def test_four_of_in_forty_card_deck(self) -> None:
        """Exactly one copy of a 4-of in a 5-card hand: ~35.8%."""
        prob = probability_exactly(40, 5, [TargetGroup(4, 1)])
        assert prob == pytest.approx(235620 / C_40_5)
        assert prob == pytest.approx(0.358, abs=1e-3)

    def test_three_of_exactly_two_in_sixty(self) -> None:
        prob = probability_exactly(60, 7, [TargetGroup(3, 2)])
        assert prob == pytest.approx(12561318 / C_60_7)
        assert prob == pytest.approx(0.0287, abs=5e-3)

    def test_two_groups(self) -> None:
        prob = probability_exactly(40, 5, [TargetGroup(4, 1), TargetGroup(3, 1)])
        assert prob == pytest.approx(65472 / C_40_5)
        assert prob == pytest.approx(0.0994, abs=1e-3)

    def test_small_two_group_fraction(self) -> None:
        prob = probability_exactly(10, 3, [TargetGroup(2, 1), TargetGroup(1, 1)])
        assert prob == 14 / 120

    def test_zero_desired(self) -> None:
        """Exactly zero copies of a 4-of in 5 cards from 40: ~57.3%."""
        prob = probability_exactly(40, 5, [TargetGroup(4, 0)])
        assert prob == pytest.approx(0.573, abs=1e-3)

    def test_draw_every_copy(self) -> None:
        assert probability_exactly(10, 4, [TargetGroup(4, 4)]) == pytest.approx(1 / 210)

    def test_whole_deck_drawn(self) -> None:
        assert probability_exactly(60, 60, [TargetGroup(4, 4)]) == 1.0


class TestProbabilityAtLeast:
    """Tests for the at-least-k probability across one or more groups."""

    def test_single_card_from_twenty(self) -> None:
        assert probability_at_least(20, 1, [TargetGroup(1, 1)]) == pytest.approx(1 / 20)

    def test_four_of_in_forty_card_deck(self) -> None:
        """At least one copy of a 4-of in a 5-card hand: ~42.7%."""
        prob = probability_at_least(40, 5, [TargetGroup(4, 1)])
        assert prob == pytest.approx(281016 / C_40_5)
        assert prob == pytest.approx(0.427, abs=1e-3)

    def test_three_of_at_least_two_in_sixty(self) -> None:
        """P(X >= 2) = P(X = 2) + P(X = 3)."""
        prob = probability_at_least(60, 7, [TargetGroup(3, 2)])
        assert prob == pytest.approx((12561318 + 395010) / C_60_7)
        assert prob == pytest.approx(0.035, abs=5e-3)

    def test_two_groups(self) -> None:
        prob = probability_at_least(40, 5, [TargetGroup(4, 1), TargetGroup(3, 1)])
        assert prob == pytest.approx(82455 / C_40_5)
        assert prob == pytest.approx(0.1293, abs=5e-3)

    def test_small_two_group_fraction(self) -> None:
        """P(A >= 1, B >= 1) = P(A=1, B=1) + P(A=2, B=1) = 15/120."""
        prob = probability_at_least(10, 3, [TargetGroup(2, 1), TargetGroup(1, 1)])
        assert prob == 0.125

    def test_zero_desired_is_certain(self) -> None:
        assert probability_at_least(40, 5, [TargetGroup(4, 0)]) == 1.0
        assert probability_at_least(60, 7, [TargetGroup(4, 0), TargetGroup(20, 0)]) == 1.0

    def test_draw_every_copy_matches_exactly(self) -> None:
        groups = [TargetGroup(4, 4)]
        assert probability_at_least(10, 4, groups) == probability_exactly(10, 4, groups)

    def test_draw_every_copy_of_several_groups(self) -> None:
        """Taking every copy of each group leaves only one way to meet the minimums."""
        groups = [TargetGroup(2, 2), TargetGroup(3, 3)]
        exact = probability_exactly(10, 5, groups)
        assert exact == pytest.approx(1 / 252)
        assert probability_at_least(10, 5, groups) == exact

    def test_many_groups(self) -> None:
        """Group count is not limited by recursion depth."""
        groups = [TargetGroup(1, 1)] * 1500
        assert probability_exactly(1500, 1500, groups) == 1.0
        assert probability_at_least(1500, 1500, groups) == 1.0

    def test_three_groups_match_brute_force(self) -> None:
        """Enumeration agrees with counting every hand of a tiny deck."""
        deck = ["a"] * 3 + ["b"] * 2 + ["c"] * 2 + ["x"] * 5
        hand_size = 5
        hits = 0
        total = 0
        for hand in itertools.combinations(range(len(deck)), hand_size):
            cards = [deck[i] for i in hand]
            total += 1
            if cards.count("a") >= 1 and cards.count("b") >= 1 and cards.count("c") >= 2:
                hits += 1
        groups = [TargetGroup(3, 1), TargetGroup(2, 1), TargetGroup(2, 2)]
        assert probability_at_least(len(deck), hand_size, groups) == pytest.approx(hits / total)

    def test_group_order_does_not_matter(self) -> None:
        groups = [TargetGroup(4, 1), TargetGroup(3, 2), TargetGroup(8, 1)]
        expected = probability_at_least(60, 9, groups)
        for ordering in itertools.permutations(groups):
            assert probability_at_least(60, 9, list(ordering)) == pytest.approx(expected)

    def test_large_deck(self) -> None:
        """Big decks need exact integers well past 64 bits."""
        prob = probability_at_least(250, 40, [TargetGroup(20, 2), TargetGroup(10, 1)])
        assert 0.0 < prob < 1.0


class TestZeroProbability:
    """Impossible configurations produce 0.0 instead of raising."""

    @pytest.mark.parametrize(
        ("deck_size", "hand_size", "groups"),
        [
            (20, 5, [TargetGroup(3, 4)]),
            (20, 5, [TargetGroup(10, 6)]),
            (40, 5, [TargetGroup(30, 1), TargetGroup(15, 1)]),
            (40, 0, [TargetGroup(4, 1)]),
            (10, 11, [TargetGroup(4, 1)]),
            (40, 5, [TargetGroup(4, 3), TargetGroup(4, 3)]),
        ],
    )
    def test_both_probabilities_zero(self, deck_size, hand_size, groups) -> None:
        assert probability_exactly(deck_size, hand_size, groups) == 0.0
        assert probability_at_least(deck_size, hand_size, groups) == 0.0

    def test_empty_deck(self) -> None:
        assert probability_exactly(0, 5, [TargetGroup(0, 0)]) == 0.0
        assert probability_at_least(0, 5, [TargetGroup(0, 0)]) == 0.0


class TestProbabilityBounds:
    """Invariants that hold over a grid of small configurations."""

    CASES = [
        (deck, hand, [TargetGroup(k1, d1), TargetGroup(k2, d2)])
        for deck in (10, 20)
        for hand in (0, 3, 7)
        for k1, d1 in ((4, 0), (4, 1), (3, 2))
        for k2, d2 in ((2, 0), (2, 1), (5, 3))
    ]

    def test_exactly_never_exceeds_at_least(self) -> None:
        for deck, hand, groups in self.CASES:
            exact = probability_exactly(deck, hand, groups)
            at_least = probability_at_least(deck, hand, groups)
            assert 0.0 <= exact <= at_least + 1e-12, f"bounds broken for ({deck}, {hand}, {groups})"
            assert at_least <= 1.0 + 1e-12

    def test_raising_desired_count_never_raises_at_least(self) -> None:
        for deck, hand in itertools.product((20, 40), (5, 8)):
            previous = 1.0
            for desired in range(0, 6):
                prob = probability_at_least(deck, hand, [TargetGroup(4, desired), TargetGroup(3, 1)])
                assert prob <= previous + 1e-12
                previous = prob

    def test_exact_distribution_sums_to_one(self) -> None:
        """Summing P(A=a, B=b) over every pair covers every hand."""
        total = sum(
            probability_exactly(40, 7, [TargetGroup(4, a), TargetGroup(6, b)])
            for a in range(5)
            for b in range(7)
        )
        assert abs(total - 1.0) < 1e-10


def test_calculate_draw_probabilities_returns_both() -> None:
    result = calculate_draw_probabilities(10, 3, [TargetGroup(2, 1), TargetGroup(1, 1)])
    assert result == CalculationResult(probability_exactly=14 / 120, probability_at_least=0.125)


def test_groups_accept_tuples() -> None:
    groups = (TargetGroup(4, 1),)
    assert probability_at_least(40, 5, groups) == probability_at_least(40, 5, list(groups))
