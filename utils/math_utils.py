"""
Mathematical utility functions for draw probability calculations.

This module computes multivariate hypergeometric probabilities for opening
hands: the chance of drawing a desired number of copies from one or more
disjoint groups of target cards in a single hand drawn without replacement.

All counting is done with exact Python integers; values are only turned into
floats at the final division. Impossible configurations (wanting more copies
than exist, more target cards than the deck holds, and so on) are not errors
here: they simply have probability 0.0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TargetGroup:
    """A group of identical target cards: K copies in the deck, k wanted."""

    count_in_deck: int
    desired_count: int


@dataclass(frozen=True)
class CalculationResult:
    """Both probabilities for one deck/hand/target configuration."""

    probability_exactly: float
    probability_at_least: float


def combinations(n: int, k: int) -> int:
    """
    Return the binomial coefficient C(n, k) as an exact integer.

    Out-of-range selections (k < 0 or k > n) return 0 rather than raising.

    Example:
        >>> combinations(40, 5)
        658008
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        # result * (n - i + 1) is always divisible by i at this point
        result = result * (n - i + 1) // i
    return result


def _totals(groups: Sequence[TargetGroup]) -> tuple[int, int]:
    total_in_deck = sum(group.count_in_deck for group in groups)
    total_desired = sum(group.desired_count for group in groups)
    return total_in_deck, total_desired


def probability_exactly(deck_size: int, hand_size: int, groups: Sequence[TargetGroup]) -> float:
    """
    Calculate the probability of drawing exactly the desired count of every group.

    Formula: P = [Π C(K_i, k_i) × C(N-ΣK, n-Σk)] / C(N, n)

    Args:
        deck_size: Total number of cards in the deck (N)
        hand_size: Number of cards drawn (n)
        groups: Disjoint target groups with their deck counts (K_i) and desired counts (k_i)

    Returns:
        Probability as a float between 0.0 and 1.0

    Example:
        >>> # Exactly one copy of a 4-of in a 5-card hand from 40 cards
        >>> probability_exactly(40, 5, [TargetGroup(4, 1)])
        0.3580...
    """
    total_in_deck, total_desired = _totals(groups)

    if hand_size < total_desired:
        return 0.0
    if deck_size < total_in_deck:
        return 0.0
    if deck_size - total_in_deck < hand_size - total_desired:
        # Not enough non-target cards left to fill the rest of the hand
        return 0.0

    numerator = combinations(deck_size - total_in_deck, hand_size - total_desired)
    for group in groups:
        numerator *= combinations(group.count_in_deck, group.desired_count)

    denominator = combinations(deck_size, hand_size)
    if denominator == 0:
        return 0.0

    return numerator / denominator


def _sum_at_least_hands(
    groups: Sequence[TargetGroup],
    hand_size: int,
    others_in_deck: int,
) -> int:
    """Count hands meeting every group's minimum, assigning group counts depth-first."""
    # minimum_after[i] is the sum of desired counts of groups i..end
    minimum_after = [0] * (len(groups) + 1)
    for index in range(len(groups) - 1, -1, -1):
        minimum_after[index] = minimum_after[index + 1] + groups[index].desired_count

    total = 0
    # Each entry: (next group index, cards assigned so far, ways to pick them)
    stack: list[tuple[int, int, int]] = [(0, 0, 1)]
    while stack:
        index, drawn, ways = stack.pop()

        if index == len(groups):
            if drawn > hand_size or others_in_deck < hand_size - drawn:
                continue
            total += ways * combinations(others_in_deck, hand_size - drawn)
            continue

        group = groups[index]
        upper = min(group.count_in_deck, hand_size - drawn - minimum_after[index + 1])
        for count in range(max(group.desired_count, 0), upper + 1):
            stack.append(
                (index + 1, drawn + count, ways * combinations(group.count_in_deck, count))
            )
    return total


def probability_at_least(deck_size: int, hand_size: int, groups: Sequence[TargetGroup]) -> float:
    """
    Calculate the probability of drawing at least the desired count of every group.

    Enumerates every combination of per-group draw counts that meets each
    minimum and still fits in the hand, and sums the exact number of hands
    for each combination before dividing by C(N, n).

    Args:
        deck_size: Total number of cards in the deck (N)
        hand_size: Number of cards drawn (n)
        groups: Disjoint target groups with their deck counts and minimum counts

    Returns:
        Probability as a float between 0.0 and 1.0

    Example:
        >>> # At least one copy of a 4-of in a 5-card hand from 40 cards
        >>> probability_at_least(40, 5, [TargetGroup(4, 1)])
        0.4270...
    """
    denominator = combinations(deck_size, hand_size)
    if denominator == 0:
        return 0.0

    total_in_deck, _ = _totals(groups)
    favourable = _sum_at_least_hands(groups, hand_size, deck_size - total_in_deck)
    return favourable / denominator


def calculate_draw_probabilities(
    deck_size: int,
    hand_size: int,
    groups: Sequence[TargetGroup],
) -> CalculationResult:
    """Return the exactly and at-least probabilities for the same configuration."""
    return CalculationResult(
        probability_exactly=probability_exactly(deck_size, hand_size, groups),
        probability_at_least=probability_at_least(deck_size, hand_size, groups),
    )


__all__ = [
    "CalculationResult",
    "TargetGroup",
    "calculate_draw_probabilities",
    "combinations",
    "probability_at_least",
    "probability_exactly",
]
