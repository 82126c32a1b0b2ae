"""
Draw Calculator Service - Business logic behind the draw calculator window.

This module sits between the form and the probability engine:
- Validating form values before any math runs
- Applying game templates (deck size, opening hand size)
- Working out the effective hand size for the chosen seat
- Formatting results for display
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from loguru import logger

from utils.constants import (
    DEFAULT_GAME_TEMPLATE,
    GAME_TEMPLATES,
    MAX_CARD_GROUPS,
    GameTemplate,
    get_game_template,
)
from utils.math_utils import CalculationResult, TargetGroup, calculate_draw_probabilities


@dataclass(frozen=True)
class TargetCard:
    """A target card row from the form. The name is for display only."""

    name: str = ""
    count_in_deck: int = 4
    desired_count: int = 1

    def to_group(self) -> TargetGroup:
        return TargetGroup(count_in_deck=self.count_in_deck, desired_count=self.desired_count)


@dataclass(frozen=True)
class DrawCalcRequest:
    """Raw calculator form values."""

    deck_size: int
    base_hand_size: int
    game_template: str = DEFAULT_GAME_TEMPLATE
    is_first_player: bool = True
    target_cards: tuple[TargetCard, ...] = field(default_factory=lambda: (TargetCard(),))


@dataclass(frozen=True)
class DrawCalcOutcome:
    """Result of a calculator run, ready to display."""

    effective_hand_size: int
    result: CalculationResult
    target_cards: tuple[TargetCard, ...]

    @property
    def exactly_text(self) -> str:
        return format_percentage(self.result.probability_exactly)

    @property
    def at_least_text(self) -> str:
        return format_percentage(self.result.probability_at_least)

    def summary_lines(self) -> list[str]:
        lines = [
            f"{card_label(card, index)}: {card.desired_count} or more"
            for index, card in enumerate(self.target_cards, start=1)
        ]
        lines.append(f"Hand size: {self.effective_hand_size}")
        lines.append(f"Exactly: {self.exactly_text}")
        lines.append(f"At least: {self.at_least_text}")
        return lines


class DrawCalcValidationError(ValueError):
    """Raised when form values cannot be used for a calculation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def format_percentage(probability: float, digits: int = 2) -> str:
    """Render a probability as a percentage string, e.g. ``0.125 -> "12.50%"``."""
    return f"{probability * 100:.{digits}f}%"


def card_label(card: TargetCard, index: int) -> str:
    """Return the card's name, or a positional fallback when it is blank."""
    name = card.name.strip()
    return name or f"Card {index}"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def effective_hand_size(base_hand_size: int, template: GameTemplate, is_first_player: bool) -> int:
    """
    Opening hand plus the first-turn draw for the chosen seat.

    The draw comes from the template's per-seat counts rather than a flat
    extra card for the first player, so in most games the player on the draw
    sees one more card.
    """
    return base_hand_size + template.turn_draw(is_first_player)


def hand_size_caption(base_hand_size: int, template_key: str, is_first_player: bool) -> str:
    """Label text showing the hand size the calculation will use."""
    hand_size = effective_hand_size(base_hand_size, get_game_template(template_key), is_first_player)
    return f"Hand size used for the calculation (n): {hand_size}"


class DrawCalcService:
    """Service for draw calculator business logic."""

    def validate(self, request: DrawCalcRequest) -> list[str]:
        """Return every problem with ``request``; an empty list means it is usable."""
        errors: list[str] = []

        if not _is_int(request.deck_size):
            errors.append("Deck size must be a whole number")
        elif request.deck_size < 1:
            errors.append(f"Deck size must be at least 1, got {request.deck_size}")

        if not _is_int(request.base_hand_size):
            errors.append("Hand size must be a whole number")
        elif request.base_hand_size < 0:
            errors.append(f"Hand size must be non-negative, got {request.base_hand_size}")

        if request.game_template not in GAME_TEMPLATES:
            errors.append(f"Unknown game template: {request.game_template!r}")

        cards = request.target_cards
        if len(cards) < 1:
            errors.append("Specify at least one target card")
        if len(cards) > MAX_CARD_GROUPS:
            errors.append(f"At most {MAX_CARD_GROUPS} target cards are supported, got {len(cards)}")
        if _is_int(request.deck_size) and len(cards) > request.deck_size:
            errors.append("Target cards cannot outnumber the cards in the deck")

        for index, card in enumerate(cards, start=1):
            label = card_label(card, index)
            if not _is_int(card.count_in_deck):
                errors.append(f"{label}: copies in deck must be a whole number")
            elif card.count_in_deck < 0:
                errors.append(f"{label}: copies in deck must be non-negative")
            if not _is_int(card.desired_count):
                errors.append(f"{label}: desired copies must be a whole number")
            elif card.desired_count < 0:
                errors.append(f"{label}: desired copies must be non-negative")

        return errors

    def calculate(self, request: DrawCalcRequest) -> DrawCalcOutcome:
        """
        Validate the request and run the probability engine.

        Raises:
            DrawCalcValidationError: If the form values are unusable
        """
        errors = self.validate(request)
        if errors:
            logger.debug(f"Rejected draw calculation: {errors}")
            raise DrawCalcValidationError(errors)

        template = get_game_template(request.game_template)
        for index, card in enumerate(request.target_cards, start=1):
            if card.count_in_deck > template.max_copies_in_deck:
                logger.warning(
                    f"{card_label(card, index)}: {card.count_in_deck} copies exceeds the "
                    f"{template.name} limit of {template.max_copies_in_deck}"
                )

        hand_size = effective_hand_size(request.base_hand_size, template, request.is_first_player)
        groups = [card.to_group() for card in request.target_cards]
        result = calculate_draw_probabilities(request.deck_size, hand_size, groups)

        logger.info(
            f"Draw calc N={request.deck_size} n={hand_size} groups="
            f"{[(g.count_in_deck, g.desired_count) for g in groups]} -> "
            f"exactly={result.probability_exactly:.6f} at_least={result.probability_at_least:.6f}"
        )
        return DrawCalcOutcome(
            effective_hand_size=hand_size,
            result=result,
            target_cards=tuple(request.target_cards),
        )

    def apply_template(self, request: DrawCalcRequest, template_key: str) -> DrawCalcRequest:
        """Return ``request`` with the template's deck and opening hand sizes."""
        template = get_game_template(template_key)
        return replace(
            request,
            game_template=template.key,
            deck_size=template.deck_size,
            base_hand_size=template.base_hand_size,
        )

    def default_request(self, template_key: str = DEFAULT_GAME_TEMPLATE) -> DrawCalcRequest:
        """Return the form's starting values for ``template_key``."""
        template = get_game_template(template_key)
        return DrawCalcRequest(
            deck_size=template.deck_size,
            base_hand_size=template.base_hand_size,
            game_template=template.key,
        )


# Global instance for the UI layer
_default_service = None


def get_draw_calc_service() -> DrawCalcService:
    """Get the default draw calculator service instance."""
    global _default_service
    if _default_service is None:
        _default_service = DrawCalcService()
    return _default_service


def reset_draw_calc_service() -> None:
    """
    Reset the global draw calculator service instance.

    This is primarily useful for testing to ensure test isolation.
    """
    global _default_service
    _default_service = None


__all__ = [
    "DrawCalcOutcome",
    "DrawCalcRequest",
    "DrawCalcService",
    "DrawCalcValidationError",
    "TargetCard",
    "card_label",
    "effective_hand_size",
    "format_percentage",
    "get_draw_calc_service",
    "hand_size_caption",
    "reset_draw_calc_service",
]
