"""Game presets for the draw calculator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameTemplate:
    """Deck and opening-hand rules for one card game."""

    key: str
    name: str
    deck_size: int
    base_hand_size: int
    first_player_draw: int
    second_player_draw: int
    max_copies_in_deck: int
    description: str

    def turn_draw(self, is_first_player: bool) -> int:
        """Cards drawn at the start of the seat's first turn."""
        return self.first_player_draw if is_first_player else self.second_player_draw


MAX_CARD_GROUPS = 3

DEFAULT_GAME_TEMPLATE = "custom"

GAME_TEMPLATES: dict[str, GameTemplate] = {
    template.key: template
    for template in (
        GameTemplate(
            key="custom",
            name="Custom",
            deck_size=40,
            base_hand_size=5,
            first_player_draw=0,
            second_player_draw=1,
            max_copies_in_deck=4,
            description="Set every value yourself. Keep the per-card copy limit in mind.",
        ),
        GameTemplate(
            key="yugioh",
            name="Yu-Gi-Oh! OCG",
            deck_size=40,
            base_hand_size=5,
            first_player_draw=0,
            second_player_draw=1,
            max_copies_in_deck=3,
            description=(
                "Deck: 40-60 cards. Opening hand 5. No draw on the first player's first turn. "
                "Up to 3 copies of a card."
            ),
        ),
        GameTemplate(
            key="pokemon",
            name="Pokemon TCG",
            deck_size=60,
            base_hand_size=7,
            first_player_draw=0,
            second_player_draw=0,
            max_copies_in_deck=4,
            description=(
                "Deck: 60 cards. Opening hand 7. Up to 4 copies of a card "
                "(basic Energy excluded)."
            ),
        ),
        GameTemplate(
            key="pokemon_pocket",
            name="Pokemon TCG Pocket",
            deck_size=20,
            base_hand_size=5,
            first_player_draw=1,
            second_player_draw=1,
            max_copies_in_deck=4,
            description=(
                "Deck: 20 cards. Opening hand 5. Both players draw 1 at the start of their "
                "first turn."
            ),
        ),
        GameTemplate(
            key="mtg",
            name="Magic: The Gathering (Constructed)",
            deck_size=60,
            base_hand_size=7,
            first_player_draw=0,
            second_player_draw=1,
            max_copies_in_deck=4,
            description=(
                "Deck: at least 60 cards. Opening hand 7. The player on the play skips the "
                "first draw. Up to 4 copies of a card (basic lands excluded)."
            ),
        ),
        GameTemplate(
            key="onepiece",
            name="One Piece Card Game",
            deck_size=50,
            base_hand_size=5,
            first_player_draw=0,
            second_player_draw=1,
            max_copies_in_deck=4,
            description=(
                "Deck: 50 cards. Opening hand 5. No draw on the first player's first turn. "
                "Up to 4 copies of a card."
            ),
        ),
        GameTemplate(
            key="duelmasters",
            name="Duel Masters",
            deck_size=40,
            base_hand_size=5,
            first_player_draw=0,
            second_player_draw=1,
            max_copies_in_deck=4,
            description=(
                "Deck: 40 cards. Opening hand 5. No draw on the first player's first turn. "
                "Up to 4 copies of a card."
            ),
        ),
    )
}


def get_game_template(key: str) -> GameTemplate:
    """Return the preset for ``key``; raises KeyError for unknown games."""
    try:
        return GAME_TEMPLATES[key]
    except KeyError:
        raise KeyError(f"Unknown game template: {key!r}") from None
