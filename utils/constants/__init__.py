"""Application constants, re-exported for ``from utils.constants import ...``."""

from utils.constants.game_templates import (
    DEFAULT_GAME_TEMPLATE,
    GAME_TEMPLATES,
    MAX_CARD_GROUPS,
    GameTemplate,
    get_game_template,
)
from utils.constants.paths import BASE_DATA_DIR, LOG_FILE, LOGS_DIR, ensure_base_dirs
from utils.constants.ui import (
    CALCULATE_BUTTON_COLOUR,
    DARK_ACCENT,
    DARK_BG,
    DARK_PANEL,
    DRAW_CALC_FRAME_MIN_SIZE,
    DRAW_CALC_FRAME_SIZE,
    DRAW_CALC_SECTION_PADDING,
    DRAW_CALC_SPIN_MAX,
    DRAW_CALC_SPIN_WIDTH,
    LIGHT_TEXT,
    SUBDUED_TEXT,
)

__all__ = [
    "BASE_DATA_DIR",
    "CALCULATE_BUTTON_COLOUR",
    "DARK_ACCENT",
    "DARK_BG",
    "DARK_PANEL",
    "DEFAULT_GAME_TEMPLATE",
    "DRAW_CALC_FRAME_MIN_SIZE",
    "DRAW_CALC_FRAME_SIZE",
    "DRAW_CALC_SECTION_PADDING",
    "DRAW_CALC_SPIN_MAX",
    "DRAW_CALC_SPIN_WIDTH",
    "GAME_TEMPLATES",
    "LIGHT_TEXT",
    "LOGS_DIR",
    "LOG_FILE",
    "MAX_CARD_GROUPS",
    "SUBDUED_TEXT",
    "GameTemplate",
    "ensure_base_dirs",
    "get_game_template",
]
