"""Window sizes, spacing and colours for the calculator window."""

DARK_BG = "#15181e"
DARK_PANEL = "#1f242d"
DARK_ACCENT = "#3b8fd6"
LIGHT_TEXT = "#e6e9ef"
SUBDUED_TEXT = "#9aa3b2"
CALCULATE_BUTTON_COLOUR = "#2a6b2a"

DRAW_CALC_FRAME_SIZE = (460, 640)
DRAW_CALC_FRAME_MIN_SIZE = (420, 520)
DRAW_CALC_SECTION_PADDING = 8
DRAW_CALC_SPIN_WIDTH = 70
DRAW_CALC_SPIN_MAX = 250
