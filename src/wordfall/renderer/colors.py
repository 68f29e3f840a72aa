"""Color palette."""

# RGB tuples
BG = (18, 18, 24)
PLAY_AREA = (28, 30, 42)
PLAY_AREA_BORDER = (70, 74, 96)
WORD_TEXT = (240, 240, 240)
SLOT_EMPTY = (60, 62, 80)
SLOT_FILLED = (80, 220, 100)
SLOT_WRONG = (220, 60, 60)
SLOT_TEXT = (18, 18, 24)
HUD_TEXT = (220, 220, 220)
ACCENT = (66, 135, 245)
DIM_TEXT = (120, 120, 140)
OVERLAY = (0, 0, 0, 180)
