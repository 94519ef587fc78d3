"""UI palette."""

# RGB tuples
BG = (18, 18, 24)
HUD_TEXT = (220, 220, 220)
DIM_TEXT = (120, 120, 140)
ACCENT = (80, 220, 100)
BUTTON = (66, 135, 245)
BUTTON_TEXT = (255, 255, 255)
SLIDER_TRACK = (60, 60, 72)
SLIDER_KNOB = (240, 240, 240)
FOCUS = (245, 166, 66)
