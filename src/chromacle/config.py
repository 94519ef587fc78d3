"""Global constants and default settings."""

from pathlib import Path

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 900
FPS = 60
WINDOW_TITLE = "Chromacle"

# Game balance
MAX_GUESSES = 6
WIN_THRESHOLD = 10
HUE_HIT_TOLERANCE = 5  # degrees
CHANNEL_HIT_TOLERANCE = 3  # percentage points

# Share glyph thresholds (closeness, inclusive)
SHARE_BEST = 10
SHARE_GOOD = 30
SHARE_FAIR = 60

# Secret color ranges
SECRET_SAT_MIN = 30
SECRET_SAT_SPAN = 60
SECRET_LIT_MIN = 25
SECRET_LIT_SPAN = 50

# Slider starting position
DEFAULT_HUE = 180
DEFAULT_SATURATION = 50
DEFAULT_LIGHTNESS = 50

# Persistence
SESSION_KEY = "chromacle-state"
STATS_KEY = "chromacle-stats"
DEFAULT_DB_PATH = Path.home() / ".chromacle" / "state.db"

SHARE_FOOTER = "chromacle.app"
COPIED_FLASH_S = 2.0
