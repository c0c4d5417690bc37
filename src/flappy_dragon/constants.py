"""
constants.py: Centralized default settings for the game and its host window.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 80               # Play area width in cells
SCREEN_HEIGHT = 50              # Play area height in cells
FRAME_DURATION = 75.0           # Milliseconds between physics steps
PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Physics Config (cells / step) --------
GRAVITY_ACCEL = 0.2             # Velocity gained per physics step
MAX_FALL_VELOCITY = 2.0         # Terminal fall speed
FLAP_IMPULSE = -2.0             # Velocity set by a flap

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Lowest gap centre (inclusive)
GAP_Y_MAX = 40                  # Highest gap centre (exclusive)
MAX_GAP_SIZE = 20               # Gap height at score 0
MIN_GAP_SIZE = 2                # Gap never shrinks below this

# -------- Glyphs & Colors --------
PLAYER_GLYPH = ">"
OBSTACLE_GLYPH = "|"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Host Window Config --------
WINDOW_TITLE = "Andruil's Rusty Dragon"
RENDER_FPS = 30
CELL_SIZE = 12                  # Pixels per cell edge
LOG_LEVEL = "info"
