from __future__ import annotations

# --- Board (window frontend) ---
CELL_SIZE = 20
GRID_WIDTH, GRID_HEIGHT = 32, 24

# --- Timing (seconds) ---
FRAME_DELAY = 0.1
DELAY_STEP = 0.01
MIN_DELAY = 0.02

# --- Scoring / spawning ---
GROWTH_POINTS = 10
SPAWN_BASE = 10
FRUIT_WEIGHTS = {
    "growth": 7,
    "death": 1,
    "speed": 1,
    "slow": 1,
}

# --- Colours ---
BLACK = (0, 0, 0)
COLORS = {
    "white": (240, 240, 240),
    "green": (0, 200, 0),
    "red": (220, 0, 0),
    "light_red": (255, 110, 110),
    "blue": (60, 90, 255),
}
