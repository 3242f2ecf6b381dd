"""
Game constants for the grid snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Up => y + 1, matching a board drawn with (0,0) at bottom left
DIRECTION_VECTORS = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
GRID_SIZE = 15
START_SNAKE_LENGTH = 3

# Scoring
SCORE_BASE = 100
MULTIPLIER_STEP = 10

# Food placement search
FOOD_SPAWN_ATTEMPTS = 20
FOOD_SEARCH_RADIUS = 10

# Eaten food count between tick speed-ups
SPEEDUP_EVERY = 5
