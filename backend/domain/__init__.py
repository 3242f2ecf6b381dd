"""
Domain entities for the grid snake simulation core.

This module contains the grid, the direction queue and the simulation
engine. None of it knows about rendering, keyboards, audio or wall-clock
time.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE, GRID_SIZE, START_SNAKE_LENGTH, SCORE_BASE,
)
from .cell import CellPosition, Food, SnakeBody, Cell
from .errors import SimulationError, InternalConsistencyError, OutOfBoundsError
from .grid import Grid
from .direction_queue import DirectionQueue
from .board_snapshot import BoardSnapshot
from .simulation import Simulation, SimState, TickOutcome, FoodEaten, SimulationOver

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'GRID_SIZE', 'START_SNAKE_LENGTH', 'SCORE_BASE',
    'CellPosition', 'Food', 'SnakeBody', 'Cell',
    'SimulationError', 'InternalConsistencyError', 'OutOfBoundsError',
    'Grid',
    'DirectionQueue',
    'BoardSnapshot',
    'Simulation', 'SimState', 'TickOutcome', 'FoodEaten', 'SimulationOver',
]
