"""
Exceptions raised by the simulation core.

Boundary exits, self-collisions and a full board are ordinary game
outcomes and never raise; these types cover programmer errors only.
"""


class SimulationError(Exception):
    """Base class for simulation core errors."""


class InternalConsistencyError(SimulationError):
    """The snake body chain on the grid no longer matches the engine anchors."""


class OutOfBoundsError(SimulationError, IndexError):
    """A grid access was made with a position outside the board."""
