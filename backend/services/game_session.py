"""
Game session - the menu state machine that decides when the simulation ticks.

The simulation core only knows how to advance one step. This module owns
the start/pause/game-over flow around it, the step timers, and the
direction queue that input handlers push into. Audio and score widgets
subscribe to outcome events through listener callbacks.
"""

import logging
import random
from enum import Enum
from typing import Callable, List, Optional

from domain.constants import GRID_SIZE, RIGHT, SPEEDUP_EVERY
from domain.direction_queue import DirectionQueue
from domain.errors import InternalConsistencyError
from domain.simulation import FoodEaten, Simulation, SimulationOver, TickOutcome
from services.step_timers import StepTimers

logger = logging.getLogger(__name__)


class MenuState(Enum):
    START_MENU = "START_MENU"
    SIMULATION_RUNNING = "SIMULATION_RUNNING"
    PAUSED = "PAUSED"
    GAME_OVER_MENU = "GAME_OVER_MENU"


FoodEatenListener = Callable[[FoodEaten], None]
GameOverListener = Callable[[SimulationOver], None]


class GameSession:
    """
    Drives a Simulation from a host loop.

    Typical use:
        session = GameSession()
        session.start()
        while True:
            session.push_direction(...)    # from the input layer
            session.update(delta_seconds)  # from the frame loop
    """

    def __init__(
        self,
        simulation: Optional[Simulation] = None,
        timers: Optional[StepTimers] = None,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE,
    ):
        self.simulation = simulation or Simulation(rng=rng, grid_size=grid_size)
        self.timers = timers or StepTimers()
        self.direction_queue = DirectionQueue()
        self.state = MenuState.START_MENU
        self.last_result: Optional[SimulationOver] = None
        self._food_eaten_listeners: List[FoodEatenListener] = []
        self._game_over_listeners: List[GameOverListener] = []

    def on_food_eaten(self, callback: FoodEatenListener) -> FoodEatenListener:
        self._food_eaten_listeners.append(callback)
        return callback

    def on_game_over(self, callback: GameOverListener) -> GameOverListener:
        self._game_over_listeners.append(callback)
        return callback

    # ------------------------------------------------------------------
    # Menu transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Leave the start menu. Returns False if not on the start menu."""
        if self.state is not MenuState.START_MENU:
            return False
        self.state = MenuState.SIMULATION_RUNNING
        logger.info("Session started")
        return True

    def toggle_pause(self) -> bool:
        """Pause a running game or resume a paused one."""
        if self.state is MenuState.SIMULATION_RUNNING:
            self.state = MenuState.PAUSED
        elif self.state is MenuState.PAUSED:
            self.state = MenuState.SIMULATION_RUNNING
        else:
            return False
        logger.debug(f"Session {self.state.value.lower()}")
        return True

    def restart(self) -> None:
        """
        Start a fresh game: new random simulation, default tick speed,
        an empty direction queue primed with RIGHT.
        """
        self.simulation.reset()
        self.timers.reset_tick_speed()
        self.direction_queue.clear()
        self.direction_queue.push(RIGHT)
        self.last_result = None
        self.state = MenuState.SIMULATION_RUNNING
        logger.info("Session restarted")

    # ------------------------------------------------------------------
    # Input and ticking
    # ------------------------------------------------------------------

    def push_direction(self, direction: str) -> None:
        self.direction_queue.push(direction)

    def update(self, delta: float, boost_active: bool = False) -> Optional[TickOutcome]:
        """
        Advance the timers by delta seconds and tick the simulation if a
        step is due. Returns the tick outcome, or None when no tick ran.
        """
        if self.state is not MenuState.SIMULATION_RUNNING:
            return None
        if not self.simulation.is_game_running():
            return None
        if not self.timers.tick(delta, boost_active):
            return None
        return self.step()

    def step(self) -> TickOutcome:
        """Run exactly one simulation step and dispatch its events."""
        try:
            outcome = self.simulation.run_next_step(self.direction_queue)
        except InternalConsistencyError:
            logger.exception(f"Simulation state is inconsistent: {self.simulation!r}")
            raise

        if outcome.food_eaten is not None:
            self._handle_food_eaten(outcome.food_eaten)
        if outcome.game_over is not None:
            self._handle_game_over(outcome.game_over)
        return outcome

    def _handle_food_eaten(self, event: FoodEaten) -> None:
        if event.pieces_eaten % SPEEDUP_EVERY == 0:
            self.timers.increase_tick_speed()
            logger.debug(f"Tick interval now {self.timers.tick_seconds:.2f}s")
        for listener in self._food_eaten_listeners:
            listener(event)

    def _handle_game_over(self, event: SimulationOver) -> None:
        self.state = MenuState.GAME_OVER_MENU
        self.last_result = event
        logger.info(f"Game over: {'won' if event.win else 'lost'} with score {self.simulation.score}")
        for listener in self._game_over_listeners:
            listener(event)
