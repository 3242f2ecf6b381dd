"""
Simulation engine - the authoritative model of one snake on a grid.

The snake body is not stored as a list. Each body cell carries an age
(ticks since it was the head), so the head is the age-1 cell and the tail
is the oldest one. Tail retraction walks towards the oldest neighbour of
the current tail, which rebuilds the body order from the grid alone.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .board_snapshot import BoardSnapshot
from .cell import Cell, CellContent, CellPosition, Food, SnakeBody
from .constants import (
    FOOD_SEARCH_RADIUS,
    FOOD_SPAWN_ATTEMPTS,
    GRID_SIZE,
    MULTIPLIER_STEP,
    OPPOSITE,
    RIGHT,
    SCORE_BASE,
    START_SNAKE_LENGTH,
    VALID_MOVES,
)
from .direction_queue import DirectionQueue
from .errors import InternalConsistencyError
from .grid import Grid

logger = logging.getLogger(__name__)


class SimState(Enum):
    RUNNING = "RUNNING"
    WIN = "WIN"
    LOSS = "LOSS"


@dataclass(frozen=True)
class FoodEaten:
    pieces_eaten: int
    new_score: int


@dataclass(frozen=True)
class SimulationOver:
    win: bool


@dataclass
class TickOutcome:
    """
    Events produced by one tick. An ordinary move produces neither, and
    the outcome is then falsy.
    """

    food_eaten: Optional[FoodEaten] = None
    game_over: Optional[SimulationOver] = None

    def __bool__(self):
        return self.food_eaten is not None or self.game_over is not None


def get_move_direction(direction_queue: DirectionQueue, neck_direction: str) -> str:
    """
    Pop queued inputs until one turns the snake. Repeats of the neck
    direction and U-turns into the neck are discarded; if nothing usable
    is queued the snake keeps going straight.
    """
    while True:
        direction = direction_queue.pop()
        if direction is None:
            return neck_direction
        if direction != neck_direction and direction != OPPOSITE[neck_direction]:
            return direction


class Simulation:
    """
    Owns the grid and the snake anchors (head, tail, food) plus the score.

    run_next_step() is the only mutator during play. Rendering and UI
    collaborators use the read-only queries between ticks.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE,
        random_start: bool = True,
    ):
        self.rng = rng or random.Random()
        self.grid = Grid.new_empty_grid(grid_size)
        self.eaten_food = 0
        self.score = 0
        self.score_multiplier = 1
        self.neck_direction = RIGHT
        self.game_state = SimState.RUNNING
        self.head_pos = CellPosition(0, 0)
        self.tail_pos = CellPosition(0, 0)
        self.food_pos: Optional[CellPosition] = None
        self.tick_count = 0

        if random_start:
            self.set_random_initial_state()

    @classmethod
    def new_simulation(cls, rng: Optional[random.Random] = None, grid_size: int = GRID_SIZE) -> "Simulation":
        return cls(rng=rng, grid_size=grid_size)

    @classmethod
    def from_layout(
        cls,
        body: Sequence[CellPosition],
        food_pos: Optional[CellPosition] = None,
        neck_direction: Optional[str] = None,
        eaten_food: Optional[int] = None,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE,
    ) -> "Simulation":
        """
        Build a simulation from an explicit snake.

        Args:
            body: segment positions from head to tail; ages become 1..n
            food_pos: where to put the food (spawned by search when omitted)
            neck_direction: last move direction; derived from the first two
                segments when omitted, RIGHT for a one-cell snake
            eaten_food: defaults to the body length, which keeps the
                length constant until food is eaten
            rng: random source for food placement
            grid_size: board edge length
        """
        sim = cls(rng=rng, grid_size=grid_size, random_start=False)
        sim._load_layout(list(body), food_pos, neck_direction, eaten_food)
        return sim

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def set_random_initial_state(self) -> None:
        """
        Clear the grid and start a new game: a three-cell snake heading
        right in the left half of the board, with food placed by the
        ordinary spawn search.
        """
        size = self.grid.size
        if size // 2 <= START_SNAKE_LENGTH:
            raise ValueError(f"Grid size {size} is too small for a random start")

        self.grid.clear_grid()
        head_pos = CellPosition(
            self.rng.randrange(START_SNAKE_LENGTH, size // 2),
            self.rng.randrange(0, size),
        )
        tail_pos = CellPosition(head_pos.x + 1 - START_SNAKE_LENGTH, head_pos.y)
        for offset in range(START_SNAKE_LENGTH):
            self.grid.set_cell(
                CellPosition(tail_pos.x + offset, tail_pos.y),
                SnakeBody(age=START_SNAKE_LENGTH - offset),
            )

        self.eaten_food = START_SNAKE_LENGTH
        self.score_multiplier = 1
        self.score = self.eaten_food * self.score_multiplier * SCORE_BASE
        self.neck_direction = RIGHT
        self.game_state = SimState.RUNNING
        self.head_pos = head_pos
        self.tail_pos = tail_pos
        self.food_pos = None
        self.tick_count = 0

        if not self.spawn_food():
            raise InternalConsistencyError("No free cell for the initial food")

        logger.debug(f"New simulation: head={head_pos}, tail={tail_pos}, food={self.food_pos}")

    def reset(self) -> None:
        self.set_random_initial_state()

    def _load_layout(
        self,
        body: List[CellPosition],
        food_pos: Optional[CellPosition],
        neck_direction: Optional[str],
        eaten_food: Optional[int],
    ) -> None:
        if not body:
            raise ValueError("Snake body needs at least one segment")
        if len(set(body)) != len(body):
            raise ValueError("Snake body segments must be distinct")
        for pos in body:
            if not pos.in_bounds(self.grid.size):
                raise ValueError(f"Snake segment {pos} is outside the grid")
        for front, back in zip(body, body[1:]):
            if not front.is_adjacent(back):
                raise ValueError(f"Snake segments {front} and {back} are not adjacent")
        if food_pos is not None:
            if not food_pos.in_bounds(self.grid.size):
                raise ValueError(f"Food {food_pos} is outside the grid")
            if food_pos in body:
                raise ValueError(f"Food {food_pos} overlaps the snake")

        if neck_direction is None:
            neck_direction = RIGHT
            if len(body) > 1:
                head, neck = body[0], body[1]
                neck_direction = next(
                    d for d in VALID_MOVES if neck.moved(d) == head.as_tuple()
                )
        elif neck_direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {neck_direction!r}")

        self.grid.clear_grid()
        for age, pos in enumerate(body, start=1):
            self.grid.set_cell(pos, SnakeBody(age=age))

        self.eaten_food = len(body) if eaten_food is None else eaten_food
        self.score_multiplier = 1
        self.score = self.eaten_food * self.score_multiplier * SCORE_BASE
        self.neck_direction = neck_direction
        self.game_state = SimState.RUNNING
        self.head_pos = body[0]
        self.tail_pos = body[-1]
        self.tick_count = 0

        if food_pos is not None:
            self.grid.set_cell(food_pos, Food())
            self.food_pos = food_pos
        else:
            self.food_pos = None
            if not self.spawn_food():
                self.game_state = SimState.WIN

    # ------------------------------------------------------------------
    # Per-tick algorithm
    # ------------------------------------------------------------------

    def run_next_step(self, direction_queue: DirectionQueue) -> TickOutcome:
        """
        Advance the snake one cell.

        Order: age the body, move the head, stop on a loss, handle food
        (score, respawn, win on a full board), then retract the tail.
        Win and Loss are absorbing; further calls do nothing until reset.

        Raises:
            InternalConsistencyError: if the body chain on the grid is broken
        """
        if self.game_state is not SimState.RUNNING:
            logger.debug(f"Tick ignored, simulation is over ({self.game_state.value})")
            return TickOutcome()

        self.tick_count += 1
        self._age_snake_body()
        self._move_snake_head(direction_queue)

        if self.game_state is SimState.LOSS:
            self._log_game_state_if_finished()
            return TickOutcome(game_over=SimulationOver(win=False))

        outcome = TickOutcome()
        if self._was_food_eaten():
            could_spawn_food = self.spawn_food()
            outcome.food_eaten = self._update_score()
            logger.info(
                f"Food eaten at {self.head_pos}: pieces={self.eaten_food}, "
                f"score={self.score}, multiplier={self.score_multiplier}"
            )
            if not could_spawn_food:
                self.game_state = SimState.WIN
                self.food_pos = None
                self._log_game_state_if_finished()
                outcome.game_over = SimulationOver(win=True)
                return outcome

        self._move_snake_tail()
        logger.debug(
            f"Tick {self.tick_count}: head={self.head_pos}, tail={self.tail_pos}, "
            f"neck={self.neck_direction}"
        )
        return outcome

    def _age_snake_body(self) -> None:
        for cell in self.grid.get_occupied_cells():
            if isinstance(cell.content, SnakeBody):
                self.grid.set_cell(cell.position, SnakeBody(age=cell.content.age + 1))

    def _move_snake_head(self, direction_queue: DirectionQueue) -> None:
        move_dir = get_move_direction(direction_queue, self.neck_direction)
        x, y = self.head_pos.moved(move_dir)
        size = self.grid.size
        if x < 0 or y < 0 or x >= size or y >= size:
            logger.debug(f"Head left the board moving {move_dir} from {self.head_pos}")
            self.game_state = SimState.LOSS
            return

        head_pos = CellPosition(x, y)
        if self._is_position_occupied_by_snake(head_pos):
            logger.debug(f"Head ran into the body at {head_pos}")
            self.game_state = SimState.LOSS
            return

        self.grid.set_cell(head_pos, SnakeBody(age=1))
        self.neck_direction = move_dir
        self.head_pos = head_pos

    def _was_food_eaten(self) -> bool:
        return self.food_pos is not None and self.food_pos == self.head_pos

    def _is_position_occupied_by_snake(self, pos: CellPosition) -> bool:
        return isinstance(self.grid.get_cell_content(pos), SnakeBody)

    def _update_score(self) -> FoodEaten:
        self.eaten_food += 1
        if self.eaten_food % MULTIPLIER_STEP == 0:
            self.score_multiplier += 1
        self.score += SCORE_BASE * self.score_multiplier
        return FoodEaten(pieces_eaten=self.eaten_food, new_score=self.score)

    def _get_tail(self) -> SnakeBody:
        content = self.grid.get_cell_content(self.tail_pos)
        if not isinstance(content, SnakeBody):
            raise InternalConsistencyError(
                f"Tail position {self.tail_pos} holds {content!r}, not a body segment"
            )
        return content

    def _move_snake_tail(self) -> None:
        tail = self._get_tail()
        # Still digesting: the tail stays until it is older than the food count
        if self.eaten_food < tail.age:
            new_tail = self._get_oldest_tail_neighbor()
            self.grid.clear_cell(self.tail_pos)
            self.tail_pos = new_tail

    def _get_oldest_tail_neighbor(self) -> CellPosition:
        segments = []
        for pos in self.tail_pos.neighbors(self.grid.size):
            content = self.grid.get_cell_content(pos)
            if isinstance(content, SnakeBody):
                segments.append((pos, content.age))

        if not segments:
            raise InternalConsistencyError(
                f"Tail at {self.tail_pos} has no neighbouring body segment to retract to"
            )
        # max() keeps the first of equal ages, so ties follow neighbour order
        oldest_pos, _ = max(segments, key=lambda segment: segment[1])
        return oldest_pos

    # ------------------------------------------------------------------
    # Food placement
    # ------------------------------------------------------------------

    def spawn_food(self) -> bool:
        """
        Place food on an empty cell.

        Tries a fixed number of uniform random cells first, then falls back
        to every empty cell in a square window around the tail.

        Returns:
            True if food was placed, False if no empty cell was found
            (the caller treats that as a full board)
        """
        size = self.grid.size
        for _ in range(FOOD_SPAWN_ATTEMPTS):
            pos = CellPosition(self.rng.randrange(0, size), self.rng.randrange(0, size))
            if self.grid.is_cell_empty(pos):
                self._place_food(pos)
                return True

        empty_cells = self._get_empty_cells_around_tail()
        if not empty_cells:
            logger.debug("No empty cell found for food")
            return False

        self._place_food(self.rng.choice(empty_cells))
        return True

    def _place_food(self, pos: CellPosition) -> None:
        self.grid.set_cell(pos, Food())
        self.food_pos = pos

    def _get_empty_cells_around_tail(self) -> List[CellPosition]:
        size = self.grid.size
        low_x = max(0, self.tail_pos.x - FOOD_SEARCH_RADIUS)
        high_x = min(size - 1, self.tail_pos.x + FOOD_SEARCH_RADIUS)
        low_y = max(0, self.tail_pos.y - FOOD_SEARCH_RADIUS)
        high_y = min(size - 1, self.tail_pos.y + FOOD_SEARCH_RADIUS)

        empty_cells: List[CellPosition] = []
        for x in range(low_x, high_x + 1):
            for y in range(low_y, high_y + 1):
                pos = CellPosition(x, y)
                if self.grid.is_cell_empty(pos):
                    empty_cells.append(pos)
        return empty_cells

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    @property
    def grid_size(self) -> int:
        return self.grid.size

    def get_occupied_cells(self) -> List[Cell]:
        return self.grid.get_occupied_cells()

    def get_cell_content(self, pos: CellPosition) -> Optional[CellContent]:
        return self.grid.get_cell_content(pos)

    def get_head_position(self) -> CellPosition:
        return self.head_pos

    def get_tail_position(self) -> CellPosition:
        return self.tail_pos

    def get_food_position(self) -> Optional[CellPosition]:
        return self.food_pos

    def is_game_running(self) -> bool:
        return self.game_state is SimState.RUNNING

    def snapshot(self) -> BoardSnapshot:
        body_ages = {
            cell.position: cell.content.age
            for cell in self.grid.get_occupied_cells()
            if isinstance(cell.content, SnakeBody)
        }
        return BoardSnapshot(
            grid_size=self.grid.size,
            head=self.head_pos,
            tail=self.tail_pos,
            food=self.food_pos,
            body_ages=body_ages,
            score=self.score,
            eaten_food=self.eaten_food,
            score_multiplier=self.score_multiplier,
            state=self.game_state.value,
            neck_direction=self.neck_direction,
        )

    def _log_game_state_if_finished(self) -> None:
        if self.game_state is not SimState.RUNNING:
            logger.info(
                f"{self.game_state.value}! ticks={self.tick_count}, "
                f"score={self.score}, eaten_food={self.eaten_food}"
            )

    def __repr__(self):
        return (
            f"<Simulation state={self.game_state.value}, head={self.head_pos}, "
            f"tail={self.tail_pos}, food={self.food_pos}, score={self.score}>"
        )
