import argparse
import json
import logging
import os
import random
import uuid
from typing import Dict, Optional

from dotenv import load_dotenv

from domain.constants import GRID_SIZE
from players import get_player_class
from services.game_session import GameSession

load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(player_name: str, game_params: argparse.Namespace) -> Dict:
    """
    Runs a single headless game with an automated player.

    Args:
        player_name: Key of the player kind ('greedy', 'random').
        game_params: An object (like argparse.Namespace) containing game settings
                     (seed, max_ticks, grid_size, show_board).

    Returns:
        A dictionary summarizing the game (game_id, player, final_score,
        eaten_food, ticks, result).
    """
    seed = getattr(game_params, 'seed', None)
    rng = random.Random(seed)
    grid_size = getattr(game_params, 'grid_size', GRID_SIZE)
    max_ticks = getattr(game_params, 'max_ticks', 2000)
    show_board = getattr(game_params, 'show_board', False)

    game_id = getattr(game_params, 'game_id', None) or str(uuid.uuid4())
    player = get_player_class(player_name)(rng=random.Random(rng.random()))
    session = GameSession(rng=rng, grid_size=grid_size)
    simulation = session.simulation

    logger.info(f"Game {game_id}: player={player.name}, seed={seed}, grid={grid_size}x{grid_size}")
    session.start()

    ticks = 0
    while simulation.is_game_running() and ticks < max_ticks:
        session.push_direction(player.get_move(simulation.snapshot()))
        session.step()
        ticks += 1
        if show_board:
            logger.info("\n" + simulation.snapshot().print_board() + "\n")

    if session.last_result is None:
        result = "unfinished"
    elif session.last_result.win:
        result = "won"
    else:
        result = "lost"

    logger.info(f"Game {game_id} finished after {ticks} ticks: {result}, score {simulation.score}")

    return {
        "game_id": game_id,
        "player": player.name,
        "seed": seed,
        "final_score": simulation.score,
        "eaten_food": simulation.eaten_food,
        "ticks": ticks,
        "result": result,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless grid snake game with an automated player."
    )
    parser.add_argument("--player", type=str, default=os.getenv("SNAKE_PLAYER", "greedy"),
                        help="Player kind: greedy or random (env: SNAKE_PLAYER)")
    parser.add_argument("--seed", type=int, default=_env_int("SNAKE_SEED", None),
                        help="Random seed for a replayable game (env: SNAKE_SEED)")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int,
                        default=_env_int("SNAKE_MAX_TICKS", 2000),
                        help="Stop after this many ticks (env: SNAKE_MAX_TICKS)")
    parser.add_argument("--grid-size", dest="grid_size", type=int, default=GRID_SIZE,
                        help=f"Board edge length (default: {GRID_SIZE})")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Log the board after every tick")
    parser.add_argument("--log-level", dest="log_level", type=str,
                        default=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
                        help="Logging level (env: SNAKE_LOG_LEVEL)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = run_simulation(args.player, args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
