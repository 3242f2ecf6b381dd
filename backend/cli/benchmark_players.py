#!/usr/bin/env python3
"""Benchmark the automated players over many seeded headless games.

For every player kind it runs N games with seeds start_seed .. start_seed+N-1
and logs the average and best score plus won / lost / unfinished counts.
Runs are fully replayable: the same seed always produces the same game.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import GRID_SIZE  # noqa: E402
from main import run_simulation  # noqa: E402
from players import AVAILABLE_PLAYERS  # noqa: E402

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class PlayerSummary:
    player: str
    scores: List[int] = field(default_factory=list)
    results: Dict[str, int] = field(default_factory=lambda: {"won": 0, "lost": 0, "unfinished": 0})

    def add(self, game: Dict) -> None:
        self.scores.append(game["final_score"])
        self.results[game["result"]] += 1

    @property
    def average_score(self) -> float:
        return sum(self.scores) / len(self.scores) if self.scores else 0.0

    @property
    def best_score(self) -> int:
        return max(self.scores) if self.scores else 0


def benchmark(players: List[str], games: int, start_seed: int, grid_size: int, max_ticks: int) -> List[PlayerSummary]:
    summaries = []
    for player in players:
        summary = PlayerSummary(player)
        for seed in range(start_seed, start_seed + games):
            params = argparse.Namespace(seed=seed, grid_size=grid_size, max_ticks=max_ticks, show_board=False)
            summary.add(run_simulation(player, params))
        summaries.append(summary)
    return summaries


def main(argv=None) -> List[PlayerSummary]:
    parser = argparse.ArgumentParser(description="Benchmark automated snake players.")
    parser.add_argument("--players", type=str, nargs="+", default=AVAILABLE_PLAYERS,
                        help=f"Player kinds to run (default: {' '.join(AVAILABLE_PLAYERS)})")
    parser.add_argument("--games", type=int, default=20,
                        help="Games per player (default: 20)")
    parser.add_argument("--start-seed", dest="start_seed", type=int, default=0,
                        help="First seed (default: 0)")
    parser.add_argument("--grid-size", dest="grid_size", type=int, default=GRID_SIZE,
                        help=f"Board edge length (default: {GRID_SIZE})")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int,
                        default=int(os.getenv("SNAKE_MAX_TICKS", "2000")),
                        help="Tick limit per game (env: SNAKE_MAX_TICKS)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )
    # Per-game logging from the engine drowns the summary
    logging.getLogger("domain").setLevel(logging.WARNING)
    logging.getLogger("services").setLevel(logging.WARNING)
    logging.getLogger("main").setLevel(logging.WARNING)

    if args.games < 1:
        raise SystemExit("--games must be at least 1")

    logger.info("Running %d games per player on a %dx%d grid", args.games, args.grid_size, args.grid_size)
    summaries = benchmark(args.players, args.games, args.start_seed, args.grid_size, args.max_ticks)

    logger.info("")
    logger.info("=== Player benchmark ===")
    for s in sorted(summaries, key=lambda s: s.average_score, reverse=True):
        logger.info(
            "%-8s avg=%.1f  best=%d  won=%d lost=%d unfinished=%d",
            s.player,
            s.average_score,
            s.best_score,
            s.results["won"],
            s.results["lost"],
            s.results["unfinished"],
        )
    return summaries


if __name__ == "__main__":
    main()
