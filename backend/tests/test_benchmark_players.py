"""
Tests for cli/benchmark_players.py.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.benchmark_players import PlayerSummary, benchmark, main


class TestPlayerSummary:
    """Tests for the PlayerSummary aggregation."""

    def test_empty_summary(self):
        summary = PlayerSummary("greedy")
        assert summary.average_score == 0.0
        assert summary.best_score == 0

    def test_add_games(self):
        summary = PlayerSummary("greedy")
        summary.add({"final_score": 300, "result": "lost"})
        summary.add({"final_score": 700, "result": "unfinished"})

        assert summary.average_score == 500.0
        assert summary.best_score == 700
        assert summary.results == {"won": 0, "lost": 1, "unfinished": 1}


class TestBenchmark:
    """Tests for running the benchmark."""

    def test_runs_every_player(self):
        summaries = benchmark(["greedy", "random"], games=2, start_seed=0, grid_size=15, max_ticks=50)

        assert [s.player for s in summaries] == ["greedy", "random"]
        for s in summaries:
            assert len(s.scores) == 2
            assert sum(s.results.values()) == 2

    def test_main(self):
        summaries = main(["--players", "random", "--games", "1", "--max-ticks", "30"])
        assert len(summaries) == 1

    def test_main_rejects_zero_games(self):
        with pytest.raises(SystemExit):
            main(["--games", "0"])
