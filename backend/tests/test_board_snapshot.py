"""
Tests for domain/board_snapshot.py - read-only board copies.
"""

import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board_snapshot import BoardSnapshot
from domain.cell import CellPosition
from domain.constants import RIGHT


def make_snapshot(**overrides):
    values = dict(
        grid_size=5,
        head=CellPosition(2, 1),
        tail=CellPosition(0, 1),
        food=CellPosition(4, 4),
        body_ages={CellPosition(2, 1): 1, CellPosition(1, 1): 2, CellPosition(0, 1): 3},
        score=300,
        eaten_food=3,
        score_multiplier=1,
        state="RUNNING",
        neck_direction=RIGHT,
    )
    values.update(overrides)
    return BoardSnapshot(**values)


class TestBoardSnapshot:
    """Tests for the BoardSnapshot class."""

    def test_body_positions_head_to_tail(self):
        snapshot = make_snapshot()
        assert snapshot.body_positions() == [CellPosition(2, 1), CellPosition(1, 1), CellPosition(0, 1)]

    def test_print_board_layout(self):
        """Top row is printed first and (0,0) sits at the bottom left."""
        lines = make_snapshot().print_board().split("\n")

        assert lines[0] == " 4 . . . . F"
        assert lines[3] == " 1 S S H . ."
        assert lines[4] == " 0 . . . . ."
        assert lines[5] == "   0 1 2 3 4"

    def test_print_board_without_food(self):
        board = make_snapshot(food=None).print_board()
        assert "F" not in board

    def test_repr(self):
        repr_str = repr(make_snapshot())
        assert "state=RUNNING" in repr_str
        assert "score=300" in repr_str
