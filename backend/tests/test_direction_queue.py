"""
Tests for domain/direction_queue.py - the bounded input buffer.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.direction_queue import DirectionQueue


class TestDirectionQueue:
    """Tests for the DirectionQueue class."""

    def test_empty_queue_pops_none(self):
        queue = DirectionQueue()
        assert queue.pop() is None
        assert len(queue) == 0

    def test_keeps_first_three_in_fifo_order(self):
        """Four distinct pushes in one frame keep only the first three."""
        queue = DirectionQueue()
        queue.push(UP)
        queue.push(LEFT)
        queue.push(DOWN)
        queue.push(RIGHT)

        assert len(queue) == 3
        assert queue.pop() == UP
        assert queue.pop() == LEFT
        assert queue.pop() == DOWN
        assert queue.pop() is None

    def test_consecutive_duplicates_dropped(self):
        """Pushing the same direction twice in a row only queues it once."""
        queue = DirectionQueue()
        queue.push(UP)
        queue.push(UP)
        queue.push(LEFT)
        queue.push(LEFT)
        assert queue.as_list() == [UP, LEFT]

    def test_non_consecutive_repeat_allowed(self):
        queue = DirectionQueue()
        queue.push(UP)
        queue.push(LEFT)
        queue.push(UP)
        assert queue.as_list() == [UP, LEFT, UP]

    def test_pop_shifts_remaining(self):
        """Popping frees the last slot for a new push."""
        queue = DirectionQueue()
        for direction in (UP, LEFT, DOWN):
            queue.push(direction)
        assert queue.pop() == UP
        queue.push(RIGHT)
        assert queue.as_list() == [LEFT, DOWN, RIGHT]

    def test_peek_does_not_remove(self):
        queue = DirectionQueue()
        queue.push(DOWN)
        assert queue.peek() == DOWN
        assert len(queue) == 1

    def test_clear(self):
        queue = DirectionQueue()
        queue.push(UP)
        queue.push(LEFT)
        queue.clear()
        assert queue.pop() is None

    def test_invalid_direction_rejected(self):
        queue = DirectionQueue()
        with pytest.raises(ValueError):
            queue.push("NORTH")
