"""
Tests for services/step_timers.py.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.step_timers import (
    StepTimers,
    RepeatingTimer,
    DEFAULT_TICK_SECONDS,
)


class TestRepeatingTimer:
    """Tests for the RepeatingTimer class."""

    def test_fires_after_duration(self):
        timer = RepeatingTimer(0.5)
        assert timer.tick(0.25) is False
        assert timer.tick(0.25) is True
        assert timer.elapsed == 0.0

    def test_keeps_remainder(self):
        timer = RepeatingTimer(0.5)
        assert timer.tick(0.75) is True
        assert timer.elapsed == pytest.approx(0.25)
        assert timer.tick(0.25) is True


class TestStepTimers:
    """Tests for the StepTimers class."""

    def test_regular_tick(self):
        timers = StepTimers()
        assert timers.tick(0.25) is False
        assert timers.tick(0.25) is True

    def test_boost_only_counts_when_active(self):
        timers = StepTimers()
        assert timers.tick(0.08, boost_active=False) is False

        timers = StepTimers()
        assert timers.tick(0.08, boost_active=True) is True

    def test_negative_delta_rejected(self):
        with pytest.raises(ValueError):
            StepTimers().tick(-0.1)

    def test_speed_up_stops_at_floor(self):
        """Each speed-up trims 0.06s until the next one would reach 0.1s."""
        timers = StepTimers()
        timers.increase_tick_speed()
        assert timers.tick_seconds == pytest.approx(0.44)

        for _ in range(10):
            timers.increase_tick_speed()
        assert timers.tick_seconds == pytest.approx(0.14)

    def test_reset_tick_speed(self):
        timers = StepTimers()
        timers.increase_tick_speed()
        timers.tick(0.2)
        timers.reset_tick_speed()

        assert timers.tick_seconds == DEFAULT_TICK_SECONDS
        assert timers.tick_timer.elapsed == 0.0
