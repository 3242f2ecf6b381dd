"""
Tick timers for driving the simulation.

The timers are advanced with explicit elapsed-time deltas supplied by the
host loop, so nothing here reads the clock and tests can step them by hand.
"""

from dataclasses import dataclass

# Fixed timing for this game (keep in code, not env vars)
DEFAULT_TICK_SECONDS = 0.5
BOOST_TICK_SECONDS = 0.08
SPEEDUP_SECONDS = 0.06
MIN_TICK_SECONDS = 0.1


@dataclass
class RepeatingTimer:
    duration: float
    elapsed: float = 0.0

    def tick(self, delta: float) -> bool:
        """Advance by delta; True when at least one period completed."""
        self.elapsed += delta
        if self.elapsed < self.duration:
            return False
        # Multiple periods in one delta still fire a single step
        self.elapsed %= self.duration
        return True

    def reset(self) -> None:
        self.elapsed = 0.0


class StepTimers:
    """
    A regular tick timer plus a faster boost timer used while the player
    holds the boost key.
    """

    def __init__(self, tick_seconds: float = DEFAULT_TICK_SECONDS, boost_seconds: float = BOOST_TICK_SECONDS):
        self.default_tick_seconds = tick_seconds
        self.tick_timer = RepeatingTimer(tick_seconds)
        self.boost_timer = RepeatingTimer(boost_seconds)

    @property
    def tick_seconds(self) -> float:
        return self.tick_timer.duration

    def tick(self, delta: float, boost_active: bool = False) -> bool:
        """
        Advance both timers and report whether a simulation step is due.
        """
        if delta < 0:
            raise ValueError(f"Timer delta cannot be negative: {delta}")
        boost_finished = self.boost_timer.tick(delta)
        tick_finished = self.tick_timer.tick(delta)
        return (boost_finished and boost_active) or tick_finished

    def increase_tick_speed(self) -> None:
        new_duration = self.tick_timer.duration - SPEEDUP_SECONDS
        if new_duration > MIN_TICK_SECONDS:
            self.tick_timer.duration = new_duration

    def reset_tick_speed(self) -> None:
        self.tick_timer.duration = self.default_tick_seconds
        self.tick_timer.reset()
        self.boost_timer.reset()
