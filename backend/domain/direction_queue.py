"""
Bounded FIFO of pending direction inputs.
"""

from typing import List, Optional

from .constants import VALID_MOVES


class DirectionQueue:
    """
    Holds at most three pending directions (next, queued_1, queued_2).

    A push lands in the first free slot and is dropped when it repeats the
    direction in the slot before it, or when the queue is already full.
    Dropping is how input flooding within one tick is held back.
    """

    MAX_LENGTH = 3

    def __init__(self):
        self.next: Optional[str] = None
        self.queued_1: Optional[str] = None
        self.queued_2: Optional[str] = None

    def push(self, direction: str) -> None:
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {direction!r}")

        if self.next is None:
            self.next = direction
        elif self.queued_1 is None:
            if self.next != direction:
                self.queued_1 = direction
        elif self.queued_2 is None:
            if self.queued_1 != direction:
                self.queued_2 = direction

    def pop(self) -> Optional[str]:
        """Remove and return the front direction, or None if empty."""
        direction = self.next
        if direction is None:
            return None
        self.next = self.queued_1
        self.queued_1 = self.queued_2
        self.queued_2 = None
        return direction

    def peek(self) -> Optional[str]:
        return self.next

    def clear(self) -> None:
        self.next = None
        self.queued_1 = None
        self.queued_2 = None

    def as_list(self) -> List[str]:
        return [d for d in (self.next, self.queued_1, self.queued_2) if d is not None]

    def __len__(self):
        return len(self.as_list())

    def __repr__(self):
        return f"<DirectionQueue {self.as_list()}>"
