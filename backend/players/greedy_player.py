"""
Greedy player implementation - heads straight for the food.
"""

from domain.board_snapshot import BoardSnapshot
from .base import Player, safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food
    (Manhattan distance). Ties are broken at random.
    """

    name = "greedy"

    def get_move(self, snapshot: BoardSnapshot) -> str:
        valid_moves = safe_moves(snapshot)
        if not valid_moves:
            return snapshot.neck_direction
        if snapshot.food is None:
            return self.rng.choice(valid_moves)

        def distance(move: str) -> int:
            x, y = snapshot.head.moved(move)
            return abs(x - snapshot.food.x) + abs(y - snapshot.food.y)

        best = min(distance(move) for move in valid_moves)
        return self.rng.choice([move for move in valid_moves if distance(move) == best])
