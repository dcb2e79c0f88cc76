"""Random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from connect4.agents.base import Agent
from connect4.engine import Board, Player
from connect4.errors import InvalidStateError


class RandomAgent(Agent):
    def __init__(self, name: str, seed: Optional[int] = None) -> None:
        self.name = name
        self.rng = random.Random(seed)

    def select_move(self, board: Board, player: Player) -> int:
        legal = board.legal_moves()
        if not legal:
            raise InvalidStateError("no legal moves available")
        return self.rng.choice(legal)
