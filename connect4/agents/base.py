"""Abstract base class for Connect-4 agents."""

from __future__ import annotations

import abc

from connect4.engine import Board, Player


class Agent(abc.ABC):
    name: str

    @abc.abstractmethod
    def select_move(self, board: Board, player: Player) -> int:
        raise NotImplementedError
