"""Human-in-the-loop agent that defers input handling to a CLI prompt function."""

from __future__ import annotations

from typing import Callable

from connect4.agents.base import Agent
from connect4.engine import Board, Player

PromptFn = Callable[[Player], int]


class HumanAgent(Agent):
    def __init__(self, name: str, prompt_fn: PromptFn) -> None:
        self.name = name
        self.prompt_fn = prompt_fn

    def select_move(self, board: Board, player: Player) -> int:
        return self.prompt_fn(player)
