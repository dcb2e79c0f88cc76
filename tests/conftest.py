from __future__ import annotations

from typing import Iterable, List

import pytest

from connect4.agents import Agent
from connect4.engine import EMPTY_BOARD, Board, Player

# Rows alternate between these two patterns; the filled board has no four-in-a-row.
DRAW_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]

# Move orders (Yellow starts) that reach DRAW_ROWS without anybody winning on the way.
DRAW_YELLOW_MOVES = [0, 1, 4, 5, 2, 3, 6] * 3
DRAW_RED_MOVES = [2, 3, 6, 0, 1, 4, 5] * 3


class ScriptedAgent(Agent):
    def __init__(self, name: str, moves: Iterable[int]) -> None:
        self.name = name
        self.moves = iter(moves)
        self.calls = 0

    def select_move(self, board: Board, player: Player) -> int:
        self.calls += 1
        return next(self.moves)


def play_columns(player: Player, columns: Iterable[int], board: Board = EMPTY_BOARD) -> Board:
    """Alternate players over columns, starting with player."""

    for col in columns:
        board, played = board.make_play(player, col)
        assert played
        player = player.opponent
    return board


def interleave(first: List[int], second: List[int]) -> List[int]:
    out: List[int] = []
    for a, b in zip(first, second):
        out.extend([a, b])
    return out


@pytest.fixture
def draw_board() -> Board:
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture
def scripted():
    return ScriptedAgent
