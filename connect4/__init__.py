"""Connect-4 package (board + tree-search opponent + CLI)."""

from connect4.engine import COLS, EMPTY_BOARD, ROWS, Board, CellState, Difficulty, Player
from connect4.errors import Connect4Error, InvalidStateError, OutOfRangeError
from connect4.victory import has_four_in_a_row, winner

__all__ = [
    "COLS",
    "EMPTY_BOARD",
    "ROWS",
    "Board",
    "CellState",
    "Connect4Error",
    "Difficulty",
    "InvalidStateError",
    "OutOfRangeError",
    "Player",
    "has_four_in_a_row",
    "winner",
]
