"""Four-in-a-row detection over a whole board."""

from __future__ import annotations

from typing import List, Optional, Tuple

from connect4.engine import COLS, ROWS, Board, Player

REQUIRED_IN_A_ROW = 4

# (d_row, d_col) arms checked from every occupied cell. Both arms of each axis
# are listed so that every arm is gated on its own bounds.
_ARMS: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # right
    (0, -1),  # left
    (-1, 0),  # up
    (1, 0),  # down
    (-1, -1),  # up-left
    (1, -1),  # down-left
    (-1, 1),  # up-right
    (1, 1),  # down-right
)


def _arm_fits(row: int, col: int, dr: int, dc: int) -> bool:
    reach = REQUIRED_IN_A_ROW - 1
    end_r = row + dr * reach
    end_c = col + dc * reach
    return 0 <= end_r < ROWS and 0 <= end_c < COLS


def _run_from(grid: List[List[int]], row: int, col: int) -> bool:
    start = grid[row][col]
    for dr, dc in _ARMS:
        if not _arm_fits(row, col, dr, dc):
            continue
        if all(grid[row + dr * i][col + dc * i] == start for i in range(1, REQUIRED_IN_A_ROW)):
            return True
    return False


def has_four_in_a_row(player: Player, board: Board) -> bool:
    """Return True if player owns four contiguous cells in any row, column or diagonal."""

    if board is None:
        raise ValueError("board must not be None")

    grid = board.cells.tolist()
    mark = int(player.cell)
    for r in range(ROWS):
        for c in range(COLS):
            if grid[r][c] == mark and _run_from(grid, r, c):
                return True
    return False


def winner(board: Board) -> Optional[Player]:
    for player in Player:
        if has_four_in_a_row(player, board):
            return player
    return None
