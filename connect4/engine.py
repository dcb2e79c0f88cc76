"""Immutable 6x7 Connect-4 board plus the small value types around it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from connect4.errors import OutOfRangeError

ROWS = 6
COLS = 7


class CellState(enum.IntEnum):
    EMPTY = 0
    YELLOW = 1
    RED = 2


class Player(enum.Enum):
    YELLOW = "yellow"
    RED = "red"

    @property
    def opponent(self) -> "Player":
        return Player.RED if self is Player.YELLOW else Player.YELLOW

    @property
    def cell(self) -> CellState:
        return CellState.YELLOW if self is Player.YELLOW else CellState.RED

    @property
    def marker(self) -> str:
        return "O" if self is Player.YELLOW else "X"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> "Player":
        if not isinstance(name, str):
            raise OutOfRangeError(f"unknown player color: {name!r}")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise OutOfRangeError(f"unknown player color: {name!r}") from None


class Difficulty(enum.Enum):
    """
    Named difficulty tier.

    The tier only fixes the maximum search depth (plies explored after the
    candidate move); it has no other effect on play.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def max_depth(self) -> int:
        return _DEPTHS[self]

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        if not isinstance(name, str):
            raise OutOfRangeError(f"unknown difficulty tier: {name!r}")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise OutOfRangeError(f"unknown difficulty tier: {name!r}") from None


_DEPTHS: Dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 4,
}

_MARKERS: Dict[str, CellState] = {
    ".": CellState.EMPTY,
    "·": CellState.EMPTY,
    "O": CellState.YELLOW,
    "X": CellState.RED,
}


def _check_column(col: int) -> None:
    if col < 0 or col >= COLS:
        raise OutOfRangeError(f"column {col} out of range [0, {COLS})")


def _frozen(cells: np.ndarray) -> np.ndarray:
    # Backed by an immutable bytes buffer, so WRITEABLE can never be turned back on.
    return np.frombuffer(cells.astype(np.int8).tobytes(), dtype=np.int8).reshape(ROWS, COLS)


@dataclass(frozen=True, eq=False)
class Board:
    """
    Board snapshot.

    cells values are CellState ints, row 0 is the top of the board. A board
    never changes after construction: make_play returns a fresh board.
    """

    cells: np.ndarray  # shape (ROWS, COLS), dtype=int8, read-only
    empty_cell_count: int

    def __post_init__(self) -> None:
        cells = np.asarray(self.cells)
        if cells.shape != (ROWS, COLS):
            raise OutOfRangeError(f"cells must have shape {(ROWS, COLS)}, got {cells.shape}")
        if not np.isin(cells, [int(s) for s in CellState]).all():
            raise OutOfRangeError("cells hold values outside CellState")

        empty = int(np.count_nonzero(cells == CellState.EMPTY))
        if self.empty_cell_count != empty:
            raise OutOfRangeError(f"empty_cell_count is {self.empty_cell_count!r} but the board has {empty} empty cells")

        object.__setattr__(self, "cells", _frozen(cells))
        object.__setattr__(self, "empty_cell_count", empty)

    @classmethod
    def empty(cls) -> "Board":
        cells = np.zeros((ROWS, COLS), dtype=np.int8)
        return cls(cells=cells, empty_cell_count=ROWS * COLS)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from ROWS strings of COLS markers, top row first.

        Markers are "." or "·" (empty), "X" (red) and "O" (yellow); spaces are
        ignored. Gravity is not checked, so floating discs are accepted.
        """

        if len(rows) != ROWS:
            raise OutOfRangeError(f"expected {ROWS} rows, got {len(rows)}")

        cells = np.zeros((ROWS, COLS), dtype=np.int8)
        for r, raw in enumerate(rows):
            markers = raw.replace(" ", "")
            if len(markers) != COLS:
                raise OutOfRangeError(f"row {r}: expected {COLS} cells, got {len(markers)}")
            for c, marker in enumerate(markers):
                if marker not in _MARKERS:
                    raise OutOfRangeError(f"row {r}: unknown marker {marker!r}")
                cells[r, c] = _MARKERS[marker]

        empty = int(np.count_nonzero(cells == CellState.EMPTY))
        return cls(cells=cells, empty_cell_count=empty)

    def get_cell(self, row: int, col: int) -> CellState:
        if row < 0 or row >= ROWS:
            raise OutOfRangeError(f"row {row} out of range [0, {ROWS})")
        _check_column(col)
        return CellState(int(self.cells[row, col]))

    def is_playable(self, col: int) -> bool:
        _check_column(col)
        return int(self.cells[0, col]) == CellState.EMPTY

    def legal_moves(self) -> List[int]:
        return [c for c in range(COLS) if int(self.cells[0, c]) == CellState.EMPTY]

    @property
    def is_full(self) -> bool:
        return self.empty_cell_count == 0

    def make_play(self, player: Player, column: int) -> Tuple["Board", bool]:
        """
        Drop a disc for player into column.

        Returns (new_board, True) on success. A full column is a normal outcome
        and returns (self, False) without building a new board.
        """

        _check_column(column)
        if int(self.cells[0, column]) != CellState.EMPTY:
            return self, False

        row = ROWS - 1
        while int(self.cells[row, column]) != CellState.EMPTY:
            row -= 1

        cells = self.cells.copy()
        cells[row, column] = int(player.cell)
        return Board(cells=cells, empty_cell_count=self.empty_cell_count - 1), True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.empty_cell_count == other.empty_cell_count and bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash(self.cells.tobytes())

    def __repr__(self) -> str:
        rows = ["".join(_SYMBOLS[int(v)] for v in row) for row in self.cells]
        return f"Board({rows!r}, empty={self.empty_cell_count})"


_SYMBOLS = {int(CellState.EMPTY): ".", int(CellState.YELLOW): "O", int(CellState.RED): "X"}

EMPTY_BOARD = Board.empty()
