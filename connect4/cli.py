"""CLI rendering, input helpers and the human-vs-computer turn loop."""

from __future__ import annotations

import argparse
import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from connect4.agents import Agent, ComputerAgent, HumanAgent
from connect4.agents.computer import evaluate_moves
from connect4.engine import COLS, EMPTY_BOARD, Board, CellState, Difficulty, Player
from connect4.errors import Connect4Error, OutOfRangeError
from connect4.victory import has_four_in_a_row

logger = logging.getLogger(__name__)

HEADER = "  " + "   ".join(str(c) for c in range(COLS))
DIVIDER = "-" * (4 * COLS + 1)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_SYMBOLS: Dict[int, str] = {
    int(CellState.EMPTY): "·",
    int(CellState.YELLOW): Player.YELLOW.marker,
    int(CellState.RED): Player.RED.marker,
}


class Outcome(enum.Enum):
    COMPUTER_WIN = "computer"
    HUMAN_WIN = "human"
    DRAW = "draw"


@dataclass(frozen=True)
class GameConfig:
    difficulty: Difficulty = Difficulty.HARD
    computer: Player = Player.YELLOW
    computer_first: bool = False
    seed: Optional[int] = None
    hint: bool = False

    @property
    def human(self) -> Player:
        return self.computer.opponent

    def validate(self) -> None:
        if not isinstance(self.difficulty, Difficulty):
            raise OutOfRangeError(f"unsupported difficulty tier: {self.difficulty!r}")
        if not isinstance(self.computer, Player):
            raise OutOfRangeError(f"unsupported computer color: {self.computer!r}")


def render_board(board: Board) -> str:
    lines: List[str] = [HEADER, DIVIDER]
    for row in board.cells.tolist():
        lines.append("".join(f"| {_SYMBOLS[v]} " for v in row) + "|")
        lines.append(DIVIDER)
    # No divider after the last row.
    return "\n".join(lines[:-1])


def format_scores(scores: Mapping[int, float]) -> str:
    return " ".join(f"{col}:{score:g}" for col, score in scores.items())


def _parse_column(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def prompt_column(player: Player) -> int:
    """Ask the human for a column until they type an integer in [0, COLS)."""

    while True:
        raw = input(f"Player {player.label}'s turn: ")
        print("")
        col = _parse_column(raw)
        if col is None:
            print(f"'{raw}' is not a column number. Try again.")
            continue
        if col < 0 or col >= COLS:
            print(f"Column number must be within 0 and {COLS - 1}. Try again.")
            continue
        return col


def announce(outcome: Outcome, human: Player) -> None:
    if outcome is Outcome.COMPUTER_WIN:
        print(f"I'm sorry player {human.label}. I won again...")
    elif outcome is Outcome.HUMAN_WIN:
        print(f"Congratulations player {human.label}! ¡You won!")
    else:
        print("¡Draw! I didnt loose...again")


def play_game(cfg: GameConfig, agents: Optional[Mapping[Player, Agent]] = None) -> Outcome:
    """
    Run one game on the console and return how it ended.

    agents maps each color to the agent playing it; by default the computer
    color gets a ComputerAgent and the other color a HumanAgent on stdin.
    """

    cfg.validate()
    if agents is None:
        agents = {
            cfg.computer: ComputerAgent("Computer", cfg.difficulty, seed=cfg.seed),
            cfg.human: HumanAgent("Human", prompt_column),
        }

    board = EMPTY_BOARD
    active = cfg.computer if cfg.computer_first else cfg.human
    logger.info(
        "new game: difficulty=%s computer=%s first=%s",
        cfg.difficulty.value,
        cfg.computer.value,
        active.value,
    )

    while True:
        print("")
        print(render_board(board))
        print("")

        if cfg.hint and active is cfg.human:
            scores = evaluate_moves(board, active, cfg.difficulty.max_depth)
            print(f"Hint: {format_scores(scores)}")

        col = agents[active].select_move(board, active)
        if active is cfg.computer:
            print(f"Player {active.label}'s turn. Hmmm...I'll play: {col}")
            print("")

        board, played = board.make_play(active, col)
        if not played:
            print("Row is full. Try again.")
            continue
        logger.debug("%s played column %d (%d empty cells left)", active.value, col, board.empty_cell_count)

        if has_four_in_a_row(active, board):
            print(render_board(board))
            print("")
            outcome = Outcome.COMPUTER_WIN if active is cfg.computer else Outcome.HUMAN_WIN
            announce(outcome, cfg.human)
            return outcome

        if board.is_full:
            print(render_board(board))
            print("")
            announce(Outcome.DRAW, cfg.human)
            return Outcome.DRAW

        active = active.opponent


def main() -> None:
    parser = argparse.ArgumentParser(description="Connect-4 (6x7) against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.HARD.value,
        help="search depth tier (easy=1, medium=3, hard=4 plies)",
    )
    parser.add_argument(
        "--computer",
        choices=[p.value for p in Player],
        default=Player.YELLOW.value,
        help="color played by the computer",
    )
    parser.add_argument("--computer-first", action="store_true", help="let the computer move first")
    parser.add_argument("--seed", type=int, default=None, help="random seed for tie-breaks")
    parser.add_argument("--hint", action="store_true", help="print per-column scores before each human move")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = GameConfig(
            difficulty=Difficulty.parse(args.difficulty),
            computer=Player.parse(args.computer),
            computer_first=args.computer_first,
            seed=args.seed,
            hint=args.hint,
        )
        cfg.validate()
    except Connect4Error as exc:
        parser.error(str(exc))

    try:
        play_game(cfg)
    except (KeyboardInterrupt, EOFError):
        print("")


if __name__ == "__main__":
    main()
