"""Headless agent-vs-agent matches for checking difficulty tiers."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from tqdm import trange

from connect4.agents import Agent, ComputerAgent, RandomAgent
from connect4.cli import LOG_LEVELS, render_board
from connect4.engine import EMPTY_BOARD, Board, Difficulty, Player
from connect4.errors import InvalidStateError
from connect4.victory import winner

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    winner: Optional[Player]  # None for a draw
    board: Board
    moves: List[int] = field(default_factory=list)


def play_match(agents: Mapping[Player, Agent], starting_player: Player = Player.RED) -> MatchResult:
    """Play one game to completion, starting_player moving first."""

    board = EMPTY_BOARD
    active = starting_player
    moves: List[int] = []

    while True:
        col = agents[active].select_move(board, active)
        board, played = board.make_play(active, col)
        if not played:
            raise InvalidStateError(f"{agents[active].name} chose full column {col}")
        moves.append(col)

        won = winner(board)
        if won is not None:
            return MatchResult(winner=won, board=board, moves=moves)
        if board.is_full:
            return MatchResult(winner=None, board=board, moves=moves)

        active = active.opponent


def evaluate(agent: Agent, opponent: Agent, games: int, *, progress: bool = True) -> Dict[str, int]:
    """
    Play agent against opponent and count results from agent's perspective.

    agent always plays Red; who starts alternates every game to reduce
    first-player bias.
    """

    wins = 0
    draws = 0
    losses = 0

    for g in trange(games, desc=f"{agent.name} vs {opponent.name}", disable=not progress, leave=False):
        starting = Player.RED if g % 2 == 0 else Player.YELLOW
        result = play_match({Player.RED: agent, Player.YELLOW: opponent}, starting)

        if result.winner is None:
            draws += 1
        elif result.winner is Player.RED:
            wins += 1
        else:
            losses += 1
        logger.debug("game %d: start=%s winner=%s moves=%s", g, starting.value, result.winner, result.moves)

    return {"wins": wins, "draws": draws, "losses": losses}


def _build_opponent(choice: str, seed: Optional[int]) -> Agent:
    if choice == "random":
        return RandomAgent("Random", seed=seed)
    difficulty = Difficulty.parse(choice)
    return ComputerAgent(f"Computer ({difficulty.value})", difficulty, seed=seed)


def main() -> None:
    parser = argparse.ArgumentParser(description="Connect-4 computer vs computer/random matches")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="difficulty tier of the evaluated computer",
    )
    parser.add_argument(
        "--opponent",
        choices=["random"] + [d.value for d in Difficulty],
        default="random",
        help="opponent agent",
    )
    parser.add_argument("--games", type=int, default=10, help="number of games")
    parser.add_argument("--seed", type=int, default=None, help="base random seed")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("--sample", action="store_true", help="play one extra game and print its final board")
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

    if args.games < 1:
        parser.error("--games must be >= 1")

    difficulty = Difficulty.parse(args.difficulty)
    agent = ComputerAgent(f"Computer ({difficulty.value})", difficulty, seed=args.seed)
    opponent_seed = None if args.seed is None else args.seed + 1
    opponent = _build_opponent(args.opponent, opponent_seed)

    result = evaluate(agent, opponent, args.games, progress=not args.no_progress)
    print(
        f"{agent.name} vs {opponent.name} games={args.games} "
        f"wins/draw/loss={result['wins']}/{result['draws']}/{result['losses']}"
    )

    if args.sample:
        sample = play_match({Player.RED: agent, Player.YELLOW: opponent})
        outcome = "draw" if sample.winner is None else sample.winner.label
        print(f"sample game result: {outcome}")
        print(render_board(sample.board))


if __name__ == "__main__":
    main()
