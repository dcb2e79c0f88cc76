"""Exhaustive fixed-depth tree search opponent."""

from __future__ import annotations

import logging
import math
import random
from typing import Dict, List, Optional

from connect4.agents.base import Agent
from connect4.engine import Board, Difficulty, Player
from connect4.errors import InvalidStateError, OutOfRangeError
from connect4.tree import Node, build_tree, count_nodes
from connect4.victory import has_four_in_a_row

logger = logging.getLogger(__name__)


class ComputerAgent(Agent):
    """
    Computer opponent that enumerates every line of play to a fixed depth.

    For each legal column the agent drops its disc, builds the full tree of
    replies (opponent first) down to the tier's depth, and scores it with
    score_node. Equally scored best columns are broken at random.
    """

    def __init__(
        self,
        name: str,
        difficulty: Difficulty,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not isinstance(difficulty, Difficulty):
            raise OutOfRangeError(f"unsupported difficulty tier: {difficulty!r}")

        self.name = name
        self.difficulty = difficulty
        self.max_depth = difficulty.max_depth
        self.rng = rng if rng is not None else random.Random(seed)
        self.nodes_built = 0

    def select_move(self, board: Board, player: Player) -> int:
        trees = _candidate_trees(board, player, self.max_depth)
        self.nodes_built = sum(count_nodes(tree) for tree in trees.values())
        return _pick_best(_score_trees(trees, player, self.max_depth), self.rng)


def score_node(node: Node, player: Player, depth: int, max_depth: int) -> float:
    """
    Score node from player's point of view.

    A win for player is worth +inf at the root (the candidate move itself wins)
    and 10**(max_depth - depth) deeper down. A win for the opponent costs
    100**(max_depth - depth). Otherwise the children's scores are summed; a node
    with no children scores 0.
    """

    if has_four_in_a_row(player, node.board):
        if depth == 0:
            return math.inf
        return 10.0 ** (max_depth - depth)

    if has_four_in_a_row(player.opponent, node.board):
        return -(100.0 ** (max_depth - depth))

    score = 0.0
    for child in node.children:
        score += score_node(child, player, depth + 1, max_depth)
    return score


def evaluate_moves(board: Board, player: Player, max_depth: int) -> Dict[int, float]:
    """Return the aggregate score of every legal column, keyed by column."""

    return _score_trees(_candidate_trees(board, player, max_depth), player, max_depth)


def select_move(board: Board, player: Player, max_depth: int, rng: random.Random) -> int:
    return _pick_best(evaluate_moves(board, player, max_depth), rng)


def _candidate_trees(board: Board, player: Player, max_depth: int) -> Dict[int, Node]:
    if board is None:
        raise ValueError("board must not be None")
    if max_depth < 0:
        raise OutOfRangeError(f"max_depth must be >= 0, got {max_depth}")

    legal = board.legal_moves()
    if not legal:
        raise InvalidStateError("no legal moves available")

    trees: Dict[int, Node] = {}
    for col in legal:
        child, _ = board.make_play(player, col)
        root = Node(child)
        build_tree(player.opponent, root, 0, max_depth)
        trees[col] = root
    return trees


def _score_trees(trees: Dict[int, Node], player: Player, max_depth: int) -> Dict[int, float]:
    return {col: score_node(tree, player, 0, max_depth) for col, tree in trees.items()}


def _pick_best(scores: Dict[int, float], rng: random.Random) -> int:
    best = max(scores.values())
    ties: List[int] = [col for col, score in scores.items() if score == best]
    choice = ties[rng.randrange(len(ties))]

    logger.debug("scores=%s best=%s ties=%s choice=%d", scores, best, ties, choice)
    return choice
