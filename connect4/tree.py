"""Materialized game tree explored by the computer opponent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from connect4.engine import Board, Player


@dataclass
class Node:
    board: Board
    children: List["Node"] = field(default_factory=list)


def build_tree(player: Player, node: Node, depth: int, max_depth: int) -> None:
    """
    Expand node in place, one child per legal column, down to max_depth.

    player is the side to move on node.board; plies alternate on the way down.
    Columns are visited in ascending order, depth-first.
    """

    if depth >= max_depth:
        return

    for col in node.board.legal_moves():
        child_board, _ = node.board.make_play(player, col)
        child = Node(child_board)
        build_tree(player.opponent, child, depth + 1, max_depth)
        node.children.append(child)


def count_nodes(node: Node) -> int:
    return 1 + sum(count_nodes(child) for child in node.children)


def tree_height(node: Node) -> int:
    if not node.children:
        return 0
    return 1 + max(tree_height(child) for child in node.children)
