"""Tests for headless matches and the random baseline."""

import sys
from collections import Counter

import pytest

from connect4 import arena
from connect4.agents import ComputerAgent, RandomAgent
from connect4.arena import evaluate, play_match
from connect4.engine import EMPTY_BOARD, Difficulty, Player
from connect4.errors import InvalidStateError

from conftest import DRAW_RED_MOVES, DRAW_YELLOW_MOVES, ScriptedAgent, play_columns


class TestPlayMatch:
    def test_starting_player_moves_first(self):
        red = ScriptedAgent("red", [1, 1, 1])
        yellow = ScriptedAgent("yellow", [2, 2, 2, 2])
        result = play_match({Player.RED: red, Player.YELLOW: yellow}, Player.YELLOW)

        assert result.winner is Player.YELLOW
        assert result.moves == [2, 1, 2, 1, 2, 1, 2]
        assert result.board.empty_cell_count == 35

    def test_draw(self):
        result = play_match(
            {
                Player.YELLOW: ScriptedAgent("yellow", DRAW_YELLOW_MOVES),
                Player.RED: ScriptedAgent("red", DRAW_RED_MOVES),
            },
            Player.YELLOW,
        )
        assert result.winner is None
        assert result.board.is_full
        assert len(result.moves) == 42

    def test_full_column_choice_is_invalid_state(self):
        red = ScriptedAgent("red", [0, 0, 0, 0])
        yellow = ScriptedAgent("yellow", [0, 0, 0])
        with pytest.raises(InvalidStateError):
            play_match({Player.RED: red, Player.YELLOW: yellow}, Player.RED)


class TestRandomAgent:
    def test_only_legal_columns(self):
        board = play_columns(Player.RED, [3] * 6)
        agent = RandomAgent("random", seed=1)
        picks = Counter(agent.select_move(board, Player.RED) for _ in range(300))
        assert 3 not in picks
        assert set(picks) == {0, 1, 2, 4, 5, 6}

    def test_full_board(self, draw_board):
        with pytest.raises(InvalidStateError):
            RandomAgent("random").select_move(draw_board, Player.RED)

    def test_seeded(self):
        a = RandomAgent("a", seed=3)
        b = RandomAgent("b", seed=3)
        assert [a.select_move(EMPTY_BOARD, Player.RED) for _ in range(10)] == [
            b.select_move(EMPTY_BOARD, Player.RED) for _ in range(10)
        ]


class TestEvaluate:
    def test_counts_every_game(self):
        agent = ComputerAgent("easy", Difficulty.EASY, seed=0)
        opponent = RandomAgent("random", seed=1)
        result = evaluate(agent, opponent, 4, progress=False)
        assert set(result) == {"wins", "draws", "losses"}
        assert sum(result.values()) == 4

    def test_alternates_starting_player(self):
        # Each scripted agent always stacks its own column, so whoever starts wins.
        class Stacker(ScriptedAgent):
            def __init__(self, name, col):
                super().__init__(name, [])
                self.col = col

            def select_move(self, board, player):
                return self.col

        result = evaluate(Stacker("a", 0), Stacker("b", 6), 4, progress=False)
        assert result == {"wins": 2, "draws": 0, "losses": 2}


def test_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["connect4-arena", "--difficulty", "easy", "--games", "2", "--seed", "4", "--no-progress", "--sample"],
    )
    arena.main()

    out = capsys.readouterr().out
    assert "Computer (easy) vs Random games=2 wins/draw/loss=" in out
    assert "sample game result:" in out
    assert "  0   1   2   3   4   5   6" in out


def test_main_rejects_zero_games(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["connect4-arena", "--games", "0"])
    with pytest.raises(SystemExit):
        arena.main()


def test_main_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["connect4-arena", "--log-level", "loud"])
    with pytest.raises(SystemExit) as excinfo:
        arena.main()
    assert excinfo.value.code == 2
