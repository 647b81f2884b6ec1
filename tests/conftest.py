"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board, empty_board
from src.chess.moves import Move
from src.chess.rules import ChessRules, MoveResult
from src.chess.square import BoardDelta
from src.core.config import GameSettings
from src.core.shared_types import PlayerSymbol
from src.game.controller import GameController


class ScriptedRules(ChessRules):
    """
    Real rules, except for the winner: the n-th call to make_move reports the n-th scripted winner.
    (once the script runs out, no winner is reported anymore)
    """

    def __init__(self, winners: list[str]) -> None:
        self.winners = list(winners)
        self.calls = 0

    def make_move(
        self, board: Board, from_cell: BoardDelta, to_cell: BoardDelta
    ) -> MoveResult:
        result = super().make_move(board, from_cell, to_cell)
        winner = self.winners[self.calls] if self.calls < len(self.winners) else ""
        self.calls += 1
        return MoveResult(result.previous_board, result.next_board, winner)


class MockMoveSupplier:
    """Always plays the move it was given. Records the requests it received."""

    def __init__(self, move: Move) -> None:
        self.move = move
        self.requests: list[tuple[Board, PlayerSymbol]] = []

    async def choose_move(self, board: Board, player: PlayerSymbol) -> Move:
        self.requests.append((board, player))
        return self.move


@pytest.fixture
def instant_settings() -> GameSettings:
    """No waiting for the computer in tests."""
    return GameSettings(computer_move_delay=0.0)


@pytest.fixture
def controller(instant_settings: GameSettings) -> GameController:
    return GameController(settings=instant_settings)


@pytest.fixture
def board_with_pieces() -> Callable[[dict[tuple[int, int], str]], Board]:
    """Call the inner function with a mapping of (row, col) -> piece to get a board holding just those pieces"""

    def _create_board(pieces: dict[tuple[int, int], str]) -> Board:
        board = empty_board()
        for (row, col), piece in pieces.items():
            board[row][col] = piece
        return board

    return _create_board


@pytest.fixture
def scripted_rules() -> type[ScriptedRules]:
    """Call with the list of winners the rules should report, e.g. scripted_rules(["", "", "B"])"""
    return ScriptedRules


@pytest.fixture
def mock_move_supplier_factory() -> type[MockMoveSupplier]:
    """Call with the move the supplier should always play"""
    return MockMoveSupplier
