"""Unit tests for src/services/game_service.py"""

import asyncio
import logging

import pytest

from src.api.models import GameSnapshot, MoveRequest, StartGameRequest
from src.chess.board import initial_board, rotate_board
from src.core.config import GameSettings
from src.core.exceptions import GameError, GameStateError, IllegalMoveError
from src.core.shared_types import GameStatus, PlayerSymbol
from src.game.controller import GameController
from src.services.game_service import GameService

KNIGHT_OUT = MoveRequest(from_row=5, from_col=1, to_row=3, to_col=0)
KNIGHT_BACK = MoveRequest(from_row=3, from_col=0, to_row=5, to_col=1)


@pytest.fixture
def service(controller: GameController) -> GameService:
    return GameService(controller)


# --- SERVICE - START GAME ----
def test_start_game(service: GameService) -> None:
    response = service.start_game(StartGameRequest(max_move=40))

    assert isinstance(response, GameSnapshot)
    assert response.board == initial_board()
    assert response.rotated_board == rotate_board(initial_board())
    assert response.status == GameStatus.PLAYING
    assert response.player_turn == PlayerSymbol.B
    assert response.move_count == 0
    assert response.max_move == 40
    assert not response.is_single_play
    assert response.history_length == 0


def test_snapshot_before_start(service: GameService) -> None:
    response = service.snapshot()
    assert response.status == GameStatus.READY
    assert all(cell == "" for row in response.board for cell in row)


# --- SERVICE - MOVES ----
@pytest.mark.asyncio
async def test_make_move(service: GameService) -> None:
    service.start_game(StartGameRequest(max_move=40))
    response = await service.make_move(KNIGHT_OUT)
    assert response.board[3][0] == "BN"
    assert response.move_count == 1
    assert service.controller.pending_computer_move is None


@pytest.mark.asyncio
async def test_rejected_move_raises(service: GameService) -> None:
    service.start_game(StartGameRequest(max_move=40))
    with pytest.raises(IllegalMoveError):
        _ = await service.make_move(
            MoveRequest(from_row=2, from_col=2, to_row=3, to_col=2)
        )


@pytest.mark.asyncio
async def test_no_moves_after_game_ended(service: GameService) -> None:
    """
    Test any top-level custom exception is raised
    (specific exception types are responsibility of other layers)
    """
    service.start_game(StartGameRequest(max_move=1))
    response = await service.make_move(KNIGHT_OUT)
    assert response.status == GameStatus.TIE
    with pytest.raises(GameError):
        _ = await service.make_move(KNIGHT_BACK)


@pytest.mark.asyncio
async def test_move_on_rotated_view(service: GameService) -> None:
    service.start_game(StartGameRequest(max_move=40))
    # the W pawn on (1, 0) shows up at (4, 5) of the rotated view
    request = MoveRequest(from_row=4, from_col=5, to_row=3, to_col=5, rotate_board=True)
    response = await service.make_move(request)
    assert response.board[2][0] == "WP"
    assert response.rotated_board[3][5] == "BP"


@pytest.mark.asyncio
async def test_single_player_computer_replies(service: GameService) -> None:
    service.start_game(StartGameRequest(max_move=40, is_single_play=True))
    response = await service.make_move(KNIGHT_OUT)
    # snapshot was taken before the computer moved
    assert response.history_length == 0

    pending = service.controller.pending_computer_move
    assert pending is not None
    await pending

    after = service.snapshot()
    assert after.history_length == 1
    assert after.board != response.board
    assert after.move_count == 1


@pytest.mark.asyncio
async def test_wait_for_computer_before_moving() -> None:
    service = GameService(
        GameController(settings=GameSettings(computer_move_delay=10.0))
    )
    service.start_game(StartGameRequest(max_move=40, is_single_play=True))
    await service.make_move(KNIGHT_OUT)

    with pytest.raises(GameStateError):
        _ = await service.make_move(KNIGHT_BACK)

    # restarting drops the pending computer move
    pending = service.controller.pending_computer_move
    service.start_game(StartGameRequest(max_move=40, is_single_play=True))
    assert pending is not None
    with pytest.raises(asyncio.CancelledError):
        await pending
    assert service.snapshot().board == initial_board()


@pytest.mark.asyncio
async def test_move_right_after_restart() -> None:
    """The computer move pending from the previous game must not block the first move of the new one"""
    service = GameService(
        GameController(settings=GameSettings(computer_move_delay=10.0))
    )
    service.start_game(StartGameRequest(max_move=40, is_single_play=True))
    await service.make_move(KNIGHT_OUT)
    old_pending = service.controller.pending_computer_move

    service.start_game(StartGameRequest(max_move=40, is_single_play=True))
    response = await service.make_move(KNIGHT_OUT)

    assert response.board[3][0] == "BN"
    assert response.move_count == 1
    new_pending = service.controller.pending_computer_move
    assert new_pending is not None
    assert new_pending is not old_pending
    service.controller.cancel_computer_move()


@pytest.mark.asyncio
async def test_rejected_move_logged_at_debug(
    service: GameService, caplog: pytest.LogCaptureFixture
) -> None:
    service.start_game(StartGameRequest(max_move=40))
    with caplog.at_level(logging.DEBUG, logger="src.services.game_service"):
        with pytest.raises(IllegalMoveError):
            _ = await service.make_move(
                MoveRequest(from_row=2, from_col=2, to_row=3, to_col=2)
            )
    rejected = [r for r in caplog.records if r.message.startswith("Move rejected")]
    assert len(rejected) == 1
    assert rejected[0].levelno == logging.DEBUG


# --- SERVICE - LEGAL MOVES ----
def test_legal_moves(service: GameService) -> None:
    service.start_game(StartGameRequest(max_move=40))
    response = service.legal_moves()
    assert response.player == PlayerSymbol.B
    assert len(response.legal_moves) == 10
    assert ((5, 1), (3, 0)) in response.legal_moves


def test_legal_moves_without_board(service: GameService) -> None:
    service.controller.state.board = None
    assert service.legal_moves().legal_moves == []
