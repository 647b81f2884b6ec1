"""Orchestration of communication from a host (frontend / API router) to the game controller (and the reverse direction)."""

import logging

from src.api.models import (
    GameSnapshot,
    LegalMovesResponse,
    MoveRequest,
    StartGameRequest,
)
from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.shared_types import GameStatus
from src.game.controller import GameController

logger = logging.getLogger(__name__)


class GameService:
    """Translates requests into controller calls, and the controller's state into snapshots."""

    def __init__(self, controller: GameController) -> None:
        self.controller = controller

    def start_game(self, request: StartGameRequest) -> GameSnapshot:
        """Player requested to (re)start the game. A computer move still pending from the previous game is dropped."""
        self.controller.cancel_computer_move()
        self.controller.start_game(request.max_move, request.is_single_play)
        return self.snapshot()

    async def make_move(self, request: MoveRequest) -> GameSnapshot:
        """
        Make a move attempt.
        ----

        In single player mode, the computer's reply gets scheduled as soon as the move is accepted (if the game goes on).
        The returned snapshot shows the board right after the player's own move.
        """
        if self.controller.pending_computer_move is not None:
            raise GameStateError("Wait for the computer to make its move first.")

        accepted = self.controller.move(
            request.from_cell, request.to_cell, request.rotate_board
        )
        if not accepted:
            logger.debug(
                "Move rejected: %s -> %s", request.from_cell, request.to_cell
            )
            raise IllegalMoveError(
                f"Move not allowed: {request.from_cell} -> {request.to_cell} (status: {self.controller.game_status})"
            )

        if (
            self.controller.is_single_play
            and self.controller.game_status == GameStatus.PLAYING
        ):
            self.controller.computer_move()
        return self.snapshot()

    def legal_moves(self) -> LegalMovesResponse:
        """retrieve set of moves for the turn player."""
        board = self.controller.state.board
        moves = self.controller.get_all_moves(board) if board is not None else set()
        return LegalMovesResponse(
            player=self.controller.player_turn,
            legal_moves=sorted(
                (
                    (move.from_cell.row, move.from_cell.col),
                    (move.to_cell.row, move.to_cell.col),
                )
                for move in moves
            ),
        )

    def snapshot(self) -> GameSnapshot:
        """
        Retrieve current game state.
        ----
        Used in a "polling" loop by the frontend to find out when the computer has moved for instance.
        """
        controller = self.controller
        return GameSnapshot(
            board=controller.state.board or [],
            rotated_board=controller.get_rotated_board(),
            status=controller.game_status,
            player_turn=controller.player_turn,
            move_count=controller.move_count,
            max_move=controller.max_move,
            is_single_play=controller.is_single_play,
            history_length=len(controller.history.moves),
        )
