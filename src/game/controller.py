"""
The GameController is the entrypoint into the domain layer for a host application (or the service layer).
It owns the session of a single game and exposes the operations to play it: start, move, let the computer move.
The host reads the public attributes back after each operation to render the game.
"""

import asyncio
import logging
from typing import Optional

from src.ai.computer import GreedyComputerPlayer, MoveSupplier
from src.chess.board import Board, rotate_board
from src.chess.moves import Move
from src.chess.rules import ChessRules, RulesOracle
from src.chess.square import BoardDelta
from src.core.config import GameSettings
from src.core.shared_types import COMPUTER_PLAYER, GameStatus, PlayerSymbol
from src.game import transitions
from src.game.session import GameSession, GameState, History

logger = logging.getLogger(__name__)


class GameController:
    """Authoritative state of one game."""

    def __init__(
        self,
        rules: Optional[RulesOracle] = None,
        move_supplier: Optional[MoveSupplier] = None,
        settings: Optional[GameSettings] = None,
    ) -> None:
        self.rules = rules or ChessRules()
        self.move_supplier = move_supplier or GreedyComputerPlayer(self.rules)
        self.settings = settings or GameSettings()
        self.session: GameSession = transitions.new_session(self.rules)
        self.pending_computer_move: Optional[asyncio.Task[None]] = None

    # --- READ ACCESS FOR THE HOST ---
    @property
    def state(self) -> GameState:
        return self.session.state

    @state.setter
    def state(self, state: GameState) -> None:
        self.session.state = state

    @property
    def game_status(self) -> GameStatus:
        return self.session.game_status

    @property
    def player_turn(self) -> PlayerSymbol:
        return self.session.player_turn

    @property
    def move_count(self) -> int:
        return self.session.move_count

    @property
    def max_move(self) -> int:
        return self.session.max_move

    @property
    def is_single_play(self) -> bool:
        return self.session.is_single_play

    @property
    def history(self) -> History:
        return self.session.history

    # --- GAME OPERATIONS ---
    def start_game(
        self, max_move: Optional[int] = None, is_single_play: bool = False
    ) -> None:
        """Start (or restart) a game from the initial position. Without a move budget, the configured default is used."""
        if max_move is None:
            max_move = self.settings.default_max_move
        transitions.start_game(self.session, self.rules, max_move, is_single_play)

    def get_all_moves(self, board: Board) -> set[Move]:
        """Moves of the turn player on the given board."""
        return self.rules.all_moves(board, self.session.player_turn)

    def get_rotated_board(self) -> Board:
        """
        The board as the second player sees it: turned around, with the colors swapped.
        ---

        Moves picked on this view can be submitted with `should_rotate_board=True`.
        """
        board = self.session.state.board
        if board is None:
            return []
        return rotate_board(board)

    def move(
        self,
        from_cell: BoardDelta,
        to_cell: BoardDelta,
        should_rotate_board: bool = False,
    ) -> bool:
        """Attempt a move. Returns False (and leaves the game untouched) if the move cannot be made."""
        return transitions.apply_move(
            self.session, self.rules, from_cell, to_cell, should_rotate_board
        )

    def computer_move(self) -> asyncio.Task[None]:
        """
        Let the computer reply after the configured delay
        -----

        Schedules the move on the running event loop and returns immediately. The returned task can be awaited or
        cancelled; it is also kept as `pending_computer_move`.
        NOTE: No synchronous move should be made while the computer move is pending (nothing guards against it).
        NOTE: Errors raised by the move supplier or the rules are not handled: they end up in the task.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._computer_move_after_delay())
        task.add_done_callback(self._on_computer_move_done)
        self.pending_computer_move = task
        logger.debug(
            "Computer move scheduled in %.2fs", self.settings.computer_move_delay
        )
        return task

    def cancel_computer_move(self) -> bool:
        """
        Cancel the pending computer move. Returns False if there was nothing left to cancel.

        The move is no longer pending as soon as this returns (the task itself finishes on the next loop iteration).
        """
        task = self.pending_computer_move
        self.pending_computer_move = None
        if task is None or task.done():
            return False
        return task.cancel()

    def pause(self) -> bool:
        """Only a game in progress can be paused."""
        return transitions.pause(self.session)

    def resume(self) -> bool:
        return transitions.resume(self.session)

    # -- PRIVATE HELPERS ---
    async def _computer_move_after_delay(self) -> None:
        await asyncio.sleep(self.settings.computer_move_delay)

        # the game may have ended (or been paused) while waiting
        if not transitions.can_apply_computer_move(self.session):
            logger.debug(
                "Computer move skipped: game status is %s", self.session.game_status
            )
            return

        board = self.session.state.board
        assert board is not None
        from_cell, to_cell = await self.move_supplier.choose_move(
            board, COMPUTER_PLAYER
        )
        result = self.rules.make_move(board, from_cell, to_cell)
        transitions.apply_computer_move(self.session, self.rules, result)
        logger.debug("Computer move: %s -> %s", from_cell, to_cell)

    def _on_computer_move_done(self, task: asyncio.Task[None]) -> None:
        if self.pending_computer_move is task:
            self.pending_computer_move = None
        if task.cancelled():
            logger.debug("Computer move cancelled")
            return
        error = task.exception()
        if error is not None:
            # reported only: whoever holds the task still gets the exception when awaiting it
            logger.error("Computer move failed: %r", error)
