"""
The rules oracle: everything the game controller needs to know about the board, without knowing the rules itself.

`RulesOracle` is the contract the controller is written against, `ChessRules` the implementation of the 6x6 variant.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from src.chess import board as board_ops
from src.chess import moves as move_rules
from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import EMPTY, PieceType, make_piece, owner_of, type_of
from src.chess.square import ROWS, BoardDelta
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import PlayerSymbol

logger = logging.getLogger(__name__)

NO_WINNER = ""


@dataclass
class MoveResult:
    """Outcome of executing a move. `winner` is the symbol of the player who won, or an empty string."""

    previous_board: Board
    next_board: Board
    winner: str


class RulesOracle(Protocol):
    """Board construction and rules, as consumed by the game controller"""

    def empty_board(self) -> Board:
        """Board without any pieces."""
        ...

    def initial_board(self) -> Board:
        """Board in the starting position."""
        ...

    def all_moves(self, board: Board, player: PlayerSymbol) -> set[Move]:
        """All moves available to the player."""
        ...

    def has_no_piece(self, board: Board, cell: BoardDelta) -> bool:
        """True if the cell does not hold any piece."""
        ...

    def make_move(
        self, board: Board, from_cell: BoardDelta, to_cell: BoardDelta
    ) -> MoveResult:
        """Execute the move on a copy of the board."""
        ...

    def opponent_of(self, player: PlayerSymbol) -> PlayerSymbol:
        """The other player."""
        ...


class ChessRules:
    """Rules of the 6x6 variant: no check, no castling. Taking the king wins, pawns promote to a queen."""

    def empty_board(self) -> Board:
        return board_ops.empty_board()

    def initial_board(self) -> Board:
        return board_ops.initial_board()

    def all_moves(self, board: Board, player: PlayerSymbol) -> set[Move]:
        return move_rules.all_moves(board, player)

    def has_no_piece(self, board: Board, cell: BoardDelta) -> bool:
        return board_ops.has_no_piece(board, cell)

    def opponent_of(self, player: PlayerSymbol) -> PlayerSymbol:
        return move_rules.opponent_of(player)

    def make_move(
        self, board: Board, from_cell: BoardDelta, to_cell: BoardDelta
    ) -> MoveResult:
        """
        Move the piece standing on `from_cell` to `to_cell`
        ----

        1. Copy the board (the given board is returned untouched as the previous board)
        2. Whatever stands on the target cell gets captured
        3. A pawn that reaches the far row becomes a queen
        4. Capturing the opponent's king wins the game for the player that moved
        """
        if not to_cell.is_within_bounds():
            raise IllegalMoveError(f"Target cell out of bounds: {to_cell}")
        if self.has_no_piece(board, from_cell):
            raise IllegalMoveError(f"No piece to move on {from_cell}")

        next_board = board_ops.copy_board(board)
        moving_piece = board_ops.piece_at(board, from_cell)
        captured_piece = board_ops.piece_at(board, to_cell)
        player = owner_of(moving_piece)
        assert player is not None

        if self._is_promotion(moving_piece, to_cell):
            moving_piece = make_piece(player, PieceType.QUEEN)

        next_board[from_cell.row][from_cell.col] = EMPTY
        next_board[to_cell.row][to_cell.col] = moving_piece

        winner = NO_WINNER
        if self._is_king_capture(player, captured_piece):
            winner = str(player)
            logger.debug("King captured on %s, %s wins", to_cell, winner)

        return MoveResult(previous_board=board, next_board=next_board, winner=winner)

    # -- PRIVATE HELPERS ---
    def _is_promotion(self, piece: str, to_cell: BoardDelta) -> bool:
        if type_of(piece) != PieceType.PAWN:
            return False
        far_row = 0 if owner_of(piece) == PlayerSymbol.B else ROWS - 1
        return to_cell.row == far_row

    def _is_king_capture(self, player: PlayerSymbol, captured_piece: str) -> bool:
        is_king = type_of(captured_piece) == PieceType.KING
        return is_king and owner_of(captured_piece) == self.opponent_of(player)
