"""
Move selection for the computer opponent in single player mode.

`MoveSupplier` is the contract the game controller is written against. `GreedyComputerPlayer` is a deliberately simple
opponent: it takes the king whenever it can, otherwise grabs the most valuable piece within reach, and otherwise plays
a random move.
"""

import logging
import random
from typing import Optional, Protocol

from src.chess.board import Board, piece_at
from src.chess.moves import Move
from src.chess.pieces import PieceType, points_of, type_of
from src.chess.rules import ChessRules, RulesOracle
from src.core.exceptions import NoLegalMoveError
from src.core.shared_types import PlayerSymbol

logger = logging.getLogger(__name__)


class MoveSupplier(Protocol):
    """Anything that can come up with a move for a player"""

    async def choose_move(self, board: Board, player: PlayerSymbol) -> Move:
        """Pick one move for the player on the given board."""
        ...


class GreedyComputerPlayer:
    """Picks the capture worth the most points. Ties (and quiet positions) are broken at random."""

    def __init__(
        self, rules: Optional[RulesOracle] = None, seed: Optional[int] = None
    ) -> None:
        self.rules = rules or ChessRules()
        self.rng = random.Random(seed)

    async def choose_move(self, board: Board, player: PlayerSymbol) -> Move:
        # sorted: makes the choice reproducible for a given seed (sets have no stable order)
        moves = sorted(self.rules.all_moves(board, player))
        if not moves:
            raise NoLegalMoveError(f"Player {player} has no move available.")

        king_captures = [move for move in moves if self._captures_king(board, move)]
        if king_captures:
            return king_captures[0]

        best_value = max(self._capture_value(board, move) for move in moves)
        best_moves = [
            move for move in moves if self._capture_value(board, move) == best_value
        ]
        selected = self.rng.choice(best_moves)
        logger.debug(
            "Computer (%s) picked %s out of %d moves", player, selected, len(moves)
        )
        return selected

    def _captures_king(self, board: Board, move: Move) -> bool:
        return type_of(piece_at(board, move.to_cell)) == PieceType.KING

    def _capture_value(self, board: Board, move: Move) -> int:
        return points_of(piece_at(board, move.to_cell))
