"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the move sets for each piece type.

The variant has no notion of check: every move produced here can be played, and the game ends when a king gets captured.
"""

from typing import Callable, NamedTuple

from src.chess.board import Board, locate_player, piece_at
from src.chess.pieces import EMPTY, PieceType, owner_of, type_of
from src.chess.square import BoardDelta
from src.core.shared_types import PlayerSymbol

Vector = tuple[int, int]


class Move(NamedTuple):
    """basic definition of a move to be made"""

    from_cell: BoardDelta
    to_cell: BoardDelta


def opponent_of(player: PlayerSymbol) -> PlayerSymbol:
    return PlayerSymbol.W if player == PlayerSymbol.B else PlayerSymbol.B


def forward(player: PlayerSymbol) -> int:
    """B starts at the bottom of the canonical board and moves up (decreasing row), W moves down."""
    return -1 if player == PlayerSymbol.B else 1


# --- MOVEMENT RULES ---
def raycasting_move(
    cell: BoardDelta, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    We define move directions and move along them until we hit another piece or
    the edge of the board. The first occupied cell can be taken if it holds an opponent's piece.
    """
    player = owner_of(piece_at(board, cell))
    moves: list[Move] = []
    for d_row, d_col in directions:
        target = cell
        while True:
            target = target.shifted(d_row, d_col)
            if not target.is_within_bounds():
                break

            target_piece = piece_at(board, target)
            if target_piece != EMPTY:
                if owner_of(target_piece) != player:
                    moves.append(Move(cell, target))
                break

            moves.append(Move(cell, target))
    return moves


def single_step_move(
    cell: BoardDelta, board: Board, deltas: list[Vector]
) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just move a single step along a direction"""
    player = owner_of(piece_at(board, cell))
    moves: list[Move] = []
    for d_row, d_col in deltas:
        target = cell.shifted(d_row, d_col)
        if not target.is_within_bounds():
            continue
        if owner_of(piece_at(board, target)) != player:
            moves.append(Move(cell, target))
    return moves


def candidate_pawn_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single cell forward, onto an empty cell.
    - takes diagonally forward
    (no double step on the small board)
    """
    player = owner_of(piece_at(board, cell))
    assert player is not None
    step = forward(player)

    moves: list[Move] = []
    push = cell.shifted(step, 0)
    if push.is_within_bounds() and piece_at(board, push) == EMPTY:
        moves.append(Move(cell, push))

    for d_col in (-1, 1):
        target = cell.shifted(step, d_col)
        if not target.is_within_bounds():
            continue
        if owner_of(piece_at(board, target)) == opponent_of(player):
            moves.append(Move(cell, target))
    return moves


def candidate_knight_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    knight_deltas: list[Vector] = [
        (2, 1),
        (2, -1),
        (-2, 1),
        (-2, -1),
        (1, 2),
        (1, -2),
        (-1, 2),
        (-1, -2),
    ]
    return single_step_move(cell, board, knight_deltas)


def candidate_bishop_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    diagonals: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
    return raycasting_move(cell, board, diagonals)


def candidate_rook_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    stay_on_row: list[Vector] = [(0, 1), (0, -1)]
    stay_on_col: list[Vector] = [(1, 0), (-1, 0)]
    horizontal_moves = raycasting_move(cell, board, stay_on_row)
    vertical_moves = raycasting_move(cell, board, stay_on_col)
    return horizontal_moves + vertical_moves


def candidate_queen_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_bishop_moves(cell, board) + candidate_rook_moves(cell, board)


def candidate_king_moves(cell: BoardDelta, board: Board) -> list[Move]:
    """The king can move by a single cell at the time."""
    king_deltas: list[Vector] = [
        (0, 1),
        (0, -1),
        (1, 0),
        (-1, 0),
        (1, 1),
        (1, -1),
        (-1, 1),
        (-1, -1),
    ]
    return single_step_move(cell, board, king_deltas)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[BoardDelta, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def all_moves(board: Board, player: PlayerSymbol) -> set[Move]:
    """Every move the given player can make on the board."""
    moves: set[Move] = set()
    for cell in locate_player(board, player):
        piece_type = type_of(piece_at(board, cell))
        assert piece_type is not None
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece_type]
        moves.update(movement_rule(cell, board))
    return moves
