"""Construction and inspection of the board: a ROWS x COLS grid of cell strings (see pieces.py for the encoding)."""

from copy import deepcopy

from src.chess.pieces import EMPTY, PieceType, flip_owner, make_piece, owner_of
from src.chess.square import COLS, ROWS, BoardDelta
from src.core.shared_types import PlayerSymbol

Board = list[list[str]]

# Back rank seen from the left of the canonical board. 6x6 without bishops (Los Alamos layout).
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def empty_board() -> Board:
    return [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]


def initial_board() -> Board:
    """
    Starting position in canonical orientation.

    W occupies the two top rows (row 0 = back rank), B the two bottom rows (row ROWS-1 = back rank).
    """
    board = empty_board()
    for col, piece_type in enumerate(BACK_RANK):
        board[0][col] = make_piece(PlayerSymbol.W, piece_type)
        board[ROWS - 1][col] = make_piece(PlayerSymbol.B, piece_type)
    for col in range(COLS):
        board[1][col] = make_piece(PlayerSymbol.W, PieceType.PAWN)
        board[ROWS - 2][col] = make_piece(PlayerSymbol.B, PieceType.PAWN)
    return board


def piece_at(board: Board, cell: BoardDelta) -> str:
    return board[cell.row][cell.col]


def has_no_piece(board: Board, cell: BoardDelta) -> bool:
    """Out of bounds cells never hold a piece."""
    if not cell.is_within_bounds():
        return True
    return piece_at(board, cell) == EMPTY


def locate_player(board: Board, player: PlayerSymbol) -> list[BoardDelta]:
    return [
        BoardDelta(row, col)
        for row in range(ROWS)
        for col in range(COLS)
        if owner_of(board[row][col]) == player
    ]


def copy_board(board: Board) -> Board:
    return deepcopy(board)


def rotate_board(board: Board) -> Board:
    """
    The board as seen from the other side of the table.

    Turned by 180 degrees (rows in reverse order and each row mirrored), and every piece changes owner.
    The player sitting on the other side therefore gets a board that looks like the canonical one does to the first player.
    Works on a copy: the given board is left untouched.
    """
    rotated = copy_board(board)
    rotated.reverse()
    for row in rotated:
        for col in range(COLS // 2 + COLS % 2):
            opposite_col = COLS - col - 1
            piece = flip_owner(row[col])
            opposite_piece = flip_owner(row[opposite_col])
            row[col] = opposite_piece
            row[opposite_col] = piece
    return rotated
