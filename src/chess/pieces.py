"""
Defines the types of pieces and how they are encoded in a board cell.

A cell is a plain string: "" for an empty cell, otherwise the owner symbol followed by the piece type,
e.g. "BK" is B's king, "WP" a pawn of W.
"""

from enum import StrEnum

from src.core.shared_types import PlayerSymbol

EMPTY = ""


class PieceType(StrEnum):
    # No bishops in the starting position, but boards set up by hand (or by a host) may hold any of these
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
}


def make_piece(owner: PlayerSymbol, piece_type: PieceType) -> str:
    return f"{owner}{piece_type}"


def owner_of(cell: str) -> PlayerSymbol | None:
    if cell == EMPTY:
        return None
    return PlayerSymbol(cell[0])


def type_of(cell: str) -> PieceType | None:
    if cell == EMPTY:
        return None
    return PieceType(cell[1:])


def points_of(cell: str) -> int:
    # NOTE: The King's worth is undefined here; capturing it ends the game anyway
    piece_type = type_of(cell)
    if piece_type is None:
        return 0
    return PIECE_POINTS.get(piece_type, 0)


def flip_owner(cell: str) -> str:
    """Hand the piece over to the other player, keeping its type. Empty cells stay empty."""
    owner = owner_of(cell)
    if owner is None:
        return cell
    other = PlayerSymbol.W if owner == PlayerSymbol.B else PlayerSymbol.B
    return f"{other}{cell[1:]}"
