"""Requests and Response models"""

from pydantic import BaseModel, Field, field_validator

from src.chess.square import COLS, ROWS, BoardDelta
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameStatus, PlayerSymbol


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    max_move: int = Field(gt=0)
    is_single_play: bool = False


class MoveRequest(BaseModel):
    from_row: int
    from_col: int
    to_row: int
    to_col: int
    rotate_board: bool = False

    @field_validator(*["from_row", "to_row"])
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not 0 <= value < ROWS:
            raise InvalidRequestError(
                f"Row {value} is not on the board (0 - {ROWS - 1})."
            )
        return value

    @field_validator(*["from_col", "to_col"])
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not 0 <= value < COLS:
            raise InvalidRequestError(
                f"Column {value} is not on the board (0 - {COLS - 1})."
            )
        return value

    @property
    def from_cell(self) -> BoardDelta:
        return BoardDelta(self.from_row, self.from_col)

    @property
    def to_cell(self) -> BoardDelta:
        return BoardDelta(self.to_row, self.to_col)


# --- RESPONSE MODELS ---
class GameSnapshot(BaseModel):
    """Everything a frontend needs to draw the game."""

    board: list[list[str]]
    rotated_board: list[list[str]]
    status: GameStatus
    player_turn: PlayerSymbol
    move_count: int
    max_move: int
    is_single_play: bool
    history_length: int


class LegalMovesResponse(BaseModel):
    player: PlayerSymbol
    legal_moves: list[tuple[tuple[int, int], tuple[int, int]]]
