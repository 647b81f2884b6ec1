"""
All mutable data of a single game session, bundled in one object.

The controller owns one GameSession; the transition functions in transitions.py receive it explicitly.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.chess.board import Board
from src.core.shared_types import FIRST_PLAYER, GameStatus, PlayerSymbol


@dataclass
class GameState:
    """Replaced wholesale after every move: the board is never edited in place."""

    board: Optional[Board]


@dataclass
class History:
    """Boards as they were right before each computer move (append-only)."""

    moves: list[Board] = field(default_factory=list)


@dataclass
class GameSession:
    state: GameState
    player_turn: PlayerSymbol = FIRST_PLAYER
    move_count: int = 0
    max_move: int = 0
    game_status: GameStatus = GameStatus.READY
    is_single_play: bool = False
    history: History = field(default_factory=History)
