"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    READY = "Ready"
    PLAYING = "Playing"
    PAUSE = "Pause"
    END = "End"
    TIE = "Tie"


# Statuses after which no move is accepted anymore
TERMINAL_STATUSES: frozenset[GameStatus] = frozenset({GameStatus.END, GameStatus.TIE})


class PlayerSymbol(StrEnum):
    """Owner tokens. A piece on the board is encoded as the owner symbol followed by its type, e.g. 'BK'."""

    B = "B"
    W = "W"


# B always opens the game. In single player mode the computer plays W.
FIRST_PLAYER = PlayerSymbol.B
COMPUTER_PLAYER = PlayerSymbol.W
