"""
Custom exceptions shared by all layers.

Every exception derives from GameError, so the service layer (or a host) can catch a single type.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested operation."""


class IllegalMoveError(GameError):
    """The move cannot be made on the current board."""


class NoLegalMoveError(GameError):
    """A player was asked to move, but has no move available."""


class InvalidRequestError(GameError):
    """Request data coming from outside cannot be interpreted."""


class ConfigurationError(GameError):
    """Settings (environment variables) contain unusable values."""
