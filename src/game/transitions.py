"""
Transitions of a game session.

Plain functions that receive the session (and the rules oracle) explicitly, so every scenario can be set up
and checked without a controller instance.
"""

import logging

from src.chess.moves import Move
from src.chess.rules import NO_WINNER, MoveResult, RulesOracle
from src.chess.square import BoardDelta
from src.core.shared_types import FIRST_PLAYER, TERMINAL_STATUSES, GameStatus
from src.game.session import GameSession, GameState, History

logger = logging.getLogger(__name__)


def new_session(rules: RulesOracle) -> GameSession:
    """Session before any game has started: empty board, waiting in READY."""
    return GameSession(
        state=GameState(board=rules.empty_board()), game_status=GameStatus.READY
    )


def start_game(
    session: GameSession,
    rules: RulesOracle,
    max_move: int,
    is_single_play: bool = False,
) -> None:
    """(Re)start the game from the initial position. Always succeeds."""
    session.game_status = GameStatus.PLAYING
    session.state = GameState(board=rules.initial_board())
    session.history = History()
    session.player_turn = FIRST_PLAYER
    session.is_single_play = is_single_play
    session.max_move = max_move
    session.move_count = 0
    logger.info(
        "Game started: max_move=%d, single_play=%s", max_move, is_single_play
    )


def unrotate_move(from_cell: BoardDelta, to_cell: BoardDelta) -> Move:
    """Coordinates picked on the rotated view, translated back into the canonical orientation."""
    return Move(from_cell.rotated(), to_cell.rotated())


def apply_move(
    session: GameSession,
    rules: RulesOracle,
    from_cell: BoardDelta,
    to_cell: BoardDelta,
    should_rotate_board: bool = False,
) -> bool:
    """
    Attempt a move on behalf of the player
    -----

    1. Reject if there is no board, or the game can no longer progress (ended, tied, paused)
    2. Translate the coordinates if they were given for the rotated view
    3. Reject if there is no piece on the starting cell
    4. Let the rules execute the move and commit the new board
    5. Update the game status (win / tie by move budget)

    Returns False for a rejected move, in which case nothing in the session has changed.
    NOTE: the turn player is not advanced and the history is not extended here.
    """
    board = session.state.board
    if board is None:
        logger.debug("Move rejected: no board")
        return False

    if (
        session.game_status in TERMINAL_STATUSES
        or session.game_status == GameStatus.PAUSE
    ):
        logger.debug("Move rejected: game status is %s", session.game_status)
        return False

    if should_rotate_board:
        from_cell, to_cell = unrotate_move(from_cell, to_cell)

    if rules.has_no_piece(board, from_cell):
        logger.debug("Move rejected: no piece on %s", from_cell)
        return False

    result = rules.make_move(board, from_cell, to_cell)
    session.state = GameState(board=result.next_board)
    session.move_count += 1
    logger.debug("Move %d: %s -> %s", session.move_count, from_cell, to_cell)

    if result.winner != NO_WINNER:
        if _is_known_player(session, rules, result.winner):
            _change_status(session, GameStatus.END)
    elif session.move_count == session.max_move:
        _change_status(session, GameStatus.TIE)

    return True


def can_apply_computer_move(session: GameSession) -> bool:
    """The computer only moves in a game that is still being played."""
    return (
        session.state.board is not None
        and session.game_status == GameStatus.PLAYING
    )


def apply_computer_move(
    session: GameSession, rules: RulesOracle, result: MoveResult
) -> None:
    """
    Commit the outcome of a computer move.

    The board before the move is stored in the history. A winner ends the game (or ties it, if the rules
    report a symbol that belongs to neither player). The move counter is left alone.
    """
    session.history.moves.append(result.previous_board)
    session.state = GameState(board=result.next_board)

    if result.winner != NO_WINNER:
        if _is_known_player(session, rules, result.winner):
            _change_status(session, GameStatus.END)
        else:
            _change_status(session, GameStatus.TIE)


def pause(session: GameSession) -> bool:
    if session.game_status != GameStatus.PLAYING:
        return False
    _change_status(session, GameStatus.PAUSE)
    return True


def resume(session: GameSession) -> bool:
    if session.game_status != GameStatus.PAUSE:
        return False
    _change_status(session, GameStatus.PLAYING)
    return True


# -- PRIVATE HELPERS ---
def _is_known_player(session: GameSession, rules: RulesOracle, winner: str) -> bool:
    return winner in (session.player_turn, rules.opponent_of(session.player_turn))


def _change_status(session: GameSession, new_status: GameStatus) -> None:
    logger.info(
        "Game status: %s -> %s (after %d moves)",
        session.game_status,
        new_status,
        session.move_count,
    )
    session.game_status = new_status
