"""
joindots.game - Core game mechanics for Join Dots

This package contains the board, the rule engine and the game session
state machine.
"""

from joindots.game.board import Board
from joindots.game.rules import WinResult, check_win, check_draw
from joindots.game.session import (GameSession, GameState, MoveResult, Placement,
                                   new_session, apply_move, preview_landing, reset,
                                   get_cell, get_current_player, get_state, get_last_move)

__all__ = [
    'Board', 'WinResult', 'check_win', 'check_draw',
    'GameSession', 'GameState', 'MoveResult', 'Placement',
    'new_session', 'apply_move', 'preview_landing', 'reset',
    'get_cell', 'get_current_player', 'get_state', 'get_last_move',
]
