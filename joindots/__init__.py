"""
joindots - Rules engine for the Join Dots connection game

This package provides the board representation, the rule engine (win and
draw detection) and the game session state machine for a two-player
Connect-Four style game, plus a small terminal front end for playing it.
"""

# Version number
__version__ = '0.1.0'
