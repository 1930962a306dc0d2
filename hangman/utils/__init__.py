"""
Utilities Package

Contains the shared game logger and request helpers.
"""

from .game_logger import GameLogger, game_logger
from .helpers import as_payload, optional_int, parse_new_game_options

__all__ = ['GameLogger', 'game_logger', 'as_payload', 'optional_int', 'parse_new_game_options']
