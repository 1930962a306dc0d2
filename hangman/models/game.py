"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class GameMode(Enum):
    """Rule variants a game can be played under."""
    NORMAL = "normal"
    DEVIOUS = "devious"


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    game_mode: str
    word_length: int
    pattern: str
    guesses: List[str]
    guesses_left: int
    wrong_guess_limit: int
    game_over: bool
    won: bool
    answer: Optional[str] = None  # Only included when game is over
    last_guess: Optional[str] = None
    last_count: Optional[int] = None
