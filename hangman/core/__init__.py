"""
Game Core Package

Contains the hangman state machine, its goal strategies and errors.
"""

from .errors import (
    ArgumentError,
    ConfigurationError,
    DuplicateGuessError,
    GuessesExhaustedError,
    HangmanError,
    InvalidConfigurationError,
    InvalidGuessError,
    NoCandidatesError,
    NoGoalWordError,
    StateError,
)
from .game import HangmanGame
from .strategies import (
    PLACEHOLDER,
    AdversarialGoalStrategy,
    FixedGoalStrategy,
    GoalStrategy,
    build_pattern,
    get_strategy,
)

__all__ = [
    'HangmanGame',
    'GoalStrategy', 'FixedGoalStrategy', 'AdversarialGoalStrategy',
    'build_pattern', 'get_strategy', 'PLACEHOLDER',
    'HangmanError', 'ConfigurationError', 'InvalidConfigurationError',
    'StateError', 'GuessesExhaustedError', 'NoCandidatesError', 'NoGoalWordError',
    'ArgumentError', 'DuplicateGuessError', 'InvalidGuessError',
]
