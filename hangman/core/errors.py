"""
Hangman Errors

Exception hierarchy raised by the game core. Every error derives from
HangmanError so callers can catch the whole family at once, and each branch
also derives from the matching builtin so plain ValueError/RuntimeError
handlers keep working.
"""


class HangmanError(Exception):
    """Base class for all game errors."""


class ConfigurationError(HangmanError, ValueError):
    """Bad constructor arguments. Fatal for the game being built."""


class InvalidConfigurationError(ConfigurationError):
    """Empty dictionary, non-positive length/limit or no word of the goal length."""


class StateError(HangmanError, RuntimeError):
    """The game is in a state that does not allow the requested operation."""


class GuessesExhaustedError(StateError):
    """A guess was attempted with zero guesses remaining."""


class NoCandidatesError(StateError):
    """A guess was attempted while the candidate set is empty."""


class NoGoalWordError(StateError):
    """A pattern was requested while there is no goal word to show."""


class ArgumentError(HangmanError, ValueError):
    """The caller passed an unacceptable guess."""


class DuplicateGuessError(ArgumentError):
    """The letter has already been guessed."""


class InvalidGuessError(ArgumentError):
    """The guess is not a single alphabetic character."""
