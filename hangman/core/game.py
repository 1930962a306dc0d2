"""
Hangman Game Core

HangmanGame keeps track of the state of a single game of hangman: the
dictionary, the goal length, the guess budget, the letters guessed so far and
the set of words that may still be the goal. The record method updates state
with a new guess; the remaining methods are read accessors.

Which words remain possible is decided by a GoalStrategy, so the same state
machine runs both the normal and the devious rules.
"""

from typing import FrozenSet, Optional, Sequence, Set, Tuple

from .errors import (
    DuplicateGuessError,
    GuessesExhaustedError,
    InvalidConfigurationError,
    InvalidGuessError,
    NoCandidatesError,
    NoGoalWordError,
)
from .strategies import FixedGoalStrategy, GoalStrategy, build_pattern


class HangmanGame:
    """
    State of one hangman game.

    Args:
        dictionary: Potential goal words
        length: Length of the goal word
        wrong_guess_limit: Number of wrong guesses that results in a loss
        strategy: Resolution rules, FixedGoalStrategy when omitted

    Raises:
        InvalidConfigurationError: If the dictionary is empty, length or
            wrong_guess_limit is less than 1, or no word has the given length
    """

    def __init__(self,
                 dictionary: Sequence[str],
                 length: int,
                 wrong_guess_limit: int,
                 strategy: Optional[GoalStrategy] = None):
        if not dictionary:
            raise InvalidConfigurationError("Dictionary must not be empty")

        if length < 1:
            raise InvalidConfigurationError("Word length must be greater than zero")

        if wrong_guess_limit < 1:
            raise InvalidConfigurationError("Wrong guess limit must be greater than or equal to one")

        if not any(len(word) == length for word in dictionary):
            raise InvalidConfigurationError(f"No word in the dictionary has length {length}")

        self._dictionary: Tuple[str, ...] = tuple(dictionary)
        self._length = length
        self._guess_limit = wrong_guess_limit
        self._guesses_left = wrong_guess_limit
        self._guessed: Set[str] = set()
        self._candidates: Optional[FrozenSet[str]] = None
        self.strategy = strategy or FixedGoalStrategy()

    @property
    def length(self) -> int:
        return self._length

    def words(self) -> FrozenSet[str]:
        """
        Access the set of candidate words.

        If it holds a single word, that word is the goal. The set is built by
        the strategy on the first call and cached afterwards.
        """
        if self._candidates is None:
            self._candidates = self.strategy.initial_candidates(self._dictionary, self._length)
        return self._candidates

    def wrong_guess_limit(self) -> int:
        """Number of wrong guesses that results in a player loss."""
        return self._guess_limit

    def guesses_left(self) -> int:
        """Number of wrong guesses still allowed before the player loses."""
        return self._guesses_left

    def guesses(self) -> Tuple[str, ...]:
        """Letters guessed so far, sorted."""
        return tuple(sorted(self._guessed))

    def pattern(self) -> str:
        """
        Returns the hangman-style display pattern of letters and dashes.

        Raises:
            NoGoalWordError: If the candidate set is empty
        """
        goal_word = self.representative_word()
        if goal_word is None:
            raise NoGoalWordError("The candidate set is empty")
        return build_pattern(goal_word, self._guessed)

    def record(self, guess: str) -> int:
        """
        Records a new letter guess and updates state.

        Args:
            guess: A single letter; upper-case input is lowered

        Returns:
            int: Number of occurrences of the letter in the goal word

        Raises:
            InvalidGuessError: If the guess is not a single letter
            GuessesExhaustedError: If no guesses are left
            NoCandidatesError: If the candidate set is empty
            DuplicateGuessError: If the letter has already been guessed
        """
        if not isinstance(guess, str) or len(guess) != 1 or not guess.isalpha():
            raise InvalidGuessError(f"Guess must be a single letter, got {guess!r}")
        letter = guess.lower()

        if self._guesses_left <= 0:
            raise GuessesExhaustedError("There are zero guesses remaining")

        if not self.words():
            raise NoCandidatesError("The candidate set is empty")

        if letter in self._guessed:
            raise DuplicateGuessError(f"The letter {letter} has already been guessed")

        self._guessed.add(letter)
        self._candidates = self.strategy.narrow(self.words(), self._guessed)

        goal_word = self.representative_word() or ""
        count = goal_word.count(letter)
        if count == 0:
            self._guesses_left -= 1

        return count

    def representative_word(self) -> Optional[str]:
        """Smallest word of the candidate set, or None when it is empty."""
        candidates = self.words()
        return min(candidates) if candidates else None

    def is_solved(self) -> bool:
        """True once every letter of the goal word has been revealed."""
        goal_word = self.representative_word()
        return goal_word is not None and all(char in self._guessed for char in goal_word)

    def is_lost(self) -> bool:
        return self._guesses_left <= 0 and not self.is_solved()
