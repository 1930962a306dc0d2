"""
Goal Strategies

Resolution strategies decide which dictionary words are still possible goal
words. Both plug into HangmanGame through the same interface:

- FixedGoalStrategy ("normal"): commits to one random word up front.
- AdversarialGoalStrategy ("devious"): never commits. After every guess it
  splits the candidates into pattern families and keeps the biggest one.
"""

import random
from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from ..models.game import GameMode

PLACEHOLDER = "-"


def build_pattern(word: str, guessed: Set[str], placeholder: str = PLACEHOLDER) -> str:
    """
    Creates a hangman style pattern for a word.

    Each character is shown if it has been guessed, otherwise replaced by the
    placeholder. Positions are separated by single spaces.

    Args:
        word: The word to generate the pattern for
        guessed: Letters guessed so far
        placeholder: Character shown for unguessed letters

    Returns:
        str: Pattern such as "h e - - -"
    """
    return " ".join(char if char in guessed else placeholder for char in word)


def words_of_length(dictionary: Sequence[str], length: int) -> List[str]:
    """Returns the dictionary entries of exactly the given length, in order."""
    return [word for word in dictionary if len(word) == length]


class GoalStrategy(ABC):
    """Interface shared by the normal and devious rules."""

    mode: GameMode

    @abstractmethod
    def initial_candidates(self, dictionary: Sequence[str], length: int) -> FrozenSet[str]:
        """Builds the candidate set the first time the game asks for it."""
        ...

    def narrow(self, candidates: FrozenSet[str], guessed: Set[str]) -> FrozenSet[str]:
        """
        Returns the candidate set that survives the latest guess.

        Called after the new letter has been added to ``guessed``. The
        default keeps the candidates untouched.
        """
        return candidates


class FixedGoalStrategy(GoalStrategy):
    """
    Normal rules: pick one goal word uniformly at random and keep it.

    Args:
        rng: Random source used for the pick. Pass a seeded random.Random
            for reproducible games.
    """

    mode = GameMode.NORMAL

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def initial_candidates(self, dictionary: Sequence[str], length: int) -> FrozenSet[str]:
        matching = words_of_length(dictionary, length)
        if not matching:
            return frozenset()
        return frozenset([self.rng.choice(matching)])


class AdversarialGoalStrategy(GoalStrategy):
    """
    Devious rules: keep every word of the right length and, after each guess,
    keep only the largest pattern family.

    Families of equal size are ordered by their pattern string and the
    smallest one wins, so the same guesses always produce the same game.
    """

    mode = GameMode.DEVIOUS

    def initial_candidates(self, dictionary: Sequence[str], length: int) -> FrozenSet[str]:
        return frozenset(words_of_length(dictionary, length))

    def narrow(self, candidates: FrozenSet[str], guessed: Set[str]) -> FrozenSet[str]:
        families = self.word_families(candidates, guessed)
        if not families:
            return frozenset()

        # Biggest family first, then smallest pattern for ties
        pattern = min(families, key=lambda key: (-len(families[key]), key))
        return frozenset(families[pattern])

    @staticmethod
    def word_families(candidates: FrozenSet[str], guessed: Set[str]) -> Dict[str, List[str]]:
        """
        Groups candidate words by the pattern they show for the guessed letters.

        Returns:
            Dict mapping pattern string to the sorted words sharing it
        """
        families: Dict[str, List[str]] = {}
        for word in sorted(candidates):
            families.setdefault(build_pattern(word, guessed), []).append(word)
        return families


def get_strategy(game_mode, rng: Optional[random.Random] = None) -> GoalStrategy:
    """
    Returns a fresh strategy for the given game mode.

    Args:
        game_mode: GameMode or its string value ("normal" or "devious")
        rng: Optional random source for the normal rules

    Raises:
        ValueError: If the game mode is unknown
    """
    mode = GameMode(game_mode)
    if mode is GameMode.DEVIOUS:
        return AdversarialGoalStrategy()
    return FixedGoalStrategy(rng)
