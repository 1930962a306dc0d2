"""Tests for the goal strategies, mostly the devious rules."""

import random

import pytest

from hangman.core import (
    AdversarialGoalStrategy,
    FixedGoalStrategy,
    HangmanGame,
    build_pattern,
    get_strategy,
)
from hangman.models import GameMode

from conftest import GOAL_LENGTH

FAMILY_WORDS = ["ally", "beta", "cool", "deal", "else", "flew", "good", "hope", "ibex"]


def devious_game(dictionary, length, limit=26):
    return HangmanGame(dictionary, length, limit, AdversarialGoalStrategy())


def test_build_pattern():
    assert build_pattern("hello", set()) == "- - - - -"
    assert build_pattern("hello", {"l", "z"}) == "- - l l -"
    assert build_pattern("hello", {"h"}, placeholder="_") == "h _ _ _ _"


def test_devious_keeps_every_word_of_goal_length(short_dictionary):
    game = devious_game(short_dictionary, GOAL_LENGTH)
    expected = {word for word in short_dictionary if len(word) == GOAL_LENGTH}
    assert game.words() == frozenset(expected)
    assert all(len(word) == GOAL_LENGTH for word in game.words())


def test_devious_deduplicates_candidates(short_dictionary):
    game = devious_game(short_dictionary, GOAL_LENGTH)
    five_letter = [word for word in short_dictionary if len(word) == GOAL_LENGTH]
    assert len(five_letter) > len(game.words())


def test_devious_keeps_largest_family():
    game = devious_game(FAMILY_WORDS, 4)

    assert game.record("e") == 0
    assert game.words() == frozenset({"ally", "cool", "good"})
    assert game.pattern() == "- - - -"
    assert game.guesses_left() == 25

    assert game.record("o") == 2
    assert game.words() == frozenset({"cool", "good"})
    assert game.pattern() == "- o o -"
    assert game.guesses_left() == 25


def test_devious_breaks_ties_by_smallest_pattern():
    game = devious_game(FAMILY_WORDS, 4)
    game.record("e")
    game.record("o")

    # "- o o -" (cool) and "- o o d" (good) are both single-word families
    assert game.record("d") == 0
    assert game.words() == frozenset({"cool"})
    assert game.pattern() == "- o o -"


def test_devious_same_guesses_same_outcome(short_dictionary):
    first = devious_game(short_dictionary, GOAL_LENGTH)
    second = devious_game(list(reversed(short_dictionary)), GOAL_LENGTH)
    for letter in "eartcl":
        assert first.record(letter) == second.record(letter)
        assert first.words() == second.words()


def test_devious_candidates_match_pattern_and_never_grow(short_dictionary):
    game = devious_game(short_dictionary, GOAL_LENGTH)
    size = len(game.words())

    for letter in "eaiorstlnhp":
        game.record(letter)
        pattern = game.pattern()
        guessed = set(game.guesses())

        assert game.words()
        assert all(build_pattern(word, guessed) == pattern for word in game.words())
        assert len(game.words()) <= size
        size = len(game.words())


def test_devious_counts_against_representative_word():
    game = devious_game(["abc", "abd"], 3)
    assert game.record("a") == 1
    assert game.record("c") == 0
    assert game.words() == frozenset({"abd"})
    assert game.pattern() == "a - -"


def test_word_families_groups_by_pattern():
    families = AdversarialGoalStrategy.word_families(frozenset(FAMILY_WORDS), {"e"})
    assert families["- - - -"] == ["ally", "cool", "good"]
    assert families["- e - -"] == ["beta", "deal"]
    assert families["e - - e"] == ["else"]
    assert sum(len(words) for words in families.values()) == len(FAMILY_WORDS)


def test_seeded_fixed_strategy_is_reproducible(short_dictionary):
    picks = set()
    for _ in range(3):
        strategy = FixedGoalStrategy(random.Random(42))
        picks.add(strategy.initial_candidates(short_dictionary, GOAL_LENGTH))
    assert len(picks) == 1


def test_fixed_strategy_picks_word_of_goal_length(short_dictionary):
    for seed in range(20):
        words = FixedGoalStrategy(random.Random(seed)).initial_candidates(short_dictionary, GOAL_LENGTH)
        assert len(words) == 1
        assert len(next(iter(words))) == GOAL_LENGTH


def test_fixed_strategy_without_match_is_empty():
    assert FixedGoalStrategy().initial_candidates(["cat"], 5) == frozenset()


@pytest.mark.parametrize("mode, strategy_class", [
    ("normal", FixedGoalStrategy),
    ("devious", AdversarialGoalStrategy),
    (GameMode.DEVIOUS, AdversarialGoalStrategy),
])
def test_get_strategy(mode, strategy_class):
    strategy = get_strategy(mode)
    assert isinstance(strategy, strategy_class)
    assert strategy.mode is GameMode(mode)


def test_get_strategy_rejects_unknown_mode():
    with pytest.raises(ValueError):
        get_strategy("evil")
