"""Tests for the hangman state machine under the normal rules."""

import pytest

from hangman.config import DICTIONARY
from hangman.core import (
    ArgumentError,
    DuplicateGuessError,
    FixedGoalStrategy,
    GoalStrategy,
    GuessesExhaustedError,
    HangmanGame,
    InvalidConfigurationError,
    InvalidGuessError,
    NoCandidatesError,
    NoGoalWordError,
    StateError,
)

from conftest import GOAL_LENGTH, GUESS_LIMIT


def single_word_game(word, guess_limit=GUESS_LIMIT):
    return HangmanGame([word], len(word), guess_limit)


def play(goal_word, guesses, expected_patterns, expected_counts):
    """Guess each letter in turn, checking pattern and count after every guess."""
    game = single_word_game(goal_word)

    for letter, pattern, count in zip(guesses, expected_patterns, expected_counts):
        assert game.record(letter) == count
        assert game.pattern() == pattern

    wrong = sum(1 for count in expected_counts if count == 0)
    assert game.guesses_left() == GUESS_LIMIT - wrong
    assert all(letter in game.guesses() for letter in guesses)
    return game


@pytest.mark.parametrize("dictionary, length, limit", [
    ([], 1, 1),
    (["hello"], 0, 1),
    (["hello"], 1, 0),
    (["hello"], 5, -1),
    (["hello"], 4, 7),
])
def test_constructor_rejects_invalid_configuration(dictionary, length, limit):
    with pytest.raises(InvalidConfigurationError):
        HangmanGame(dictionary, length, limit)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError, match="Dictionary must not be empty"):
        HangmanGame([], 5, 7)


def test_guesses_left_starts_at_limit(short_dictionary):
    game = HangmanGame(short_dictionary, GOAL_LENGTH, GUESS_LIMIT)
    assert game.guesses_left() == game.wrong_guess_limit() == GUESS_LIMIT
    assert game.guesses() == ()


def test_word_list_contains_words_of_correct_size(short_dictionary):
    game = HangmanGame(short_dictionary, GOAL_LENGTH, GUESS_LIMIT)
    assert len(game.words()) == 1
    assert all(len(word) == GOAL_LENGTH for word in game.words())


def test_no_letters_guessed_pattern_is_dashes(short_dictionary):
    game = HangmanGame(short_dictionary, GOAL_LENGTH, GUESS_LIMIT)
    assert game.pattern() == "- - - - -"

    game = HangmanGame(DICTIONARY, 3, GUESS_LIMIT)
    assert game.pattern() == "- - -"


def test_single_word_dictionary_returns_goal_word():
    game = single_word_game("hello")
    assert game.words() == frozenset({"hello"})


def test_hello_successive_correct_guesses():
    play(
        "hello",
        ["h", "e", "l", "o"],
        ["h - - - -", "h e - - -", "h e l l -", "h e l l o"],
        [1, 1, 2, 1],
    )


def test_hello_mix_of_correct_and_incorrect_guesses():
    game = play(
        "hello",
        ["r", "s", "t", "l", "n", "e"],
        ["- - - - -", "- - - - -", "- - - - -", "- - l l -", "- - l l -", "- e l l -"],
        [0, 0, 0, 2, 0, 1],
    )
    assert game.guesses_left() == GUESS_LIMIT - 4


def test_guessing_when_no_guesses_remain_raises():
    game = single_word_game("hello", guess_limit=1)
    game.record("a")
    assert game.guesses_left() == 0
    assert game.is_lost()

    with pytest.raises(GuessesExhaustedError):
        game.record("b")


def test_exhausted_error_is_a_state_error():
    game = single_word_game("hello", guess_limit=1)
    game.record("z")
    with pytest.raises(StateError):
        game.record("h")
    with pytest.raises(RuntimeError):
        game.record("h")


def test_guessing_the_same_letter_twice_raises():
    game = single_word_game("hello")
    game.record("a")

    with pytest.raises(DuplicateGuessError, match="The letter a has already been guessed"):
        game.record("a")


def test_duplicate_of_correct_guess_is_an_argument_error():
    game = single_word_game("hello")
    game.record("l")
    with pytest.raises(ArgumentError):
        game.record("l")
    assert game.guesses_left() == GUESS_LIMIT


def test_guesses_are_sorted_and_unique():
    game = single_word_game("hello")
    for letter in ["o", "z", "h", "b", "e"]:
        game.record(letter)
    assert game.guesses() == ("b", "e", "h", "o", "z")


def test_upper_case_guess_is_lowered():
    game = single_word_game("hello")
    assert game.record("H") == 1
    assert game.guesses() == ("h",)
    with pytest.raises(DuplicateGuessError):
        game.record("h")


@pytest.mark.parametrize("guess", ["", "ab", "1", " ", None])
def test_guess_must_be_a_single_letter(guess):
    game = single_word_game("hello")
    with pytest.raises(InvalidGuessError):
        game.record(guess)
    assert game.guesses() == ()
    assert game.guesses_left() == GUESS_LIMIT


def test_wrong_guess_decrements_by_exactly_one():
    game = single_word_game("hello")
    for expected_left, letter in zip(range(GUESS_LIMIT - 1, 0, -1), "abcdfg"):
        game.record(letter)
        assert game.guesses_left() == expected_left


def test_solved_once_every_letter_revealed():
    game = single_word_game("hello")
    for letter in "helo":
        assert not game.is_solved()
        game.record(letter)
    assert game.is_solved()
    assert not game.is_lost()


def test_dictionary_is_copied_on_construction():
    words = ["hello"]
    game = HangmanGame(words, 5, GUESS_LIMIT)
    words[0] = "world"
    assert game.words() == frozenset({"hello"})


def test_fixed_strategy_never_changes_goal(short_dictionary):
    game = HangmanGame(short_dictionary, GOAL_LENGTH, 26)
    goal = game.words()
    for letter in "eatrnlo":
        game.record(letter)
        assert game.words() == goal


class EmptyStrategy(GoalStrategy):
    """Strategy that produces no candidates at all."""

    def initial_candidates(self, dictionary, length):
        return frozenset()


def test_pattern_with_empty_candidate_set_raises():
    game = HangmanGame(["hello"], 5, GUESS_LIMIT, EmptyStrategy())
    with pytest.raises(NoGoalWordError):
        game.pattern()


def test_record_with_empty_candidate_set_raises():
    game = HangmanGame(["hello"], 5, GUESS_LIMIT, EmptyStrategy())
    with pytest.raises(NoCandidatesError):
        game.record("h")
    assert game.guesses() == ()
    assert not game.is_solved()


def test_default_strategy_is_fixed():
    game = single_word_game("hello")
    assert isinstance(game.strategy, FixedGoalStrategy)
