"""
Game Configuration Constants Module

This module defines the game constants and loads the dictionary of
potential goal words. The dictionary is a plain text file with one word
per line; blank lines are skipped and every word is lowercased.
"""

import os
from collections import Counter
from typing import Dict, Final, List, Optional

from .app_config import Config

GUESS_LIMIT: Final[int] = Config.GUESS_LIMIT
"""
Number of wrong guesses allowed per game unless the client asks otherwise.
"""

WORD_LENGTH: Final[int] = Config.DEFAULT_WORD_LENGTH
"""
Goal word length used when a new game does not specify one.
"""

DEFAULT_DICTIONARY_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt'
)


def load_dictionary(path: Optional[str] = None) -> List[str]:
    """
    Load a line-delimited word list.

    Args:
        path: Dictionary file, DICTIONARY_PATH or the bundled list when omitted

    Returns:
        List[str]: Lowercase words in file order

    Raises:
        FileNotFoundError: If the dictionary file does not exist
        ValueError: If the file contains no words
    """
    dictionary_path = path or Config.DICTIONARY_PATH or DEFAULT_DICTIONARY_PATH

    try:
        with open(dictionary_path, 'r', encoding='utf-8') as f:
            words = [line.strip().lower() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Dictionary file not found: {dictionary_path}")

    if not words:
        raise ValueError(f"Dictionary {dictionary_path} is empty")

    return words


# Dictionary loaded once at import time
DICTIONARY: Final[List[str]] = load_dictionary()


def validate_dictionary_integrity(words: Optional[List[str]] = None) -> bool:
    """
    Validates that the dictionary can host a default game.

    Checks:
    1. The dictionary is not empty
    2. Every entry is a non-empty lowercase string
    3. At least one word has the default word length

    Returns:
        bool: True if the dictionary passes all checks

    Raises:
        ValueError: If any check fails with a detailed error message
    """
    words = DICTIONARY if words is None else words

    if not words:
        raise ValueError("Dictionary cannot be empty")

    for index, word in enumerate(words):
        if not word:
            raise ValueError(f"Word at index {index} is empty")

        if word != word.lower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if not any(len(word) == WORD_LENGTH for word in words):
        raise ValueError(f"Dictionary has no {WORD_LENGTH}-letter words")

    return True


def get_dictionary_statistics(words: Optional[List[str]] = None) -> Dict:
    """
    Analyzes the dictionary and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of entries
            - unique_words: Number of distinct entries
            - words_by_length: Count of distinct words per length
            - most_common_letters: Five most frequent letters
    """
    words = DICTIONARY if words is None else words

    if not words:
        return {"error": "Dictionary is empty"}

    unique_words = set(words)
    by_length = Counter(len(word) for word in unique_words)
    letter_frequency = Counter(char for word in unique_words for char in word)

    return {
        "total_words": len(words),
        "unique_words": len(unique_words),
        "words_by_length": {str(length): count for length, count in sorted(by_length.items())},
        "most_common_letters": letter_frequency.most_common(5)
    }


if __name__ == "__main__":

    try:
        validate_dictionary_integrity()
        print(" Dictionary validation passed")

        stats = get_dictionary_statistics()
        print(f" Dictionary statistics: {stats}")
    except ValueError as config_error:
        print(f" Dictionary validation failed: {config_error}")
        exit(1)
