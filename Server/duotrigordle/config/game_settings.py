"""
Game Configuration Constants Module

This module defines all game configuration constants for duotrigordle.
All game parameters are centralized here to enable easy modification

"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
NUM_BOARDS: Final[int] = 32
"""
Number of boards (target words) solved simultaneously.
"""

NUM_GUESSES: Final[int] = 37
"""
Maximum number of guesses shared by all boards.
"""

LEGACY_BOARDS: Final[int] = 16
"""
Leading entries of the word list used verbatim as the first boards of
every puzzle, kept so puzzles published before randomization stay valid.
"""

WORD_LENGTH: Final[int] = 5

# Storage keys for the persisted records
GAME_STORAGE_KEY: Final[str] = "duotrigordle-state"
SETTINGS_STORAGE_KEY: Final[str] = "duotrigordle-settings"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of uppercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    # Order matters: puzzles index into this list
    return [word.upper() for word in word_list]


# Master word list loaded from JSON file
WORDS_TARGET: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: List[str] = WORDS_TARGET) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting
    5. Size validation: Enough words to fill every board

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not words:
        raise ValueError("Word list cannot be empty")

    # Validate each word meets game requirements
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    # Validate uniqueness (no duplicates)
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    # Target selection never terminates without enough distinct words
    if len(words) < NUM_BOARDS:
        raise ValueError(f"Word list needs at least {NUM_BOARDS} words, found {len(words)}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters

    """
    if not WORDS_TARGET:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORDS_TARGET)

    # Calculate letter frequency distribution
    letter_frequency = {}
    for word in WORDS_TARGET:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORDS_TARGET),
        "avg_vowel_count": round(total_vowels / len(WORDS_TARGET), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Module initialization: Validate configuration on import
validate_word_list_integrity()
