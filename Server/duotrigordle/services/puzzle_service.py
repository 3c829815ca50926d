"""
Puzzle Service

Pure puzzle logic: which words a puzzle uses, how a guess is colored
against a target, and when every target has been found.
"""

from typing import Dict, List, Sequence
from ..config.game_settings import WORDS_TARGET, NUM_BOARDS, LEGACY_BOARDS, WORD_LENGTH
from ..models.game import LetterColor
from ..utils.mersenne_twister import MersenneTwister


def get_target_words(puzzle_id: int,
                     words: Sequence[str] = WORDS_TARGET,
                     num_boards: int = NUM_BOARDS) -> List[str]:
    """
    Returns the ordered target words for a puzzle.

    The first LEGACY_BOARDS words of the list are always used as-is. The
    rest are drawn with a MersenneTwister seeded by the puzzle id, skipping
    words already chosen, so the same id always gives the same boards.

    Args:
        puzzle_id: Puzzle identifier (day number)
        words: Master word list
        num_boards: Number of target words to produce

    Returns:
        List of num_boards unique words

    Raises:
        ValueError: If the word list cannot supply num_boards distinct words
    """
    if len(set(words)) < num_boards:
        raise ValueError(f"Word list has fewer than {num_boards} distinct words")

    target_words = list(words[:min(LEGACY_BOARDS, num_boards)])
    rng = MersenneTwister(int(puzzle_id))
    while len(target_words) < num_boards:
        word = words[rng.u32() % len(words)]
        if word not in target_words:
            target_words.append(word)
    return target_words


def get_guess_colors(guess: str, target: str) -> str:
    """
    Colors a guess against a single target.

    Greens are assigned first. Target letters left unmatched can then each
    credit one yellow, claimed left to right by the remaining guess letters.
    e.g. get_guess_colors("XYCEZ", "ABCDE") returns "BBGYB"

    Args:
        guess: 5-letter guess
        target: 5-letter target word

    Returns:
        String of "G", "Y" and "B", one per guess letter

    Raises:
        ValueError: If either word is not 5 letters long
    """
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise ValueError(f"Guess and target must both be {WORD_LENGTH} letters: {guess!r}, {target!r}")

    result = [LetterColor.BLACK] * WORD_LENGTH

    # Find green letters
    unmatched: Dict[str, int] = {}
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            result[i] = LetterColor.GREEN
        else:
            unmatched[target[i]] = unmatched.get(target[i], 0) + 1

    # Find yellow letters
    for i in range(WORD_LENGTH):
        if result[i] is LetterColor.GREEN:
            continue
        if unmatched.get(guess[i], 0) > 0:
            result[i] = LetterColor.YELLOW
            unmatched[guess[i]] -= 1

    return ''.join(color.value for color in result)


def all_words_guessed(guesses: Sequence[str], targets: Sequence[str]) -> bool:
    """Check if every target word appears verbatim among the guesses."""
    if len(guesses) < len(targets):
        return False
    guessed = set(guesses)
    return all(target in guessed for target in targets)
