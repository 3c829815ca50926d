import pytest

from duotrigordle.config.game_settings import WORDS_TARGET, NUM_BOARDS, LEGACY_BOARDS
from duotrigordle.services.puzzle_service import get_target_words, get_guess_colors, all_words_guessed


def test_word_list_is_large_enough():
    assert len(set(WORDS_TARGET)) >= NUM_BOARDS


@pytest.mark.parametrize('puzzle_id', [0, 1, 2, 100, 365, 1000, 2 ** 31])
def test_targets_shape(puzzle_id):
    targets = get_target_words(puzzle_id)
    assert len(targets) == NUM_BOARDS
    assert len(set(targets)) == NUM_BOARDS
    assert targets[:LEGACY_BOARDS] == WORDS_TARGET[:LEGACY_BOARDS]
    assert all(word in WORDS_TARGET for word in targets)


def test_targets_deterministic():
    assert get_target_words(42) == get_target_words(42)


def test_targets_vary_by_day():
    assert get_target_words(10)[LEGACY_BOARDS:] != get_target_words(11)[LEGACY_BOARDS:]


def test_small_word_list():
    words = [f"W{chr(65 + i // 26)}{chr(65 + i % 26)}XX" for i in range(40)]
    targets = get_target_words(7, words)
    assert len(targets) == NUM_BOARDS
    assert len(set(targets)) == NUM_BOARDS
    assert targets[:LEGACY_BOARDS] == words[:LEGACY_BOARDS]


def test_undersized_word_list_raises():
    words = WORDS_TARGET[:NUM_BOARDS - 1]
    with pytest.raises(ValueError):
        get_target_words(1, words)


def test_guess_colors_documented_example():
    assert get_guess_colors("XYCEZ", "ABCDE") == "BBGYB"


@pytest.mark.parametrize('word', ['ABBEY', 'SPEED', 'CRANE'])
def test_guess_colors_exact_match(word):
    assert get_guess_colors(word, word) == "GGGGG"


def test_guess_colors_no_overlap():
    assert get_guess_colors("XXXXX", "ABCDE") == "BBBBB"


def test_guess_colors_duplicate_letters():
    # ERASE has two unmatched Es, so both Es in SPEED are yellow
    assert get_guess_colors("SPEED", "ERASE") == "YBYYB"
    # Only one O left unmatched after the green O
    assert get_guess_colors("HONOR", "HUMOR") == "GBBGG"
    # Only the first E claims the single E in PAUSE
    assert get_guess_colors("LEPER", "PAUSE") == "BYYBB"
    # The green E uses up the only E
    assert get_guess_colors("EERIE", "PAUSE") == "BBBBG"


def test_guess_colors_rejects_bad_length():
    with pytest.raises(ValueError):
        get_guess_colors("ABCD", "ABCDE")
    with pytest.raises(ValueError):
        get_guess_colors("ABCDE", "ABCDEF")


def test_all_words_guessed():
    targets = ["APPLE", "BERRY"]
    assert not all_words_guessed([], targets)
    assert not all_words_guessed(["APPLE"], targets)
    assert not all_words_guessed(["APPLE", "CRANE", "MANGO"], targets)
    assert all_words_guessed(["BERRY", "APPLE"], targets)
    assert all_words_guessed(["CRANE", "APPLE", "BERRY"], targets)


def test_all_words_guessed_is_case_sensitive():
    assert not all_words_guessed(["apple", "berry"], ["APPLE", "BERRY"])


def test_legacy_boards_are_fixed():
    assert WORDS_TARGET[:LEGACY_BOARDS] == [
        "VIOLA", "RHINO", "WIDER", "SWORN", "ELBOW", "KIOSK", "NAVAL", "DAILY",
        "CRATE", "LINER", "PUTTY", "TAUNT", "WHIRL", "SWUNG", "AMUSE", "VAGUE",
    ]


def test_published_puzzle_targets_unchanged():
    # Puzzle 1000 as first published; any change here changes every puzzle
    assert get_target_words(1000)[LEGACY_BOARDS:] == [
        "ASSAY", "MIRTH", "GROUP", "STRAP", "URINE", "GUPPY", "SPOOK", "BOOST",
        "MOVIE", "JUMPY", "LABEL", "SCION", "DRAWN", "PLAIN", "PYGMY", "TIPSY",
    ]
