"""
Game Service

Game-state transitions for duotrigordle and the service that applies them
to each player's daily and practice games.

The transition functions never mutate the state they are given; they
return a new GameState.
"""

import random
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple
from ..config.game_settings import WORDS_TARGET, NUM_GUESSES, WORD_LENGTH
from ..models.game import GameState
from ..utils.helpers import now_ms, get_todays_id, format_time_elapsed
from ..utils.game_logger import game_logger
from .puzzle_service import get_target_words, get_guess_colors, all_words_guessed

VALID_WORDS = frozenset(WORDS_TARGET)

# Practice ids are drawn from this range so they rarely collide with a daily id
PRACTICE_ID_RANGE = (100000, 2 ** 31 - 1)
MAX_PRACTICE_GAMES = 10000


def start_game(puzzle_id: int, practice: bool = False, now: Optional[int] = None) -> GameState:
    """
    Creates a fresh game for a puzzle id.

    Args:
        puzzle_id: Puzzle identifier; targets are derived from it
        practice: Whether this is an unsaved practice game
        now: Start timestamp in epoch milliseconds (defaults to current time)
    """
    return GameState(
        id=puzzle_id,
        targets=get_target_words(puzzle_id),
        guesses=[],
        practice=practice,
        start_time=now_ms() if now is None else now,
        end_time=0
    )


def is_valid_guess(state: GameState, guess: Any) -> Tuple[bool, str]:
    """
    Validates a guess for a game.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if state.game_over:
        return False, "Game is already over"

    if not guess or not isinstance(guess, str):
        return False, "Guess must be a valid string"

    normalized_guess = guess.strip().upper()

    if len(normalized_guess) != WORD_LENGTH:
        return False, f"Guess must be exactly {WORD_LENGTH} letters"

    if not normalized_guess.isalpha():
        return False, "Guess must contain only letters"

    if normalized_guess not in VALID_WORDS:
        return False, "Word not in word list"

    return True, ""


def make_guess(state: GameState, guess: str, now: Optional[int] = None) -> Optional[GameState]:
    """
    Applies a guess to a game.

    Args:
        state: Current game state
        guess: The 5-letter word guess
        now: Timestamp recorded as end_time if this guess ends the game

    Returns:
        Updated GameState or None if the guess is invalid
    """
    is_valid, _ = is_valid_guess(state, guess)
    if not is_valid:
        return None

    guesses = state.guesses + [guess.strip().upper()]
    game_over = len(guesses) >= NUM_GUESSES or all_words_guessed(guesses, state.targets)
    end_time = state.end_time
    if game_over:
        end_time = now_ms() if now is None else now

    return replace(state, guesses=guesses, input="", game_over=game_over, end_time=end_time)


def get_board_results(state: GameState) -> List[Dict[str, Any]]:
    """
    Per-board feedback for a game.

    Each board lists the colors of every guess up to and including the one
    that solved it. A board's target is only revealed once it is solved or
    the game is over.
    """
    boards = []
    for index, target in enumerate(state.targets):
        colors = []
        solved = False
        for guess in state.guesses:
            colors.append(get_guess_colors(guess, target))
            if guess == target:
                solved = True
                break
        boards.append({
            'board': index,
            'solved': solved,
            'colors': colors,
            'target': target if solved or state.game_over else None
        })
    return boards


def game_to_dict(state: GameState) -> Dict[str, Any]:
    """Client view of a game, without unsolved targets."""
    boards = get_board_results(state)
    elapsed = (state.end_time if state.game_over else now_ms()) - state.start_time
    return {
        'id': state.id,
        'practice': state.practice,
        'guesses': list(state.guesses),
        'game_over': state.game_over,
        'won': all_words_guessed(state.guesses, state.targets),
        'guesses_remaining': NUM_GUESSES - len(state.guesses),
        'boards_solved': sum(1 for board in boards if board['solved']),
        'boards': boards,
        'start_time': state.start_time,
        'end_time': state.end_time,
        'time_elapsed': format_time_elapsed(elapsed)
    }


class GameService:
    """
    Applies game transitions to each player's games.

    Daily games live in the storage service, keyed by player id, and are
    reloaded from it on every request. Practice games are kept in memory only,
    up to max_practice_games of them; the least recently played is dropped first.

    Every load-modify-save runs under one lock, so concurrent requests in this
    process cannot lose a guess. Separate server processes sharing a MongoDB
    store are not serialized against each other.
    """

    def __init__(self, max_practice_games: int = MAX_PRACTICE_GAMES):
        self.practice_games: Dict[str, GameState] = {}
        self.max_practice_games = max_practice_games
        self._lock = threading.RLock()

    def _storage(self):
        from .storage_service import get_storage_service

        storage_service = get_storage_service()
        if storage_service is None:
            raise RuntimeError("Storage service unavailable")
        return storage_service

    def _remember_practice_game(self, player_id: str, state: GameState) -> None:
        # Re-insert so dict order tracks recency
        self.practice_games.pop(player_id, None)
        self.practice_games[player_id] = state
        while len(self.practice_games) > self.max_practice_games:
            del self.practice_games[next(iter(self.practice_games))]

    def new_game(self, player_id: str, practice: bool = False) -> GameState:
        """
        Starts a game for a player.

        A daily game replaces the player's stored record for today; a
        practice game uses a random puzzle id.
        """
        with self._lock:
            if practice:
                state = start_game(random.randint(*PRACTICE_ID_RANGE), practice=True)
                self._remember_practice_game(player_id, state)
                game_logger.log_game_event(state.id, 'practice_started', player_id)
                return state

            state = start_game(get_todays_id())
            self._storage().save_game(player_id, state)
            game_logger.log_game_event(state.id, 'daily_started', player_id)
            return state

    def get_game(self, player_id: str, practice: bool = False) -> Optional[GameState]:
        """
        Returns a player's current game.

        The daily game is always available: an invalid or stale stored
        record is replaced by a fresh game for today.
        """
        with self._lock:
            if practice:
                return self.practice_games.get(player_id)
            return self._storage().load_game(player_id, get_todays_id())

    def make_guess(self, player_id: str, guess: str, practice: bool = False) -> Tuple[Optional[GameState], str]:
        """
        Validates and applies a guess to a player's game.

        Returns:
            Tuple of (updated state or None, error_message)
        """
        with self._lock:
            state = self.get_game(player_id, practice)
            if state is None:
                return None, "Game not found"

            is_valid, error = is_valid_guess(state, guess)
            if not is_valid:
                return None, error

            state = make_guess(state, guess)
            if practice:
                self._remember_practice_game(player_id, state)
            else:
                self._storage().save_game(player_id, state)

        if state.game_over:
            event = 'game_won' if all_words_guessed(state.guesses, state.targets) else 'game_lost'
            game_logger.log_game_event(
                state.id, event, player_id,
                practice=practice, guesses_used=len(state.guesses),
                time_elapsed=format_time_elapsed(state.end_time - state.start_time)
            )
        return state, ""

    def delete_practice_game(self, player_id: str) -> bool:
        """Removes a player's practice game from memory."""
        with self._lock:
            if player_id in self.practice_games:
                del self.practice_games[player_id]
                return True
            return False




# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service() -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService()
    return _game_service
