"""
Services Package

Contains all business logic and service classes.
"""

from .puzzle_service import get_target_words, get_guess_colors, all_words_guessed
from .game_service import GameService, get_game_service, initialize_game_service
from .storage_service import (
    StorageService, MemoryStore, MongoStore,
    get_storage_service, initialize_storage_service
)

__all__ = [
    'get_target_words', 'get_guess_colors', 'all_words_guessed',
    'GameService', 'get_game_service', 'initialize_game_service',
    'StorageService', 'MemoryStore', 'MongoStore',
    'get_storage_service', 'initialize_storage_service'
]
