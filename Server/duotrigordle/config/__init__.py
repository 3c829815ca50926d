"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORDS_TARGET, NUM_BOARDS, NUM_GUESSES, LEGACY_BOARDS, WORD_LENGTH,
    GAME_STORAGE_KEY, SETTINGS_STORAGE_KEY,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORDS_TARGET', 'NUM_BOARDS', 'NUM_GUESSES', 'LEGACY_BOARDS', 'WORD_LENGTH',
    'GAME_STORAGE_KEY', 'SETTINGS_STORAGE_KEY',
    'validate_word_list_integrity', 'get_word_statistics'
]
