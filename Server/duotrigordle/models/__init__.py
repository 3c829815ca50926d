"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSerialized, GameState, LetterColor, SettingsState

__all__ = ['GameSerialized', 'GameState', 'LetterColor', 'SettingsState']
