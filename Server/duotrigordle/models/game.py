"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class LetterColor(Enum):
    """Per-letter feedback symbol for a guess against one board."""
    GREEN = "G"
    YELLOW = "Y"
    BLACK = "B"


@dataclass
class GameState:
    """Live state of one duotrigordle game."""
    id: int
    targets: List[str]
    guesses: List[str] = field(default_factory=list)
    input: str = ""
    game_over: bool = False
    practice: bool = False
    start_time: int = 0  # epoch milliseconds, 0 when unset
    end_time: int = 0


@dataclass
class GameSerialized:
    """
    Persisted game record.

    Targets are deliberately absent: they are recomputed from the id on load.
    """
    id: int
    guesses: List[str]
    start_time: int
    end_time: int

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape of the stored record."""
        return {
            'id': self.id,
            'guesses': list(self.guesses),
            'startTime': self.start_time,
            'endTime': self.end_time,
        }


@dataclass
class SettingsState:
    """Player display preferences, stored as an opaque JSON object."""
    color_blind_mode: bool = False
    show_timer: bool = False
    wide_mode: bool = False
    hide_completed_boards: bool = False
    animate_hiding: bool = True
    hide_keyboard: bool = False
