"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_service, require_json
from .helpers import now_ms, get_todays_id, format_time_elapsed
from .game_logger import game_logger
from .mersenne_twister import MersenneTwister

__all__ = [
    'require_service', 'require_json',
    'now_ms', 'get_todays_id', 'format_time_elapsed',
    'game_logger', 'MersenneTwister'
]
