"""
Helper Functions

Contains utility functions used throughout the application.
"""

import re
import time
from datetime import date
from typing import Optional
from ..config.app_config import Config


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def get_todays_id(today: Optional[date] = None, start_date: Optional[date] = None) -> int:
    """
    Returns the puzzle id for a calendar day.

    The start date is puzzle 1 and each following day adds one.
    """
    if start_date is None:
        start_date = Config.START_DATE
    if today is None:
        today = date.today()
    return (today - start_date).days + 1


def format_time_elapsed(milliseconds: int) -> str:
    """Format time elapsed as MM:SS.hh"""
    milliseconds = max(int(milliseconds), 0)
    minutes = milliseconds // 1000 // 60
    seconds = (milliseconds // 1000) % 60
    hundreds = (milliseconds // 10) % 100
    return f"{minutes:02d}:{seconds:02d}.{hundreds:02d}"


def to_camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def to_snake_case(name: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()
