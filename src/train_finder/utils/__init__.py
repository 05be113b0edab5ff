"""工具包"""

from .config import Settings, get_settings, reset_settings
from .time_utils import format_time_of_day, parse_time_of_day

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "format_time_of_day",
    "parse_time_of_day",
]
