"""时刻工具"""

from datetime import datetime, time
from typing import Union

from .errors import TimeParseError

DEFAULT_TIME_FORMAT = "%H:%M:%S"


def parse_time_of_day(value: Union[str, time], fmt: str = DEFAULT_TIME_FORMAT) -> time:
    """解析时刻字符串为time对象（不含日期和时区）"""
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise TimeParseError(f"时刻必须是字符串: {value!r}")
    try:
        return datetime.strptime(value, fmt).time()
    except ValueError:
        raise TimeParseError(f"无法解析时刻格式: {value!r} (期望 {fmt})")


def format_time_of_day(value: time, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    """格式化时刻"""
    return value.strftime(fmt)
