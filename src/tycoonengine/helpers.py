# src/tycoonengine/helpers.py
"""Display formatting for amounts, durations and shares (Korean units)."""

import math

# (threshold, divisor, suffix) from the largest unit down
_KOREAN_UNITS = (
    (1e12, 1e12, "조"),
    (1e8, 1e8, "억"),
    (1e4, 1e4, "만"),
)


def format_number(value: float) -> str:
    """
    Compact amount using 만 (1e4), 억 (1e8) and 조 (1e12).

    >>> format_number(5555)
    '5,555'
    >>> format_number(57500)
    '5.8만'
    >>> format_number(250_000_000)
    '2.5억'
    """
    for threshold, divisor, suffix in _KOREAN_UNITS:
        if value >= threshold:
            return f"{value / divisor:.1f}{suffix}"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_time(seconds: float) -> str:
    """
    >>> format_time(3725)
    '1시간 2분'
    >>> format_time(65)
    '1분 5초'
    """
    seconds = max(seconds, 0)
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    if hours > 0:
        return f"{hours}시간 {minutes}분"
    if minutes > 0:
        return f"{minutes}분 {secs}초"
    return f"{secs}초"


def format_percentage(share: float) -> str:
    """
    >>> format_percentage(0.125)
    '12.5%'
    """
    return f"{share * 100:.1f}%"
