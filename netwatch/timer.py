"""Monotonic time in milliseconds and clock formatting."""

import time


def get_time() -> int:
    """Current monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


def msec2clock(milliseconds: int) -> str:
    """Format milliseconds as hh:mm:ss."""
    if milliseconds < 0:
        raise ValueError("milliseconds must not be negative")
    secs = (milliseconds // 1000) & 0xFFFFFFFF
    minutes_total, seconds = divmod(secs, 60)
    hours, minutes = divmod(minutes_total, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"