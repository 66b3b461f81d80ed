import math


def is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def format_time(seconds: float) -> str:
    """
    Zero-padded MM:SS. Minutes are not rolled into hours.
    """
    if not is_finite(seconds) or seconds < 0:
        return "00:00"

    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def fraction(value: float, duration: float) -> float:
    """
    Position of value along duration in [0, 1].

    Unknown or degenerate durations yield 0 so NaN never reaches a layout.
    """
    if not is_finite(value) or not is_finite(duration) or duration <= 0:
        return 0.0

    return min(max(value / duration, 0.0), 1.0)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)
