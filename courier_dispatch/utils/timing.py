"""
Time and Rounding Utilities
"""
import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up (2.5 -> 3), unlike Python's banker's rounding"""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_hours(decimal_hours: float) -> str:
    """
    Format decimal hours for display
    1.5 -> "1 hr 30 min", 0.75 -> "45 min", 2.0 -> "2 hr"
    """
    hours = math.floor(decimal_hours)
    minutes = round_half_up((decimal_hours - hours) * 60)
    if minutes == 60:
        hours += 1
        minutes = 0

    if hours == 0:
        return f"{int(minutes)} min"
    elif minutes == 0:
        return f"{int(hours)} hr"
    else:
        return f"{int(hours)} hr {int(minutes)} min"
