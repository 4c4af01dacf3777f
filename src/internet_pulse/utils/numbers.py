import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from zero for positives, like the dashboard's JS did (Python rounds to even)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def format_number(num: float) -> str:
    """Full-precision rendering: whole numbers without a trailing .0."""
    if float(num).is_integer():
        return str(int(num))
    return repr(float(num))


def format_large_number(num: float) -> str:
    """Compact a count to one decimal with a T/B/M/K suffix."""
    if num >= 1e12:
        return f"{num / 1e12:.1f}T"
    if num >= 1e9:
        return f"{num / 1e9:.1f}B"
    if num >= 1e6:
        return f"{num / 1e6:.1f}M"
    if num >= 1e3:
        return f"{num / 1e3:.1f}K"
    return format_number(num)
