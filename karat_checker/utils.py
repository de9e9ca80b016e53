import math

def clamp(x: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, x))

def round_half_up(x: float) -> float:
    # Python's round() is banker's rounding; halves must go up here
    return float(math.floor(x + 0.5))

def fmt_usd(x) -> str:
    try:
        return f"${float(x):,.2f}"
    except (TypeError, ValueError):
        return str(x)

def fmt_karat(x: float) -> str:
    """12.0 -> '12', 12.5 -> '12.5'."""
    return f"{float(x):g}"
