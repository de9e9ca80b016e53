from typing import Dict, Optional, Tuple

from .constants import (
    CATEGORY_FALLBACK, CATEGORY_THRESHOLDS, DELTA_NOTES, DELTA_WARN_THRESHOLD_K,
    MAX_DENSITY, MAX_KARAT, MIN_DENSITY, RANGE_PADDING_K,
)
from .data import REFERENCE_TABLE, KaratBand
from .utils import clamp, fmt_karat, round_half_up

def gold_percent_from_density(density: float) -> float:
    # Linear screening heuristic between the 6K floor and pure gold
    return clamp((density - MIN_DENSITY) / (MAX_DENSITY - MIN_DENSITY) * 100.0, 0.0, 100.0)

def karat_from_percent(percent: float) -> float:
    return percent * MAX_KARAT / 100.0

def lookup_band(density: float, table=REFERENCE_TABLE) -> Optional[KaratBand]:
    """First band containing the density; ties on a shared bound go to the higher karat."""
    for band in table:
        if band.contains(density):
            return band
    return None

def _padded(k: float) -> Tuple[float, float]:
    return (clamp(k - RANGE_PADDING_K, 0.0, MAX_KARAT),
            clamp(k + RANGE_PADDING_K, 0.0, MAX_KARAT))

def round_to_half(x: float) -> float:
    return round_half_up(x * 2.0) / 2.0

def reconcile_range(k_percent: float, k_density: Optional[float]) -> Tuple[float, float, str]:
    lo, hi = _padded(k_percent)
    if k_density is not None:
        d_lo, d_hi = _padded(k_density)
        # union: disagreement widens the range
        lo, hi = min(lo, d_lo), max(hi, d_hi)
    lo, hi = round_to_half(lo), round_to_half(hi)
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi, f"{fmt_karat(lo)}K–{fmt_karat(hi)}K"

def classify_range(k_min: float, k_max: float) -> Dict[str, str]:
    avg = (k_min + k_max) / 2.0
    for threshold, label, note, color in CATEGORY_THRESHOLDS:
        if avg >= threshold:
            return {"label": label, "note": note, "color": color}
    label, note, color = CATEGORY_FALLBACK
    return {"label": label, "note": note, "color": color}

def check_consistency(k_percent: float, k_density: Optional[float]) -> Dict[str, object]:
    if k_density is None:
        return {"delta": None, "flag": "OK", "note": DELTA_NOTES["none"]}
    delta = round_half_up(abs(k_percent - k_density) * 10.0) / 10.0
    flag = "WARN" if delta >= DELTA_WARN_THRESHOLD_K else "OK"
    return {"delta": delta, "flag": flag, "note": DELTA_NOTES[flag]}
