import logging
from typing import Dict, Optional
import yfinance as yf

from .constants import GOLD_SPOT_TICKER, MAX_KARAT, SPOT_MANUAL_DEFAULT, TROY_OUNCE_TO_GRAM

logger = logging.getLogger(__name__)

def _fetch_spot_yf(ticker: str) -> Optional[float]:
    try:
        hist = yf.Ticker(ticker).history(period="5d")
        if hist is None or hist.empty: return None
        return float(hist["Close"].dropna().iloc[-1])
    except Exception as e:  # yfinance surfaces network and parsing failures alike
        logger.warning("Spot price fetch for %s failed: %s", ticker, e)
        return None

def get_gold_spot(manual_per_oz: Optional[float] = None) -> Dict[str, object]:
    if manual_per_oz is not None and manual_per_oz > 0:
        g_oz, source = float(manual_per_oz), "manual"
    else:
        g_oz = _fetch_spot_yf(GOLD_SPOT_TICKER)
        source = "yfinance"
        if g_oz is None or g_oz <= 0:
            g_oz, source = SPOT_MANUAL_DEFAULT["gold_oz"], "default"
    return {"per_oz": g_oz, "per_g": g_oz / TROY_OUNCE_TO_GRAM, "source": source}

def gold_content_value(result, mass_g: float, spot_per_g: float) -> Dict[str, Dict[str, float]]:
    """Fine gold mass and value at the low/high ends of the final range and at the percent estimate."""
    if mass_g <= 0 or spot_per_g <= 0:
        return {}
    points = {
        "low": result.final_range_min,
        "estimate": result.karat_from_percent,
        "high": result.final_range_max,
    }
    out = {}
    for name, karat in points.items():
        fine_g = mass_g * karat / MAX_KARAT
        out[name] = {"karat": float(karat), "fine_gold_g": fine_g, "value_usd": fine_g * spot_per_g}
    return out
