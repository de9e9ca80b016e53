from typing import Dict, Tuple

# Units / conversions
CARAT_TO_GRAM = 0.2
TROY_OUNCE_TO_GRAM = 31.1034768
MAX_KARAT = 24.0

# Karat reference table, 24K -> 6K: (label, purity %, min density, max density) in g/cm³.
# Percent is K/24 * 100 (24K uses 99.9). Density ranges are screening heuristics.
KARAT_TABLE: Tuple[Tuple[str, float, float, float], ...] = (
    ("24K", 99.9, 19.20, 19.32),
    ("23K", 95.8, 18.60, 19.20),
    ("22K", 91.7, 17.70, 18.60),
    ("21K", 87.5, 16.90, 17.70),
    ("20K", 83.3, 16.20, 16.90),
    ("19K", 79.2, 15.60, 16.20),
    ("18K", 75.0, 15.20, 15.60),
    ("17K", 70.8, 14.70, 15.20),
    ("16K", 66.7, 14.20, 14.70),
    ("15K", 62.5, 13.70, 14.20),
    ("14K", 58.3, 13.00, 13.70),
    ("13K", 54.2, 12.60, 13.00),
    ("12K", 50.0, 12.00, 12.60),
    ("11K", 45.8, 11.60, 12.00),
    ("10K", 41.7, 11.30, 11.60),
    ("9K", 37.5, 10.90, 11.30),
    ("8K", 33.3, 10.50, 10.90),
    ("7K", 29.2, 10.10, 10.50),
    ("6K", 25.0, 9.70, 10.10),
)

# Linear percent scale bounds; must follow the table's extremes (6K min, 24K max)
MIN_DENSITY = 9.7
MAX_DENSITY = 19.32

# Water density by temperature bucket (g/cm³)
WATER_DENSITY_DEFAULT = 1.0
WATER_DENSITY_COLD = 0.9997    # below COLD_WATER_MAX_C
WATER_DENSITY_WARM = 0.9957    # above WARM_WATER_MIN_C
COLD_WATER_MAX_C = 10.0
WARM_WATER_MIN_C = 30.0
DEFAULT_WATER_TEMP_C = 20.0

# Each estimate is padded by this many karats before the ranges are merged
RANGE_PADDING_K = 1.0

# Purity categories, evaluated high to low: (min average karat, label, note, badge color)
CATEGORY_THRESHOLDS: Tuple[Tuple[float, str, str, str], ...] = (
    (22.0, "Very High", "Close to pure gold (typically 22K+).", "#059669"),
    (18.0, "High", "High purity (typically 18K–21K).", "#16a34a"),
    (14.0, "Medium", "Medium purity (typically 14K–17K).", "#f59e0b"),
    (10.0, "Low", "Low purity (typically 10K–13K).", "#ea580c"),
)
CATEGORY_FALLBACK: Tuple[str, str, str] = ("Very Low", "Very low purity (below 10K).", "#dc2626")

# Consistency indicator between the percent and density estimates
DELTA_WARN_THRESHOLD_K = 2.0
DELTA_NOTES: Dict[str, str] = {
    "none": "No density-based comparator available (outside the reference table range).",
    "WARN": ("Large difference. Possibly affected by gemstones, solder, hollow sections or voids, "
             "trapped air bubbles, or weighing technique."),
    "OK": "Small difference. Results look consistent for a quick screening.",
}

# Spot price defaults (USD per troy ounce)
SPOT_MANUAL_DEFAULT: Dict[str, float] = {"gold_oz": 2000.0}
GOLD_SPOT_TICKER = "GC=F"

WEIGHT_UNITS = ("gram", "carat")

DISCLAIMER = (
    "These results are an educational estimate and do not replace professional testing. "
    "Accuracy is affected by the alloy (silver/copper/nickel), gemstones, voids, solder and "
    "weighing technique. For accurate results use XRF or a laboratory assay."
)
