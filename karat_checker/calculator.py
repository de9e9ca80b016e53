"""
Single entry point for the karat screening calculation.

``compute_calculation`` takes one ``MeasurementInput`` and returns one
immutable ``CalculationResult``, or raises a ``CalculationError``. It keeps
no state between calls.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .constants import DEFAULT_WATER_TEMP_C
from .data import KaratBand
from .density import compute_density
from .estimate import (
    check_consistency, classify_range, gold_percent_from_density,
    karat_from_percent, lookup_band, reconcile_range,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasurementInput:
    air_weight: Any
    water_weight: Any
    water_temperature_c: Any = DEFAULT_WATER_TEMP_C
    weight_unit: str = "gram"


@dataclass(frozen=True)
class CalculationResult:
    density: float
    volume: float
    water_density: float
    gold_percent: float
    karat_from_percent: float
    karat_from_density: Optional[float]
    karat_density_range: Optional[str]
    matched_band: Optional[KaratBand]
    final_range_min: float
    final_range_max: float
    final_range_label: str
    category_label: str
    category_note: str
    category_color: str
    delta_karat: Optional[float]
    delta_flag: str
    delta_note: str
    conclusion: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_calculation(measurement: MeasurementInput) -> CalculationResult:
    phys = compute_density(measurement.air_weight, measurement.water_weight,
                           measurement.water_temperature_c)
    density = phys["density_cm3"]

    percent = gold_percent_from_density(density)
    k_percent = karat_from_percent(percent)

    band = lookup_band(density)
    k_density = band.karat if band is not None else None

    k_min, k_max, range_label = reconcile_range(k_percent, k_density)
    category = classify_range(k_min, k_max)
    consistency = check_consistency(k_percent, k_density)

    logger.debug("density=%.4f percent=%.2f k_percent=%.2f band=%s range=%s",
                 density, percent, k_percent, band.karat_label if band else None, range_label)
    if consistency["flag"] == "WARN":
        logger.warning("Estimates disagree by %.1fK (percent %.1fK vs density %s)",
                       consistency["delta"], k_percent, band.karat_label)

    conclusion = (f"Estimated gold purity falls in the {range_label} range "
                  f"({category['label']}). {category['note']}")

    return CalculationResult(
        density=density,
        volume=phys["volume_cm3"],
        water_density=phys["water_density"],
        gold_percent=percent,
        karat_from_percent=k_percent,
        karat_from_density=k_density,
        karat_density_range=band.density_range_label if band is not None else None,
        matched_band=band,
        final_range_min=k_min,
        final_range_max=k_max,
        final_range_label=range_label,
        category_label=category["label"],
        category_note=category["note"],
        category_color=category["color"],
        delta_karat=consistency["delta"],
        delta_flag=consistency["flag"],
        delta_note=consistency["note"],
        conclusion=conclusion,
    )
