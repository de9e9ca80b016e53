import math
from typing import Dict, Optional

from .constants import (
    CARAT_TO_GRAM, COLD_WATER_MAX_C, WARM_WATER_MIN_C,
    WATER_DENSITY_COLD, WATER_DENSITY_DEFAULT, WATER_DENSITY_WARM,
)
from .errors import InvalidInputError, InvalidVolumeError

def mass_grams(value: float, unit: str) -> float:
    u = unit.lower()
    if u in ("carat", "ct", "carats"):
        return value * CARAT_TO_GRAM
    if u in ("gram", "g", "grams"):
        return value
    raise ValueError("weight unit must be 'carat' or 'gram'")

def parse_temperature(value) -> Optional[float]:
    """Temperature in °C, or None when missing or unparsable."""
    if value is None:
        return None
    try:
        t = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(t) else t

def water_density_for(temperature_c) -> float:
    t = parse_temperature(temperature_c)
    if t is None:
        return WATER_DENSITY_DEFAULT
    if t < COLD_WATER_MAX_C:
        return WATER_DENSITY_COLD
    if t > WARM_WATER_MIN_C:
        return WATER_DENSITY_WARM
    return WATER_DENSITY_DEFAULT

def _as_weight(name: str, value) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number", details={name: value})
    try:
        w = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number", details={name: value}) from None
    if not math.isfinite(w) or w <= 0:
        raise InvalidInputError(f"{name} must be a positive number", details={name: value})
    return w

def validate_weights(air_weight, water_weight):
    air = _as_weight("air_weight", air_weight)
    water = _as_weight("water_weight", water_weight)
    if air <= water:
        raise InvalidInputError(
            "Weight in air must be greater than weight in water",
            details={"air_weight": air, "water_weight": water},
        )
    return air, water

def compute_density(air_weight, water_weight, water_temperature_c=None) -> Dict[str, float]:
    air, water = validate_weights(air_weight, water_weight)
    rho_water = water_density_for(water_temperature_c)
    volume = (air - water) / rho_water
    if not math.isfinite(volume) or volume <= 0:
        raise InvalidVolumeError(
            "Computed volume is not positive; check the inputs and weighing technique",
            details={"volume_cm3": volume},
        )
    return {"volume_cm3": volume, "water_density": rho_water, "density_cm3": air / volume}
