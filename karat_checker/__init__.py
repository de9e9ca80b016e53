"""Gold karat screening from hydrostatic weighing."""

from .calculator import CalculationResult, MeasurementInput, compute_calculation
from .data import REFERENCE_TABLE, KaratBand
from .errors import CalculationError, InvalidInputError, InvalidVolumeError

__all__ = [
    "CalculationResult", "MeasurementInput", "compute_calculation",
    "REFERENCE_TABLE", "KaratBand",
    "CalculationError", "InvalidInputError", "InvalidVolumeError",
]
