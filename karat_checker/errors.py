"""
Exceptions raised by the karat calculation.

Every failure is per call: the caller gets either a full result or one of
these, never a partial result.

Usage:
    from karat_checker.errors import CalculationError

    try:
        result = compute_calculation(measurement)
    except CalculationError as e:
        print(e.message)
"""

from typing import Any, Dict, Optional


class CalculationError(ValueError):
    """Base class for errors reported by ``compute_calculation``."""

    def __init__(self, message: str, code: str = "CALCULATION_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        result = {"error": self.code, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class InvalidInputError(CalculationError):
    """Weights are non-numeric, not positive, or air weight is not above water weight."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_INPUT", details=details)


class InvalidVolumeError(CalculationError):
    """Displaced volume came out non-positive after validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_VOLUME", details=details)
