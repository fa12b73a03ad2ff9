"""Numeric guards shared by the simulator and the solver."""

import math
from typing import Any, Optional

from ..errors import ForecastCalculationError


def is_usable_positive(value: Any) -> bool:
    """True for a finite real number greater than zero."""
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def ensure_finite(calculation: str, value: float,
                  calculation_input: Optional[dict[str, Any]] = None) -> float:
    """
    Return ``value`` unchanged, raising if it is NaN or infinite.

    Args:
        calculation: Name of the quantity being checked
        value: Computed value
        calculation_input: Inputs to attach to the error

    Raises:
        ForecastCalculationError: If value is not finite
    """
    if not math.isfinite(value):
        raise ForecastCalculationError(
            f"{calculation} produced a non-finite value: {value}",
            calculation=calculation,
            calculation_input=calculation_input,
        )
    return value
