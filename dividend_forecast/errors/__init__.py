"""
Error classification system for the forecasting engine.

Input errors are raised for requests the caller can fix. System failures
indicate a non-finite calculation or an unusable configuration.
"""

from .input_errors import (
    ForecastInputError,
    InvalidForecastInputError,
    UnreachableTargetError,
    UnknownScenarioError,
)
from .system_failures import (
    ForecastSystemError,
    ForecastCalculationError,
    ConfigurationError,
)

__all__ = [
    # Input Errors
    "ForecastInputError",
    "InvalidForecastInputError",
    "UnreachableTargetError",
    "UnknownScenarioError",
    # System Failures
    "ForecastSystemError",
    "ForecastCalculationError",
    "ConfigurationError",
]
