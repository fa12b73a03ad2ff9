"""
System failure classifications for the forecasting engine.

These exceptions signal defects or broken configuration rather than bad
requests, and are not expected during normal operation.
"""

from typing import Optional, Dict, Any


class ForecastSystemError(Exception):
    """Base class for unrecoverable engine failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ForecastCalculationError(ForecastSystemError):
    """A calculation produced a non-finite value."""

    def __init__(self, message: str, calculation: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.calculation = calculation
        self.calculation_input = calculation_input


class ConfigurationError(ForecastSystemError):
    """Configuration file could not be loaded or failed validation."""

    def __init__(self, message: str, config_path: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_path = config_path
        self.errors = errors or []
