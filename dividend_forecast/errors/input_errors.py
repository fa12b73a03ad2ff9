"""
Input error classifications for forecast and plan requests.

These exceptions describe caller-side problems: a request that violates the
solver's preconditions or names a scenario that does not exist.
"""

from typing import Optional, Dict, Any


class ForecastInputError(Exception):
    """Base class for input problems the caller can correct."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidForecastInputError(ForecastInputError):
    """Request fields outside the solver's preconditions."""

    def __init__(self, message: str, field_errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or []

    @property
    def fields(self) -> list:
        return [error.field for error in self.field_errors]


class UnreachableTargetError(InvalidForecastInputError):
    """The target income cannot be produced with the given yield."""

    def __init__(self, message: str, target_annual_income: Optional[float] = None,
                 yield_pct: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.target_annual_income = target_annual_income
        self.yield_pct = yield_pct


class UnknownScenarioError(ForecastInputError):
    """Scenario key not present in the catalog."""

    def __init__(self, message: str, scenario: Optional[str] = None,
                 available: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.scenario = scenario
        self.available = available or []
