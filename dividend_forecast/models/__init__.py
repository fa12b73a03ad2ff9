"""
Data models module.

Immutable value types for forecasts, investment plans and gap reports.
"""

from .forecast import ForecastPoint, ForecastSeries, ForecastSummary, ScenarioParameters
from .plan import (
    ContributionStyle,
    GapReport,
    InvestmentPlanRequest,
    InvestmentPlanResult,
    PortfolioSnapshot,
)

__all__ = [
    "ScenarioParameters",
    "ForecastPoint",
    "ForecastSeries",
    "ForecastSummary",
    "ContributionStyle",
    "InvestmentPlanRequest",
    "InvestmentPlanResult",
    "PortfolioSnapshot",
    "GapReport",
]
