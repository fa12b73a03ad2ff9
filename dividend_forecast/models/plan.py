"""
Investment plan data models.

Requests and results for the reverse solver, the portfolio snapshot supplied
by the portfolio collaborator, and the gap report built from both.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ContributionStyle(str, Enum):
    """How the required investment is paid in."""
    LUMP_SUM = "lump_sum"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def is_periodic(self) -> bool:
        return self is not ContributionStyle.LUMP_SUM

    @property
    def periods_per_year(self) -> int:
        """Contributions per year, 0 for a lump sum."""
        return {
            ContributionStyle.LUMP_SUM: 0,
            ContributionStyle.MONTHLY: 12,
            ContributionStyle.YEARLY: 1,
        }[self]

    @property
    def months_between_contributions(self) -> int:
        return 12 if self is ContributionStyle.YEARLY else 1


@dataclass(frozen=True)
class InvestmentPlanRequest:
    """Target income request for the reverse solver."""
    target_annual_income: float
    horizon_years: int
    yield_pct: float
    contribution_style: ContributionStyle = ContributionStyle.LUMP_SUM
    reinvest: bool = True
    scenario: str = "moderate"               # Growth rates for the lump sum + reinvest solve


@dataclass(frozen=True)
class InvestmentPlanResult:
    """Solved plan and its simulated trajectory."""
    required_contribution: float             # Lump sum total, or amount per period
    total_invested: float
    final_portfolio_value: float
    initial_annual_income: float
    final_annual_income: float
    target_annual_income: float
    yield_pct: float
    horizon_years: int
    contribution_style: ContributionStyle
    reinvest: bool
    yearly_portfolio_values: tuple[float, ...] = ()

    @property
    def required_investment(self) -> float:
        """Capital the plan calls for in total."""
        if self.contribution_style is ContributionStyle.LUMP_SUM:
            return self.required_contribution
        return self.total_invested


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Live portfolio totals supplied by the portfolio service."""
    total_investment: Optional[float] = None
    average_yield_pct: Optional[float] = None
    current_value: float = 0.0
    total_dividend_income: float = 0.0


@dataclass(frozen=True)
class GapReport:
    """Difference between a plan and the investor's current holdings."""
    investment_gap: float
    income_gap: float
    percent_complete: float
    target_reached: bool
    suggested_monthly_contribution: float
    months_to_target: Optional[int]
