"""Gap analysis between a solved plan and the current portfolio"""

import math
from typing import Optional

from ..models.plan import GapReport, InvestmentPlanResult, PortfolioSnapshot

MONTHS_PER_YEAR = 12


def _percent_complete(current_value: float, required: float) -> float:
    if required <= 0:
        return 0.0
    return min(max(current_value / required * 100, 0.0), 100.0)


def _months_to_target(gap: float, monthly_contribution: float) -> Optional[int]:
    if gap <= 0:
        return 0
    if monthly_contribution <= 0:
        return None
    return math.ceil(gap / monthly_contribution)


def analyze(
    plan_result: InvestmentPlanResult,
    current_portfolio_value: float,
    current_annual_income: float,
    monthly_contribution: Optional[float] = None,
) -> GapReport:
    """
    Compare a plan with the investor's current holdings

    Args:
        plan_result: Output of the reverse solver
        current_portfolio_value: Market value of the live portfolio
        current_annual_income: Dividends the live portfolio pays per year
        monthly_contribution: Planned monthly top-up, defaults to closing
            the gap over one year

    Returns:
        GapReport. Negative gaps mean a surplus.
    """
    current_value = current_portfolio_value or 0.0
    current_income = current_annual_income or 0.0
    required = plan_result.required_investment

    investment_gap = required - current_value
    suggested = max(investment_gap, 0.0) / MONTHS_PER_YEAR

    if monthly_contribution is None:
        monthly_contribution = suggested

    return GapReport(
        investment_gap=investment_gap,
        income_gap=plan_result.target_annual_income - current_income,
        percent_complete=_percent_complete(current_value, required),
        target_reached=investment_gap <= 0,
        suggested_monthly_contribution=suggested,
        months_to_target=_months_to_target(investment_gap, monthly_contribution),
    )


def analyze_snapshot(
    plan_result: InvestmentPlanResult,
    snapshot: PortfolioSnapshot,
    monthly_contribution: Optional[float] = None,
) -> GapReport:
    """Gap analysis seeded from a portfolio service snapshot"""
    return analyze(
        plan_result,
        snapshot.current_value,
        snapshot.total_dividend_income,
        monthly_contribution=monthly_contribution,
    )
