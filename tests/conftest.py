"""Pytest configuration and shared fixtures."""

import pytest

from dividend_forecast.forecast.simulator import simulate
from dividend_forecast.models.forecast import ForecastSeries
from dividend_forecast.models.plan import (
    ContributionStyle,
    InvestmentPlanRequest,
    InvestmentPlanResult,
    PortfolioSnapshot,
)


@pytest.fixture
def two_year_series() -> ForecastSeries:
    """10k at 3.5% yield, 5% dividend growth, 7% market growth, 2 years."""
    return simulate(10000, 3.5, 2, 5, 7)


@pytest.fixture
def sample_request() -> InvestmentPlanRequest:
    """Lump sum request without reinvestment."""
    return InvestmentPlanRequest(
        target_annual_income=50000.0,
        horizon_years=10,
        yield_pct=5.0,
        contribution_style=ContributionStyle.LUMP_SUM,
        reinvest=False,
    )


@pytest.fixture
def lump_sum_plan() -> InvestmentPlanResult:
    """Solved plan requiring a one million lump sum."""
    return InvestmentPlanResult(
        required_contribution=1_000_000.0,
        total_invested=1_000_000.0,
        final_portfolio_value=1_000_000.0,
        initial_annual_income=50000.0,
        final_annual_income=50000.0,
        target_annual_income=50000.0,
        yield_pct=5.0,
        horizon_years=10,
        contribution_style=ContributionStyle.LUMP_SUM,
        reinvest=False,
    )


@pytest.fixture
def sample_snapshot() -> PortfolioSnapshot:
    """Portfolio service totals."""
    return PortfolioSnapshot(
        total_investment=200000.0,
        average_yield_pct=4.0,
        current_value=250000.0,
        total_dividend_income=10000.0,
    )


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory so only built-in defaults apply."""
    return tmp_path
