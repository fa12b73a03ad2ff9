"""Month-granularity compounding used by the reverse solver"""

from dataclasses import dataclass

from ..errors import ForecastCalculationError
from ..models.plan import ContributionStyle
from ..utils.numeric import ensure_finite


@dataclass(frozen=True)
class PlanTrajectory:
    """Outcome of running a contribution plan month by month."""
    total_invested: float
    final_portfolio_value: float
    yearly_portfolio_values: tuple[float, ...]      # Index 0 is the opening value


def annuity_payment(future_value: float, rate: float, periods: int) -> float:
    """
    Periodic payment that accumulates to ``future_value``

    PMT = FV * r / ((1 + r)^n - 1), falling back to FV / n when r is 0.

    Args:
        future_value: Target accumulated value
        rate: Per-period growth rate as a fraction
        periods: Number of payments

    Returns:
        Payment per period, 0.0 when periods is not positive
    """
    if periods <= 0:
        return 0.0

    if rate == 0:
        return future_value / periods

    try:
        growth = (1 + rate) ** periods - 1
    except OverflowError as e:
        raise ForecastCalculationError(
            f"annuity growth factor overflowed: {e}",
            calculation="annuity_payment",
            calculation_input={"future_value": future_value, "rate": rate, "periods": periods},
        ) from e

    if growth == 0:
        # Rate too small to register after compounding
        return future_value / periods

    return ensure_finite(
        "annuity_payment",
        future_value * rate / growth,
        calculation_input={"future_value": future_value, "rate": rate, "periods": periods},
    )


def simulate_contribution_plan(
    contribution: float,
    yield_pct: float,
    horizon_years: int,
    contribution_style: ContributionStyle,
    reinvest: bool,
    months_per_year: int = 12,
) -> PlanTrajectory:
    """
    Run a contribution plan at monthly granularity

    A lump sum is invested at month 0. Periodic plans add the contribution at
    the end of every contribution interval. After any contribution, a month's
    dividend of value * yield / 12 is added back when reinvesting. The yield
    itself stays constant.

    Args:
        contribution: Lump sum, or amount per contribution period
        yield_pct: Annual yield in percent
        horizon_years: Plan length in years
        contribution_style: Lump sum, monthly or yearly
        reinvest: Whether dividends are reinvested
        months_per_year: Months in a year

    Returns:
        PlanTrajectory with totals and year-end values
    """
    monthly_yield = yield_pct / 100 / months_per_year
    total_months = horizon_years * months_per_year

    if contribution_style is ContributionStyle.LUMP_SUM:
        portfolio_value = contribution
        total_invested = contribution
    else:
        portfolio_value = 0.0
        total_invested = 0.0

    interval = contribution_style.months_between_contributions
    yearly_values = [portfolio_value]

    for month in range(1, total_months + 1):
        if contribution_style.is_periodic and month % interval == 0:
            portfolio_value += contribution
            total_invested += contribution

        if reinvest:
            portfolio_value += portfolio_value * monthly_yield

        if month % months_per_year == 0:
            yearly_values.append(portfolio_value)

    ensure_finite("final_portfolio_value", portfolio_value, calculation_input={
        "contribution": contribution,
        "yield_pct": yield_pct,
        "horizon_years": horizon_years,
    })

    return PlanTrajectory(
        total_invested=total_invested,
        final_portfolio_value=portfolio_value,
        yearly_portfolio_values=tuple(yearly_values),
    )
