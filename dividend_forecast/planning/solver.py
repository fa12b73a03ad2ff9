"""
Reverse solver: required investment for a target annual dividend income.

Four branches, selected by contribution style and whether dividends are
reinvested:

- lump sum + reinvest: simulate a unit seed and scale, relying on the
  simulator being linear in its initial investment
- lump sum + no reinvest: target / yield
- periodic + reinvest: future value of an annuity at the monthly yield
- periodic + no reinvest: target portfolio value / number of contributions

Every solved plan is then run month by month to fill in the trajectory.
"""

from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..config.validation import validate_plan_request
from ..errors import InvalidForecastInputError, UnreachableTargetError
from ..forecast.simulator import simulate
from ..logging.config import get_solver_logger, log_plan_solved
from ..models.plan import ContributionStyle, InvestmentPlanRequest, InvestmentPlanResult
from ..scenarios.catalog import DEFAULT_CATALOG, ScenarioCatalog
from ..utils.numeric import ensure_finite
from .compounding import annuity_payment, simulate_contribution_plan

logger = get_solver_logger(__name__)


def target_portfolio_value(target_annual_income: float, yield_pct: float) -> float:
    """Portfolio value whose yield pays ``target_annual_income``."""
    return target_annual_income * 100 / yield_pct


def required_lump_sum_with_reinvestment(
    target_annual_income: float,
    yield_pct: float,
    horizon_years: int,
    dividend_growth_rate_pct: float,
    market_growth_rate_pct: float,
    unit_seed: float = 10000.0,
) -> float:
    """Lump sum whose reinvested forecast pays the target in the final year."""
    series = simulate(
        unit_seed,
        yield_pct,
        horizon_years,
        dividend_growth_rate_pct,
        market_growth_rate_pct,
    )
    final_income = series.final.dividend_income

    return ensure_finite(
        "required_lump_sum",
        target_annual_income / final_income * unit_seed,
        calculation_input={"final_income": final_income, "unit_seed": unit_seed},
    )


def required_lump_sum_without_reinvestment(target_annual_income: float, yield_pct: float) -> float:
    return target_portfolio_value(target_annual_income, yield_pct)


def required_periodic_with_reinvestment(
    target_annual_income: float,
    yield_pct: float,
    horizon_years: int,
    months_per_year: int = 12,
) -> float:
    """
    Monthly-compounded annuity payment reaching the target portfolio value.

    The payment is derived at monthly granularity for yearly plans too.
    """
    monthly_rate = yield_pct / 100 / months_per_year
    total_months = horizon_years * months_per_year

    return annuity_payment(
        target_portfolio_value(target_annual_income, yield_pct),
        monthly_rate,
        total_months,
    )


def required_periodic_without_reinvestment(
    target_annual_income: float,
    yield_pct: float,
    horizon_years: int,
    contribution_style: ContributionStyle,
) -> float:
    total_periods = horizon_years * contribution_style.periods_per_year
    return target_portfolio_value(target_annual_income, yield_pct) / total_periods


def _coerce_style(value) -> ContributionStyle:
    try:
        return ContributionStyle(value)
    except ValueError:
        raise InvalidForecastInputError(
            f"Unknown contribution style: {value!r}",
            context={"contribution_style": value},
        ) from None


def validate_request(request: InvestmentPlanRequest, max_horizon_years: int = 100) -> None:
    """
    Enforce solver preconditions.

    Raises:
        InvalidForecastInputError: For non-positive target or horizon,
            negative yield or an excessive horizon
        UnreachableTargetError: For a zero yield
    """
    errors = validate_plan_request(request, max_horizon_years=max_horizon_years)
    if errors:
        raise InvalidForecastInputError(
            "Invalid investment plan request: " + "; ".join(str(e) for e in errors),
            field_errors=errors,
        )

    if request.yield_pct == 0:
        raise UnreachableTargetError(
            "A zero dividend yield cannot produce any income",
            target_annual_income=request.target_annual_income,
            yield_pct=request.yield_pct,
        )


def solve(
    request: InvestmentPlanRequest,
    config: Optional[DefaultConfig] = None,
    catalog: Optional[ScenarioCatalog] = None,
) -> InvestmentPlanResult:
    """
    Compute the investment needed to reach a target annual income.

    Args:
        request: Target income, horizon, yield, contribution style and
            reinvestment choice
        config: Solver parameters, the defaults when omitted
        catalog: Scenario table for the lump sum + reinvest branch

    Returns:
        InvestmentPlanResult with the required contribution and the
        simulated trajectory of the plan

    Raises:
        InvalidForecastInputError: If the request violates preconditions
        UnknownScenarioError: If the request names an unknown scenario
    """
    config = config or get_default_config()
    catalog = catalog or DEFAULT_CATALOG
    solver_params = config.solver

    style = _coerce_style(request.contribution_style)
    validate_request(request, max_horizon_years=solver_params.max_horizon_years)
    profile = catalog.get(request.scenario)

    target = request.target_annual_income
    yield_pct = request.yield_pct
    horizon = request.horizon_years

    if style is ContributionStyle.LUMP_SUM:
        if request.reinvest:
            branch = "lump_sum_reinvest"
            required = required_lump_sum_with_reinvestment(
                target,
                yield_pct,
                horizon,
                profile.dividend_growth_rate_pct,
                profile.market_growth_rate_pct,
                unit_seed=solver_params.unit_seed,
            )
        else:
            branch = "lump_sum"
            required = required_lump_sum_without_reinvestment(target, yield_pct)
        annual_investment_unit = required
    else:
        if request.reinvest:
            branch = f"{style.value}_reinvest"
            required = required_periodic_with_reinvestment(
                target, yield_pct, horizon, months_per_year=solver_params.months_per_year
            )
        else:
            branch = style.value
            required = required_periodic_without_reinvestment(target, yield_pct, horizon, style)
        annual_investment_unit = required * style.periods_per_year

    trajectory = simulate_contribution_plan(
        required,
        yield_pct,
        horizon,
        style,
        request.reinvest,
        months_per_year=solver_params.months_per_year,
    )

    log_plan_solved(logger, branch, required, context={
        "target_annual_income": target,
        "yield_pct": yield_pct,
        "horizon_years": horizon,
    })

    return InvestmentPlanResult(
        required_contribution=required,
        total_invested=trajectory.total_invested,
        final_portfolio_value=trajectory.final_portfolio_value,
        initial_annual_income=annual_investment_unit * yield_pct / 100,
        final_annual_income=trajectory.final_portfolio_value * yield_pct / 100,
        target_annual_income=target,
        yield_pct=yield_pct,
        horizon_years=horizon,
        contribution_style=style,
        reinvest=request.reinvest,
        yearly_portfolio_values=trajectory.yearly_portfolio_values,
    )
