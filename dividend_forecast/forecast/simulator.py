"""Forward simulation of dividend reinvestment and compound growth"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import SimulationDefaults, SolverParams
from ..logging.config import get_logger, log_input_clamped
from ..models.forecast import ForecastPoint, ForecastSeries, ScenarioParameters
from ..utils.numeric import ensure_finite, is_usable_positive

logger = get_logger(__name__)

DEFAULTS = SimulationDefaults()
MAX_HORIZON_YEARS = SolverParams().max_horizon_years


@dataclass(frozen=True)
class SimulationInputs:
    """Simulation inputs after fallbacks have been applied."""
    initial_investment: float
    dividend_yield_pct: float
    horizon_years: int
    dividend_growth_rate_pct: float
    market_growth_rate_pct: float
    clamped_fields: tuple[str, ...] = ()

    @property
    def was_clamped(self) -> bool:
        return bool(self.clamped_fields)

    @property
    def parameters(self) -> ScenarioParameters:
        return ScenarioParameters(
            dividend_yield_pct=self.dividend_yield_pct,
            dividend_growth_rate_pct=self.dividend_growth_rate_pct,
            market_growth_rate_pct=self.market_growth_rate_pct,
        )


def _clamp(field: str, value, fallback, clamped: list):
    if is_usable_positive(value):
        return value
    log_input_clamped(logger, field, value, fallback)
    clamped.append(field)
    return fallback


def clamp_inputs(
    initial_investment: Optional[float] = None,
    annual_dividend_yield_pct: Optional[float] = None,
    horizon_years: Optional[int] = None,
    dividend_growth_rate_pct: Optional[float] = None,
    market_growth_rate_pct: Optional[float] = None,
    defaults: Optional[SimulationDefaults] = None,
) -> SimulationInputs:
    """
    Replace missing, zero, negative or non-finite inputs with defaults

    Horizons beyond ``MAX_HORIZON_YEARS`` are capped there. Never raises.
    Compare ``clamped_fields`` to find out which inputs were replaced.
    """
    defaults = defaults or DEFAULTS
    clamped: list[str] = []

    horizon = horizon_years
    if is_usable_positive(horizon):
        horizon = int(float(horizon))
    horizon = _clamp("horizon_years", horizon, defaults.horizon_years, clamped)
    if horizon > MAX_HORIZON_YEARS:
        log_input_clamped(logger, "horizon_years", horizon, MAX_HORIZON_YEARS)
        clamped.append("horizon_years")
        horizon = MAX_HORIZON_YEARS

    return SimulationInputs(
        initial_investment=float(_clamp(
            "initial_investment", initial_investment, defaults.initial_investment, clamped)),
        dividend_yield_pct=float(_clamp(
            "dividend_yield_pct", annual_dividend_yield_pct, defaults.dividend_yield_pct, clamped)),
        horizon_years=int(horizon),
        dividend_growth_rate_pct=float(_clamp(
            "dividend_growth_rate_pct", dividend_growth_rate_pct,
            defaults.dividend_growth_rate_pct, clamped)),
        market_growth_rate_pct=float(_clamp(
            "market_growth_rate_pct", market_growth_rate_pct,
            defaults.market_growth_rate_pct, clamped)),
        clamped_fields=tuple(clamped),
    )


def simulate(
    initial_investment: Optional[float] = None,
    annual_dividend_yield_pct: Optional[float] = None,
    horizon_years: Optional[int] = None,
    dividend_growth_rate_pct: Optional[float] = None,
    market_growth_rate_pct: Optional[float] = None,
    defaults: Optional[SimulationDefaults] = None,
    scenario: Optional[str] = None,
) -> ForecastSeries:
    """
    Simulate yearly dividend reinvestment with market and yield growth

    Each year the dividend is paid on the current value, reinvested in full,
    the enlarged portfolio grows by the market rate and the yield itself
    compounds by the dividend growth rate. The recurrence is linear in the
    initial investment.

    Args:
        initial_investment: Starting portfolio value
        annual_dividend_yield_pct: Yield in percent (3.5 means 3.5%)
        horizon_years: Number of years to simulate
        dividend_growth_rate_pct: Yearly growth of the yield, in percent
        market_growth_rate_pct: Yearly growth of portfolio value, in percent
        defaults: Fallbacks for unusable inputs
        scenario: Scenario key recorded on the series

    Returns:
        ForecastSeries with horizon_years + 1 points

    Raises:
        ForecastCalculationError: If extreme rates overflow within the horizon
    """
    inputs = clamp_inputs(
        initial_investment,
        annual_dividend_yield_pct,
        horizon_years,
        dividend_growth_rate_pct,
        market_growth_rate_pct,
        defaults=defaults,
    )

    market_factor = 1 + inputs.market_growth_rate_pct / 100
    yield_factor = 1 + inputs.dividend_growth_rate_pct / 100

    current_value = inputs.initial_investment
    current_yield = inputs.dividend_yield_pct
    cumulative_dividends = 0.0

    points = [ForecastPoint(period=0, portfolio_value=current_value)]

    for year in range(1, inputs.horizon_years + 1):
        dividend_income = current_value * current_yield / 100
        cumulative_dividends += dividend_income

        # Dividends buy more of the same holding
        reinvested_amount = dividend_income
        current_value += reinvested_amount

        current_value *= market_factor
        current_yield *= yield_factor

        points.append(ForecastPoint(
            period=year,
            portfolio_value=current_value,
            dividend_income=dividend_income,
            cumulative_dividends=cumulative_dividends,
            reinvested_amount=reinvested_amount,
        ))

    ensure_finite("portfolio_value", current_value, calculation_input={
        "initial_investment": inputs.initial_investment,
        "horizon_years": inputs.horizon_years,
    })

    return ForecastSeries(
        points=tuple(points),
        parameters=inputs.parameters,
        initial_investment=inputs.initial_investment,
        scenario=scenario,
    )
