"""Run the forward simulator across catalog scenarios"""

from typing import Optional, Union

from ..config.defaults import SimulationDefaults
from ..forecast.simulator import simulate
from ..models.forecast import ForecastSeries
from .catalog import DEFAULT_CATALOG, ScenarioCatalog, ScenarioKey


def run_scenario(
    key: Union[str, ScenarioKey],
    initial_investment: Optional[float],
    dividend_yield_pct: Optional[float],
    horizon_years: Optional[int],
    custom_dividend_growth_pct: Optional[float] = None,
    custom_market_growth_pct: Optional[float] = None,
    catalog: Optional[ScenarioCatalog] = None,
    defaults: Optional[SimulationDefaults] = None,
) -> ForecastSeries:
    """
    Simulate a single catalog scenario

    Args:
        key: Scenario key
        initial_investment: Starting portfolio value
        dividend_yield_pct: Caller-supplied yield in percent
        horizon_years: Years to simulate
        custom_dividend_growth_pct: Dividend growth for the custom scenario
        custom_market_growth_pct: Market growth for the custom scenario
        catalog: Scenario table, the built-in one by default
        defaults: Simulator fallbacks

    Returns:
        ForecastSeries tagged with the scenario key
    """
    catalog = catalog or DEFAULT_CATALOG
    parameters = catalog.resolve(
        key, dividend_yield_pct, custom_dividend_growth_pct, custom_market_growth_pct
    )

    return simulate(
        initial_investment,
        parameters.dividend_yield_pct,
        horizon_years,
        parameters.dividend_growth_rate_pct,
        parameters.market_growth_rate_pct,
        defaults=defaults,
        scenario=catalog.get(key).key.value,
    )


def run_all(
    initial_investment: Optional[float],
    dividend_yield_pct: Optional[float],
    horizon_years: Optional[int],
    custom_dividend_growth_pct: Optional[float] = None,
    custom_market_growth_pct: Optional[float] = None,
    catalog: Optional[ScenarioCatalog] = None,
    defaults: Optional[SimulationDefaults] = None,
) -> dict[str, ForecastSeries]:
    """Simulate every catalog scenario, keyed by scenario name"""
    catalog = catalog or DEFAULT_CATALOG

    return {
        key: run_scenario(
            key,
            initial_investment,
            dividend_yield_pct,
            horizon_years,
            custom_dividend_growth_pct,
            custom_market_growth_pct,
            catalog=catalog,
            defaults=defaults,
        )
        for key in catalog.keys()
    }
