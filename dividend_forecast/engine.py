"""
Forecast engine coordinator.

Entry point for the surrounding application. Loads configuration, seeds
forecasts from portfolio snapshots and memoizes results, so that repeated
UI refreshes with unchanged parameters reuse earlier computations. The
modules it delegates to stay pure and never cache.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

from .config.loader import ConfigLoader
from .forecast.summary import summarize
from .logging.config import get_logger
from .models.forecast import ForecastSeries, ForecastSummary
from .models.plan import (
    ContributionStyle,
    GapReport,
    InvestmentPlanRequest,
    InvestmentPlanResult,
    PortfolioSnapshot,
)
from .planning.gap import analyze_snapshot
from .planning.solver import solve
from .scenarios.catalog import ScenarioCatalog, ScenarioKey
from .scenarios.runner import run_all

logger = get_logger(__name__)

DEFAULT_CACHE_SIZE = 128


class ForecastEngine:
    """
    Coordinates scenario forecasts, plan solving and gap analysis.

    Results are memoized per engine instance, keyed on the call arguments.
    All cached values are immutable apart from the scenario mapping, which
    is copied on return.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        config_overrides: Optional[dict[str, Any]] = None,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ) -> None:
        self.logger = logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.load_config(config_overrides)
        self.catalog = ScenarioCatalog.from_config(self.config)

        self._run_all = lru_cache(maxsize=cache_size)(self._compute_scenarios)
        self._solve = lru_cache(maxsize=cache_size)(self._compute_plan)

        self.logger.info(
            "Forecast engine initialized",
            config_path=str(self.config_loader.config_path),
            scenarios=self.catalog.keys(),
        )

    def _compute_scenarios(self, initial_investment, dividend_yield_pct, horizon_years,
                           custom_dividend_growth_pct, custom_market_growth_pct):
        return run_all(
            initial_investment,
            dividend_yield_pct,
            horizon_years,
            custom_dividend_growth_pct,
            custom_market_growth_pct,
            catalog=self.catalog,
            defaults=self.config.simulation,
        )

    def _compute_plan(self, request: InvestmentPlanRequest) -> InvestmentPlanResult:
        return solve(request, config=self.config, catalog=self.catalog)

    def forecast_scenarios(
        self,
        initial_investment: Optional[float],
        dividend_yield_pct: Optional[float],
        horizon_years: Optional[int] = None,
        custom_dividend_growth_pct: Optional[float] = None,
        custom_market_growth_pct: Optional[float] = None,
    ) -> dict[str, ForecastSeries]:
        """Forecast series for every scenario in the catalog."""
        return dict(self._run_all(
            initial_investment,
            dividend_yield_pct,
            horizon_years,
            custom_dividend_growth_pct,
            custom_market_growth_pct,
        ))

    def forecast(
        self,
        scenario: Union[str, ScenarioKey],
        initial_investment: Optional[float],
        dividend_yield_pct: Optional[float],
        horizon_years: Optional[int] = None,
        custom_dividend_growth_pct: Optional[float] = None,
        custom_market_growth_pct: Optional[float] = None,
    ) -> ForecastSeries:
        """Forecast series for one scenario."""
        key = self.catalog.get(scenario).key.value
        return self.forecast_scenarios(
            initial_investment,
            dividend_yield_pct,
            horizon_years,
            custom_dividend_growth_pct,
            custom_market_growth_pct,
        )[key]

    def summarize_scenarios(
        self,
        initial_investment: Optional[float],
        dividend_yield_pct: Optional[float],
        horizon_years: Optional[int] = None,
    ) -> dict[str, ForecastSummary]:
        """Headline metrics for every scenario."""
        return {
            key: summarize(series)
            for key, series in self.forecast_scenarios(
                initial_investment, dividend_yield_pct, horizon_years
            ).items()
        }

    def forecast_portfolio(
        self,
        snapshot: PortfolioSnapshot,
        horizon_years: Optional[int] = None,
        scenario: Union[str, ScenarioKey] = ScenarioKey.MODERATE,
    ) -> ForecastSeries:
        """
        Forecast a live portfolio.

        The snapshot's total investment and average yield seed the simulator;
        missing values fall back to the simulation defaults.
        """
        return self.forecast(
            scenario,
            snapshot.total_investment,
            snapshot.average_yield_pct,
            horizon_years,
        )

    def build_request(
        self,
        target_annual_income: float,
        horizon_years: int,
        scenario: Union[str, ScenarioKey] = ScenarioKey.MODERATE,
        contribution_style: Union[str, ContributionStyle] = ContributionStyle.LUMP_SUM,
        reinvest: bool = True,
        yield_pct: Optional[float] = None,
    ) -> InvestmentPlanRequest:
        """Request using the scenario's target yield unless one is given."""
        profile = self.catalog.get(scenario)
        return InvestmentPlanRequest(
            target_annual_income=target_annual_income,
            horizon_years=horizon_years,
            yield_pct=profile.target_yield_pct if yield_pct is None else yield_pct,
            contribution_style=ContributionStyle(contribution_style),
            reinvest=reinvest,
            scenario=profile.key.value,
        )

    def solve_plan(self, request: InvestmentPlanRequest) -> InvestmentPlanResult:
        """Required investment for the request, memoized."""
        return self._solve(request)

    def analyze_gap(
        self,
        request: InvestmentPlanRequest,
        snapshot: PortfolioSnapshot,
        monthly_contribution: Optional[float] = None,
    ) -> GapReport:
        """Solve the request and compare it with the snapshot."""
        report = analyze_snapshot(
            self.solve_plan(request), snapshot, monthly_contribution=monthly_contribution
        )
        self.logger.debug(
            "Gap analysis complete",
            investment_gap=report.investment_gap,
            percent_complete=report.percent_complete,
        )
        return report

    def clear_cache(self) -> None:
        self._run_all.cache_clear()
        self._solve.cache_clear()

    def get_cache_stats(self) -> dict[str, Any]:
        scenarios = self._run_all.cache_info()
        plans = self._solve.cache_info()
        return {
            "scenario_hits": scenarios.hits,
            "scenario_misses": scenarios.misses,
            "plan_hits": plans.hits,
            "plan_misses": plans.misses,
        }
