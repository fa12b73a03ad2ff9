"""Integration tests for the forecast, solve and gap pipeline."""

import pytest

from dividend_forecast.engine import ForecastEngine
from dividend_forecast.forecast.simulator import simulate
from dividend_forecast.models.plan import ContributionStyle, PortfolioSnapshot


@pytest.mark.integration
class TestForecastPipeline:
    """End-to-end runs through the engine with repository configuration."""

    def test_scenarios_order_by_risk(self) -> None:
        """Higher-risk scenarios end with larger portfolios."""
        engine = ForecastEngine()
        summaries = engine.summarize_scenarios(10000, 3.5, 10)

        assert (
            summaries["conservative"].final_value
            < summaries["moderate"].final_value
            < summaries["aggressive"].final_value
        )

    def test_lump_sum_plan_reaches_target_income(self) -> None:
        """Forecasting the solved lump sum pays the target in the final year."""
        engine = ForecastEngine()
        request = engine.build_request(24000, 15, reinvest=True)
        plan = engine.solve_plan(request)

        series = simulate(plan.required_contribution, request.yield_pct, 15, 5, 7)
        assert series.final.dividend_income == pytest.approx(24000, rel=1e-9)

    def test_plan_then_gap(self) -> None:
        """A small portfolio against a large target leaves a positive gap."""
        engine = ForecastEngine()
        request = engine.build_request(24000, 15, reinvest=False)
        snapshot = PortfolioSnapshot(
            total_investment=25000.0,
            average_yield_pct=3.8,
            current_value=27500.0,
            total_dividend_income=1045.0,
        )

        plan = engine.solve_plan(request)
        report = engine.analyze_gap(request, snapshot, monthly_contribution=5000)

        assert plan.required_contribution == pytest.approx(24000 * 100 / 4.5)
        assert report.investment_gap == pytest.approx(plan.required_contribution - 27500.0)
        assert report.income_gap == pytest.approx(24000 - 1045.0)
        assert not report.target_reached
        assert report.months_to_target == 102

    def test_periodic_styles_total_more_without_reinvestment(self) -> None:
        """Reinvesting dividends lowers the total a periodic plan needs."""
        engine = ForecastEngine()
        for style in (ContributionStyle.MONTHLY, ContributionStyle.YEARLY):
            with_reinvest = engine.solve_plan(
                engine.build_request(12000, 10, contribution_style=style, reinvest=True)
            )
            without = engine.solve_plan(
                engine.build_request(12000, 10, contribution_style=style, reinvest=False)
            )
            assert with_reinvest.total_invested < without.total_invested

    def test_repeat_requests_hit_cache(self) -> None:
        """Identical requests are served from the engine cache."""
        engine = ForecastEngine()
        request = engine.build_request(24000, 15)
        engine.solve_plan(request)
        engine.solve_plan(request)

        stats = engine.get_cache_stats()
        assert stats["plan_hits"] == 1
        assert stats["plan_misses"] == 1
