#!/usr/bin/env python3
"""
Basic Usage Example - Dividend Forecast Engine

Shows how to:
- Forecast a portfolio under every risk scenario
- Summarize a forecast
- Solve for the investment needed to reach a target income
- Compare the plan with a live portfolio

Run: python examples/basic_usage.py
"""

from dividend_forecast.engine import ForecastEngine
from dividend_forecast.logging import configure_logging
from dividend_forecast.models import ContributionStyle, PortfolioSnapshot


def format_currency(value: float) -> str:
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1000:
        return f"${value / 1000:.1f}K"
    return f"${value:.0f}"


def show_scenarios(engine: ForecastEngine, snapshot: PortfolioSnapshot) -> None:
    print("Scenario forecasts (10 years)")
    summaries = engine.summarize_scenarios(snapshot.total_investment, snapshot.average_yield_pct, 10)
    for key, summary in summaries.items():
        print(f"  {key:<13} final {format_currency(summary.final_value):>8}  "
              f"growth {summary.total_growth_pct:6.1f}%  "
              f"income {format_currency(summary.initial_income)} -> {format_currency(summary.final_income)}")

    print("\nModerate scenario, year by year")
    for point in engine.forecast_portfolio(snapshot, 10):
        print(f"  Y{point.period:<3} value {format_currency(point.portfolio_value):>8}  "
              f"dividends {format_currency(point.dividend_income):>7}")


def show_plans(engine: ForecastEngine, snapshot: PortfolioSnapshot) -> None:
    print("\nInvestment needed for $24K/year in 15 years (moderate, 4.5% yield)")
    for style in ContributionStyle:
        for reinvest in (True, False):
            request = engine.build_request(24000, 15, contribution_style=style, reinvest=reinvest)
            plan = engine.solve_plan(request)
            label = f"{style.value}{' + reinvest' if reinvest else ''}"
            print(f"  {label:<20} {format_currency(plan.required_contribution):>8}  "
                  f"total invested {format_currency(plan.total_invested):>8}  "
                  f"final income {format_currency(plan.final_annual_income)}")

    request = engine.build_request(24000, 15, reinvest=False)
    report = engine.analyze_gap(request, snapshot)
    print("\nGap analysis against the current portfolio")
    print(f"  investment gap {format_currency(max(report.investment_gap, 0))}")
    print(f"  income gap     {format_currency(max(report.income_gap, 0))}/year")
    print(f"  progress       {report.percent_complete:.1f}% complete")
    if report.months_to_target:
        print(f"  at {format_currency(report.suggested_monthly_contribution)}/month, "
              f"target reached in {report.months_to_target} months")


def main():
    configure_logging(level="WARNING")
    engine = ForecastEngine()
    snapshot = PortfolioSnapshot(
        total_investment=25000.0,
        average_yield_pct=3.8,
        current_value=27500.0,
        total_dividend_income=1045.0,
    )

    show_scenarios(engine, snapshot)
    show_plans(engine, snapshot)


if __name__ == "__main__":
    main()
