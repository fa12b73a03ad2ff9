"""Summary statistics for a forecast series"""

from ..models.forecast import ForecastSeries, ForecastSummary


def _growth_pct(start: float, end: float) -> float:
    if start <= 0:
        return 0.0
    return (end - start) / start * 100


def summarize(series: ForecastSeries) -> ForecastSummary:
    """
    Reduce a forecast series to headline metrics

    Initial income is the first earned dividend (period 1), not the period 0
    placeholder. Growth percentages are 0 when the starting figure is 0.

    Args:
        series: Forecast produced by the simulator

    Returns:
        ForecastSummary, all zeros for an empty series
    """
    if series is None or len(series) == 0:
        return ForecastSummary()

    initial_value = series[0].portfolio_value
    final_point = series[-1]
    final_value = final_point.portfolio_value

    initial_income = series[1].dividend_income if len(series) > 1 else 0.0
    final_income = final_point.dividend_income

    return ForecastSummary(
        initial_value=initial_value,
        final_value=final_value,
        total_growth=final_value - initial_value,
        total_growth_pct=_growth_pct(initial_value, final_value),
        total_dividends=final_point.cumulative_dividends,
        years=len(series) - 1,
        initial_income=initial_income,
        final_income=final_income,
        income_growth_pct=_growth_pct(initial_income, final_income),
    )
