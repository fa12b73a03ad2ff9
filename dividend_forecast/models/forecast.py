"""
Forecast data models.

Immutable value types produced by the forward simulator and consumed by the
summary aggregator and the UI layer.
"""

from dataclasses import asdict, dataclass
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class ScenarioParameters:
    """Yield and growth assumptions for a single simulation run."""
    dividend_yield_pct: float
    dividend_growth_rate_pct: float
    market_growth_rate_pct: float


@dataclass(frozen=True)
class ForecastPoint:
    """Portfolio state at the end of one period. Period 0 is the seed."""
    period: int
    portfolio_value: float
    dividend_income: float = 0.0
    cumulative_dividends: float = 0.0
    reinvested_amount: float = 0.0

    @property
    def year(self) -> int:
        return self.period


@dataclass(frozen=True)
class ForecastSeries:
    """Ordered forecast points for one scenario, length horizon + 1."""
    points: tuple[ForecastPoint, ...]
    parameters: Optional[ScenarioParameters] = None
    initial_investment: Optional[float] = None
    scenario: Optional[str] = None

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ForecastPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> ForecastPoint:
        return self.points[index]

    @property
    def horizon_years(self) -> int:
        return max(len(self.points) - 1, 0)

    @property
    def initial(self) -> Optional[ForecastPoint]:
        return self.points[0] if self.points else None

    @property
    def final(self) -> Optional[ForecastPoint]:
        return self.points[-1] if self.points else None

    def portfolio_values(self) -> list[float]:
        return [point.portfolio_value for point in self.points]

    def dividend_incomes(self) -> list[float]:
        return [point.dividend_income for point in self.points]

    def to_records(self) -> list[dict[str, Any]]:
        """Plain dictionaries for charting and serialization."""
        return [asdict(point) for point in self.points]


@dataclass(frozen=True)
class ForecastSummary:
    """Headline metrics reduced from a forecast series."""
    initial_value: float = 0.0
    final_value: float = 0.0
    total_growth: float = 0.0
    total_growth_pct: float = 0.0
    total_dividends: float = 0.0
    years: int = 0
    initial_income: float = 0.0
    final_income: float = 0.0
    income_growth_pct: float = 0.0
