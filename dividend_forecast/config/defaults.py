"""Default configuration parameters for the forecasting engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationDefaults:
    """Fallbacks substituted for missing, zero or negative simulation inputs."""
    initial_investment: float = 10000.0
    dividend_yield_pct: float = 3.5
    horizon_years: int = 10
    dividend_growth_rate_pct: float = 5.0
    market_growth_rate_pct: float = 7.0


@dataclass(frozen=True)
class SolverParams:
    """Reverse solver parameters."""
    unit_seed: float = 10000.0          # Seed for the scale-linear lump sum solve
    months_per_year: int = 12
    max_horizon_years: int = 100


@dataclass(frozen=True)
class ScenarioRateParams:
    """Growth assumptions for one risk profile."""
    dividend_growth_rate_pct: float
    market_growth_rate_pct: float
    target_yield_pct: float             # Income calculator default yield


@dataclass(frozen=True)
class ScenarioPresets:
    """Built-in risk profiles."""
    conservative: ScenarioRateParams = ScenarioRateParams(3.0, 5.0, 3.0)
    moderate: ScenarioRateParams = ScenarioRateParams(5.0, 7.0, 4.5)
    aggressive: ScenarioRateParams = ScenarioRateParams(7.0, 9.0, 6.0)
    custom: ScenarioRateParams = ScenarioRateParams(5.0, 7.0, 4.0)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    simulation: SimulationDefaults
    solver: SolverParams
    scenarios: ScenarioPresets


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        simulation=SimulationDefaults(),
        solver=SolverParams(),
        scenarios=ScenarioPresets(),
    )
