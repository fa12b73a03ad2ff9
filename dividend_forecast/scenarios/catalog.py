"""
Named risk profiles for dividend forecasts.

Each profile fixes the dividend growth and market growth assumptions. The
dividend yield is always supplied by the caller; only the custom profile
accepts caller-supplied growth rates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..config.defaults import DefaultConfig, ScenarioPresets, ScenarioRateParams
from ..errors import UnknownScenarioError
from ..models.forecast import ScenarioParameters
from ..utils.numeric import is_usable_positive


class ScenarioKey(str, Enum):
    """Catalog keys."""
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ScenarioProfile:
    """One catalog row."""
    key: ScenarioKey
    label: str
    description: str
    dividend_growth_rate_pct: float
    market_growth_rate_pct: float
    target_yield_pct: float

    def parameters(self, dividend_yield_pct: float) -> ScenarioParameters:
        return ScenarioParameters(
            dividend_yield_pct=dividend_yield_pct,
            dividend_growth_rate_pct=self.dividend_growth_rate_pct,
            market_growth_rate_pct=self.market_growth_rate_pct,
        )


_DESCRIPTIONS = {
    ScenarioKey.CONSERVATIVE: "Lower yield, stable companies, lower risk",
    ScenarioKey.MODERATE: "Balanced yield and growth potential",
    ScenarioKey.AGGRESSIVE: "Higher yield, potentially higher risk",
    ScenarioKey.CUSTOM: "Custom growth rates",
}


def _profile(key: ScenarioKey, rates: ScenarioRateParams) -> ScenarioProfile:
    return ScenarioProfile(
        key=key,
        label=key.value.capitalize(),
        description=_DESCRIPTIONS[key],
        dividend_growth_rate_pct=rates.dividend_growth_rate_pct,
        market_growth_rate_pct=rates.market_growth_rate_pct,
        target_yield_pct=rates.target_yield_pct,
    )


def _coerce_key(key: Union[str, ScenarioKey]) -> ScenarioKey:
    try:
        return ScenarioKey(key)
    except ValueError:
        raise UnknownScenarioError(
            f"Unknown scenario: {key!r}",
            scenario=str(key),
            available=[k.value for k in ScenarioKey],
        ) from None


class ScenarioCatalog:
    """Static table of risk profiles, keyed by ScenarioKey."""

    def __init__(self, presets: Optional[ScenarioPresets] = None):
        presets = presets or ScenarioPresets()
        self._profiles = {
            key: _profile(key, getattr(presets, key.value)) for key in ScenarioKey
        }

    @classmethod
    def from_config(cls, config: DefaultConfig) -> "ScenarioCatalog":
        return cls(config.scenarios)

    def keys(self) -> list[str]:
        return [key.value for key in self._profiles]

    def profiles(self) -> list[ScenarioProfile]:
        return list(self._profiles.values())

    def get(self, key: Union[str, ScenarioKey]) -> ScenarioProfile:
        """Look up a profile, raising UnknownScenarioError for bad keys."""
        return self._profiles[_coerce_key(key)]

    def resolve(
        self,
        key: Union[str, ScenarioKey],
        dividend_yield_pct: float,
        dividend_growth_rate_pct: Optional[float] = None,
        market_growth_rate_pct: Optional[float] = None,
    ) -> ScenarioParameters:
        """
        Build simulation parameters for a profile.

        Growth overrides apply to the custom profile only and fall back to
        its defaults when unusable. Preset profiles ignore them.
        """
        profile = self.get(key)
        parameters = profile.parameters(dividend_yield_pct)

        if profile.key is not ScenarioKey.CUSTOM:
            return parameters

        return ScenarioParameters(
            dividend_yield_pct=dividend_yield_pct,
            dividend_growth_rate_pct=(
                dividend_growth_rate_pct if is_usable_positive(dividend_growth_rate_pct)
                else parameters.dividend_growth_rate_pct
            ),
            market_growth_rate_pct=(
                market_growth_rate_pct if is_usable_positive(market_growth_rate_pct)
                else parameters.market_growth_rate_pct
            ),
        )


DEFAULT_CATALOG = ScenarioCatalog()


def get_scenario(key: Union[str, ScenarioKey]) -> ScenarioProfile:
    """Profile from the built-in catalog."""
    return DEFAULT_CATALOG.get(key)


def resolve_parameters(
    key: Union[str, ScenarioKey],
    dividend_yield_pct: float,
    dividend_growth_rate_pct: Optional[float] = None,
    market_growth_rate_pct: Optional[float] = None,
) -> ScenarioParameters:
    """Simulation parameters from the built-in catalog."""
    return DEFAULT_CATALOG.resolve(
        key, dividend_yield_pct, dividend_growth_rate_pct, market_growth_rate_pct
    )


def list_scenarios() -> list[ScenarioProfile]:
    return DEFAULT_CATALOG.profiles()
