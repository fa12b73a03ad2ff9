"""Tests for the scenario catalog"""

import pytest

from dividend_forecast.config.defaults import ScenarioPresets, ScenarioRateParams
from dividend_forecast.errors import UnknownScenarioError
from dividend_forecast.models.forecast import ScenarioParameters
from dividend_forecast.scenarios.catalog import (
    ScenarioCatalog,
    ScenarioKey,
    get_scenario,
    list_scenarios,
    resolve_parameters,
)


class TestBuiltInProfiles:

    @pytest.mark.parametrize("key,dividend_growth,market_growth,target_yield", [
        ("conservative", 3.0, 5.0, 3.0),
        ("moderate", 5.0, 7.0, 4.5),
        ("aggressive", 7.0, 9.0, 6.0),
        ("custom", 5.0, 7.0, 4.0),
    ])
    def test_profile_rates(self, key, dividend_growth, market_growth, target_yield):
        profile = get_scenario(key)
        assert profile.key == ScenarioKey(key)
        assert profile.dividend_growth_rate_pct == dividend_growth
        assert profile.market_growth_rate_pct == market_growth
        assert profile.target_yield_pct == target_yield

    def test_lookup_by_enum(self):
        assert get_scenario(ScenarioKey.AGGRESSIVE).label == "Aggressive"

    def test_list_order(self):
        assert [p.key.value for p in list_scenarios()] == [
            "conservative", "moderate", "aggressive", "custom"
        ]

    def test_unknown_key(self):
        with pytest.raises(UnknownScenarioError) as exc_info:
            get_scenario("reckless")

        assert exc_info.value.scenario == "reckless"
        assert "moderate" in exc_info.value.available
        assert exc_info.value.recoverable is True


class TestResolveParameters:

    def test_preset_uses_caller_yield(self):
        assert resolve_parameters("moderate", 3.5) == ScenarioParameters(3.5, 5.0, 7.0)

    def test_preset_ignores_growth_overrides(self):
        assert resolve_parameters("conservative", 2.0, 10.0, 10.0) == ScenarioParameters(2.0, 3.0, 5.0)

    def test_custom_takes_overrides(self):
        assert resolve_parameters("custom", 4.0, 6.0, 8.0) == ScenarioParameters(4.0, 6.0, 8.0)

    def test_custom_falls_back_without_overrides(self):
        assert resolve_parameters("custom", 4.0) == ScenarioParameters(4.0, 5.0, 7.0)

    @pytest.mark.parametrize("bad", [0, -2, None])
    def test_custom_unusable_override_falls_back(self, bad):
        params = resolve_parameters("custom", 4.0, bad, 9.0)
        assert params.dividend_growth_rate_pct == 5.0
        assert params.market_growth_rate_pct == 9.0


class TestConfiguredCatalog:

    def test_presets_replace_rates(self):
        presets = ScenarioPresets(moderate=ScenarioRateParams(4.0, 6.0, 5.0))
        catalog = ScenarioCatalog(presets)

        assert catalog.resolve("moderate", 3.0) == ScenarioParameters(3.0, 4.0, 6.0)
        assert catalog.get("moderate").target_yield_pct == 5.0
        # Other profiles keep their built-in values
        assert catalog.get("aggressive").market_growth_rate_pct == 9.0

    def test_keys(self):
        assert ScenarioCatalog().keys() == ["conservative", "moderate", "aggressive", "custom"]
