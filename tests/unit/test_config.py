"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from dividend_forecast.config.defaults import get_default_config
from dividend_forecast.config.loader import ConfigLoader, load_config
from dividend_forecast.config.validation import ConfigValidator, validate_plan_request
from dividend_forecast.errors import ConfigurationError
from dividend_forecast.models.plan import InvestmentPlanRequest


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.simulation.initial_investment == 10000.0
        assert config.simulation.dividend_yield_pct == 3.5
        assert config.simulation.horizon_years == 10
        assert config.solver.unit_seed == 10000.0
        assert config.scenarios.moderate.market_growth_rate_pct == 7.0

    def test_default_config_is_frozen(self) -> None:
        config = get_default_config()
        with pytest.raises(AttributeError):
            config.solver.unit_seed = 1.0  # type: ignore[misc]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_path.name == "forecast.yaml"

    def test_merge_config_defaults_only(self, config_dir) -> None:
        config = ConfigLoader.create(config_dir).merge_config()
        assert config["simulation"]["dividend_yield_pct"] == 3.5
        assert config["scenarios"]["aggressive"]["dividend_growth_rate_pct"] == 7.0

    def test_merge_config_with_overrides(self, config_dir) -> None:
        overrides = {"simulation": {"horizon_years": 20}}
        config = ConfigLoader.create(config_dir).merge_config(overrides)

        assert config["simulation"]["horizon_years"] == 20
        # Other defaults should remain
        assert config["simulation"]["initial_investment"] == 10000.0

    def test_file_overrides_defaults(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text(
            "scenarios:\n"
            "  moderate:\n"
            "    market_growth_rate_pct: 6.5\n"
        )
        config = load_config(config_dir)
        assert config.scenarios.moderate.market_growth_rate_pct == 6.5
        assert config.scenarios.moderate.dividend_growth_rate_pct == 5.0

    def test_call_overrides_beat_file(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text("solver:\n  max_horizon_years: 50\n")
        config = load_config(config_dir, {"solver": {"max_horizon_years": 60}})
        assert config.solver.max_horizon_years == 60

    def test_empty_file(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text("")
        assert load_config(config_dir) == get_default_config()

    def test_shipped_file_matches_defaults(self) -> None:
        config = ConfigLoader.create().load_config()
        assert config.scenarios == get_default_config().scenarios

    def test_invalid_value_rejected(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text("simulation:\n  dividend_yield_pct: -1\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_dir)

        assert exc_info.value.errors[0].field == "dividend_yield_pct"
        assert exc_info.value.recoverable is False

    def test_unknown_field_rejected(self, config_dir) -> None:
        with pytest.raises(ConfigurationError):
            load_config(config_dir, {"solver": {"tolerance": 0.1}})

    def test_unknown_scenario_rejected(self, config_dir) -> None:
        with pytest.raises(ConfigurationError):
            load_config(config_dir, {"scenarios": {"reckless": {
                "dividend_growth_rate_pct": 1.0,
                "market_growth_rate_pct": 1.0,
                "target_yield_pct": 1.0,
            }}})

    def test_zero_scenario_growth_fails_load(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text(
            "scenarios:\n  conservative:\n    market_growth_rate_pct: 0.0\n"
        )
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_dir)

        assert exc_info.value.errors[0].field == "scenarios.conservative.market_growth_rate_pct"

    def test_malformed_yaml(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text("simulation: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_config(config_dir)

    def test_non_mapping_root(self, config_dir) -> None:
        (config_dir / "forecast.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            load_config(config_dir)


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_simulation_params(self) -> None:
        params = {"initial_investment": 5000, "horizon_years": 5}
        assert ConfigValidator.validate_simulation_params(params) == []

    def test_invalid_horizon(self) -> None:
        errors = ConfigValidator.validate_simulation_params({"horizon_years": 2.5})
        assert len(errors) == 1
        assert errors[0].field == "horizon_years"

    def test_boolean_is_not_a_number(self) -> None:
        errors = ConfigValidator.validate_solver_params({"unit_seed": True})
        assert errors[0].field == "unit_seed"

    @pytest.mark.parametrize("field", ["dividend_growth_rate_pct", "market_growth_rate_pct"])
    def test_zero_scenario_growth_rejected(self, field) -> None:
        errors = ConfigValidator.validate_scenario_params("custom", {field: 0})
        assert len(errors) == 1
        assert errors[0].field == f"scenarios.custom.{field}"

    def test_zero_target_yield_allowed(self) -> None:
        assert ConfigValidator.validate_scenario_params("custom", {"target_yield_pct": 0}) == []

    def test_negative_scenario_rate(self) -> None:
        errors = ConfigValidator.validate_scenario_params("moderate", {"target_yield_pct": -1})
        assert errors[0].field == "scenarios.moderate.target_yield_pct"

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"solver": "fast"})
        assert errors[0].field == "solver"


class TestValidatePlanRequest:

    def test_valid_request(self, sample_request) -> None:
        assert validate_plan_request(sample_request) == []

    def test_zero_yield_passes_validation(self) -> None:
        request = InvestmentPlanRequest(target_annual_income=100, horizon_years=5, yield_pct=0)
        assert validate_plan_request(request) == []

    def test_error_message(self) -> None:
        request = InvestmentPlanRequest(target_annual_income=-1, horizon_years=5, yield_pct=3)
        errors = validate_plan_request(request)
        assert str(errors[0]) == "target_annual_income: Must be a positive number (got: -1)"
