"""Configuration and request validation utilities."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.plan import InvestmentPlanRequest


@dataclass(frozen=True)
class ValidationError:
    """Represents a single field validation error."""
    field: str
    message: str
    value: Any

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (got: {self.value})"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_simulation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate simulation fallbacks. All must be strictly positive."""
        errors = []

        for field in ("initial_investment", "dividend_yield_pct",
                      "dividend_growth_rate_pct", "market_growth_rate_pct"):
            if field in params:
                value = params[field]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a positive number",
                        value=value
                    ))

        if "horizon_years" in params:
            value = params["horizon_years"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="horizon_years",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_solver_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate reverse solver parameters."""
        errors = []

        if "unit_seed" in params:
            value = params["unit_seed"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="unit_seed",
                    message="Must be a positive number",
                    value=value
                ))

        for field in ("months_per_year", "max_horizon_years"):
            if field in params:
                value = params[field]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_scenario_params(key: str, params: Any) -> list[ValidationError]:
        """Validate one risk profile's rates."""
        if not isinstance(params, dict):
            return [ValidationError(
                field=f"scenarios.{key}",
                message="Must be a mapping of rates",
                value=params
            )]

        errors = []
        # The simulator treats a zero growth rate as missing
        for field in ("dividend_growth_rate_pct", "market_growth_rate_pct"):
            if field in params:
                value = params[field]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"scenarios.{key}.{field}",
                        message="Must be a positive number",
                        value=value
                    ))

        if "target_yield_pct" in params:
            value = params["target_yield_pct"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field=f"scenarios.{key}.target_yield_pct",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("simulation", "solver"):
            if section in config and not isinstance(config[section], dict):
                return [ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                )]

        if "simulation" in config:
            errors.extend(ConfigValidator.validate_simulation_params(config["simulation"]))

        if "solver" in config:
            errors.extend(ConfigValidator.validate_solver_params(config["solver"]))

        scenarios = config.get("scenarios", {})
        if not isinstance(scenarios, dict):
            errors.append(ValidationError(
                field="scenarios",
                message="Must be a mapping of scenario keys",
                value=scenarios
            ))
        else:
            for key, params in scenarios.items():
                errors.extend(ConfigValidator.validate_scenario_params(key, params))

        return errors


def validate_plan_request(request: "InvestmentPlanRequest",
                          max_horizon_years: int = 100) -> list[ValidationError]:
    """Check a solver request against the solver's preconditions."""
    errors = []

    if not _is_number(request.target_annual_income) or request.target_annual_income <= 0:
        errors.append(ValidationError(
            field="target_annual_income",
            message="Must be a positive number",
            value=request.target_annual_income
        ))

    horizon = request.horizon_years
    if not isinstance(horizon, int) or isinstance(horizon, bool) or horizon <= 0:
        errors.append(ValidationError(
            field="horizon_years",
            message="Must be a positive integer",
            value=horizon
        ))
    elif horizon > max_horizon_years:
        errors.append(ValidationError(
            field="horizon_years",
            message=f"Must not exceed {max_horizon_years}",
            value=horizon
        ))

    if not _is_number(request.yield_pct) or request.yield_pct < 0:
        errors.append(ValidationError(
            field="yield_pct",
            message="Must be a non-negative number",
            value=request.yield_pct
        ))

    return errors
