"""Scenario catalog and multi-scenario runner"""

from .catalog import (
    DEFAULT_CATALOG,
    ScenarioCatalog,
    ScenarioKey,
    ScenarioProfile,
    get_scenario,
    list_scenarios,
    resolve_parameters,
)
from .runner import run_all, run_scenario

__all__ = [
    "DEFAULT_CATALOG",
    "ScenarioCatalog",
    "ScenarioKey",
    "ScenarioProfile",
    "get_scenario",
    "list_scenarios",
    "resolve_parameters",
    "run_all",
    "run_scenario",
]
