"""
Configuration module.

Frozen default parameters, YAML overrides and validation.
"""

from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader, load_config
from .validation import ConfigValidator, ValidationError, validate_plan_request

__all__ = [
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "load_config",
    "ConfigValidator",
    "ValidationError",
    "validate_plan_request",
]
