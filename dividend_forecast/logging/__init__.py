"""
Logging configuration and utilities for the dividend forecasting engine.
"""
from .config import configure_logging, get_logger, get_solver_logger

__all__ = ["configure_logging", "get_logger", "get_solver_logger"]
