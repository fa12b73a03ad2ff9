"""
Utility functions module.

Numeric guards used across the forecasting engine.
"""
