"""
Dividend Forecast - Dividend Reinvestment Forecasting Engine

Simulates multi-year portfolio growth under dividend reinvestment across
named risk scenarios, and solves for the lump sum or periodic contribution
needed to reach a target annual dividend income.
"""

__version__ = "0.1.0"
