"""Reverse solving of income targets and gap analysis"""

from .compounding import PlanTrajectory, annuity_payment, simulate_contribution_plan
from .gap import analyze, analyze_snapshot
from .solver import solve, target_portfolio_value

__all__ = [
    "PlanTrajectory",
    "annuity_payment",
    "simulate_contribution_plan",
    "analyze",
    "analyze_snapshot",
    "solve",
    "target_portfolio_value",
]
