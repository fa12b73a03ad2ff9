"""Forward simulation and summary metrics"""

from .simulator import SimulationInputs, clamp_inputs, simulate
from .summary import summarize

__all__ = [
    "SimulationInputs",
    "clamp_inputs",
    "simulate",
    "summarize",
]
