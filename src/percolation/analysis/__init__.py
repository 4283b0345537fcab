"""Collaborators built on the percolation grid.

This package provides:
- Built-in opening scenarios
- Monte Carlo probability sweeps
- Terminal and image rendering of grids
"""

from percolation.analysis.scenarios import Scenario, ScenarioRegistry, get_scenarios
from percolation.analysis.sweep import SweepResult, estimate_threshold, run_sweep, run_trials

__all__ = [
    "Scenario",
    "ScenarioRegistry",
    "get_scenarios",
    "SweepResult",
    "run_trials",
    "run_sweep",
    "estimate_threshold",
]
