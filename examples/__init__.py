"""Simulated trajectory-following demos for the holonomic follower."""

from holonomic_follower.common import (
    Trajectory,
    circle_trajectory,
    hold_trajectory,
    line_trajectory,
    spline_trajectory,
)
from .common import analyze_history, run_follower_example, setup_logging

__all__ = [
    "Trajectory",
    "analyze_history",
    "circle_trajectory",
    "hold_trajectory",
    "line_trajectory",
    "run_follower_example",
    "setup_logging",
    "spline_trajectory",
]
