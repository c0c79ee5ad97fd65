"""Trajectory followers that turn a reference and a measured pose into drive commands."""

from .config import FollowerConfig
from .corrector import CorrectionResult, PoseErrorCorrector
from .holonomic import HolonomicPIDVAFollower, TrajectoryFollower
from .lifecycle import FollowerError, FollowerException, FollowerLifecycle

__all__ = [
    "CorrectionResult",
    "FollowerConfig",
    "FollowerError",
    "FollowerException",
    "FollowerLifecycle",
    "HolonomicPIDVAFollower",
    "PoseErrorCorrector",
    "TrajectoryFollower",
]
