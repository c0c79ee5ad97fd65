"""Closed-loop trajectory following for holonomic mobile robots."""

__version__ = "0.1.0"

from .common import DriveSignal, Pose2d, Trajectory, VelocityMeasurement
from .control import PIDCoefficients, PIDFController
from .follower import FollowerConfig, HolonomicPIDVAFollower, PoseErrorCorrector

__all__ = [
    "DriveSignal",
    "FollowerConfig",
    "HolonomicPIDVAFollower",
    "PIDCoefficients",
    "PIDFController",
    "Pose2d",
    "PoseErrorCorrector",
    "Trajectory",
    "VelocityMeasurement",
]
