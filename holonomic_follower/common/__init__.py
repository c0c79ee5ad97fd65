"""Shared geometry, kinematics, timing and trajectory primitives."""

from .clock import Clock, ManualClock, SystemClock
from .drive import DriveSignal
from .kinematics import (
    calculate_pose_error,
    field_to_robot_acceleration,
    field_to_robot_velocity,
    relative_odometry_update,
    robot_to_field_velocity,
)
from .math_utils import rotate_vector, wrap_angle
from .pose import Pose2d, VelocityMeasurement
from .trajectories import (
    Trajectory,
    TrajectoryLike,
    circle_trajectory,
    hold_trajectory,
    line_trajectory,
    spline_trajectory,
)

__all__ = [
    "Clock",
    "DriveSignal",
    "ManualClock",
    "Pose2d",
    "SystemClock",
    "Trajectory",
    "TrajectoryLike",
    "VelocityMeasurement",
    "calculate_pose_error",
    "circle_trajectory",
    "field_to_robot_acceleration",
    "field_to_robot_velocity",
    "hold_trajectory",
    "line_trajectory",
    "relative_odometry_update",
    "robot_to_field_velocity",
    "rotate_vector",
    "spline_trajectory",
    "wrap_angle",
]
