"""Tests for field/robot frame conversions and pose error."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from holonomic_follower.common import (
    Pose2d,
    calculate_pose_error,
    circle_trajectory,
    field_to_robot_acceleration,
    field_to_robot_velocity,
    relative_odometry_update,
    robot_to_field_velocity,
)


def test_field_to_robot_velocity_rotates_translation_only() -> None:
    robot_vel = field_to_robot_velocity(Pose2d(3.0, -1.0, math.pi / 2.0), Pose2d(1.0, 0.0, 0.3))
    assert np.allclose(robot_vel.as_array(), [0.0, -1.0, 0.3], atol=1e-12)


def test_robot_to_field_velocity_inverts_transform() -> None:
    pose = Pose2d(0.0, 0.0, 0.7)
    field_vel = Pose2d(0.4, -1.2, -0.5)
    round_trip = robot_to_field_velocity(pose, field_to_robot_velocity(pose, field_vel))
    assert np.allclose(round_trip.as_array(), field_vel.as_array(), atol=1e-12)


def test_pose_error_is_in_robot_frame() -> None:
    error = calculate_pose_error(Pose2d(1.0, 1.0, 0.0), Pose2d(0.0, 0.0, math.pi / 2.0))
    assert np.allclose(error.as_array(), [1.0, -1.0, -math.pi / 2.0], atol=1e-12)


def test_pose_error_takes_short_way_across_pi() -> None:
    error = calculate_pose_error(
        Pose2d(0.0, 0.0, math.pi - 0.1), Pose2d(0.0, 0.0, -math.pi + 0.1)
    )
    assert error.heading == pytest.approx(-0.2)


@pytest.mark.parametrize(
    ("target_heading", "current_heading"),
    [(0.3, -2.9), (3.1, -3.1), (-1.0, 2.5), (0.0, math.pi)],
)
def test_pose_error_invariant_under_full_turns(target_heading: float, current_heading: float) -> None:
    target = Pose2d(1.0, -0.5, target_heading)
    current = Pose2d(-0.2, 0.4, current_heading)
    base = calculate_pose_error(target, current)

    for shifted_target, shifted_current in (
        (Pose2d(target.x, target.y, target_heading + 2.0 * math.pi), current),
        (target, Pose2d(current.x, current.y, current_heading + 2.0 * math.pi)),
    ):
        shifted = calculate_pose_error(shifted_target, shifted_current)
        assert np.allclose(shifted.vec(), base.vec(), atol=1e-9)
        # +pi and -pi are the same heading error.
        assert math.remainder(shifted.heading - base.heading, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-9)
        assert -math.pi < shifted.heading <= math.pi


def test_robot_frame_acceleration_on_tangent_circle_is_zero() -> None:
    # Facing along the direction of travel, the robot-frame velocity is constant.
    trajectory = circle_trajectory(radius_m=2.0, period_s=8.0, heading_mode="tangent")
    for time_s in (0.0, 1.3, 5.9):
        accel = field_to_robot_acceleration(
            trajectory.pose(time_s),
            trajectory.velocity(time_s),
            trajectory.acceleration(time_s),
        )
        assert np.allclose(accel.as_array(), np.zeros(3), atol=1e-9)


def test_robot_frame_acceleration_without_rotation() -> None:
    accel = field_to_robot_acceleration(
        Pose2d(0.0, 0.0, math.pi / 2.0),
        Pose2d(1.0, 0.0, 0.0),
        Pose2d(0.0, 2.0, 0.5),
    )
    assert np.allclose(accel.as_array(), [2.0, 0.0, 0.5], atol=1e-12)


def test_relative_odometry_straight_line() -> None:
    pose = relative_odometry_update(Pose2d(0.0, 0.0, math.pi / 2.0), Pose2d(1.0, 0.0, 0.0))
    assert np.allclose(pose.as_array(), [0.0, 1.0, math.pi / 2.0], atol=1e-12)


def test_relative_odometry_quarter_arc() -> None:
    pose = relative_odometry_update(Pose2d(), Pose2d(math.pi / 2.0, 0.0, math.pi / 2.0))
    assert np.allclose(pose.as_array(), [1.0, 1.0, math.pi / 2.0], atol=1e-12)
