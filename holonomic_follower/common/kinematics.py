"""Frame conversions between the field frame and the robot frame."""

import math

from .math_utils import epsilon_equals, rotate_vector, wrap_angle
from .pose import Pose2d


def field_to_robot_velocity(field_pose: Pose2d, field_vel: Pose2d) -> Pose2d:
    return Pose2d.from_vec(
        rotate_vector(field_vel.vec(), -field_pose.heading), field_vel.heading
    )


def robot_to_field_velocity(field_pose: Pose2d, robot_vel: Pose2d) -> Pose2d:
    return Pose2d.from_vec(
        rotate_vector(robot_vel.vec(), field_pose.heading), robot_vel.heading
    )


def field_to_robot_acceleration(
    field_pose: Pose2d, field_vel: Pose2d, field_accel: Pose2d
) -> Pose2d:
    """Robot-frame acceleration, including the term from the rotating frame."""

    heading = field_pose.heading
    omega = field_vel.heading
    ax, ay = rotate_vector(field_accel.vec(), -heading)
    sin_h = math.sin(heading)
    cos_h = math.cos(heading)
    # Built from floats so a large angular acceleration is not wrapped.
    return Pose2d(
        ax + (-field_vel.x * sin_h + field_vel.y * cos_h) * omega,
        ay + (-field_vel.x * cos_h - field_vel.y * sin_h) * omega,
        field_accel.heading,
    )


def calculate_pose_error(target_field_pose: Pose2d, current_field_pose: Pose2d) -> Pose2d:
    """Pose error expressed in the robot frame of ``current_field_pose``."""

    delta = target_field_pose.vec() - current_field_pose.vec()
    return Pose2d.from_vec(
        rotate_vector(delta, -current_field_pose.heading),
        wrap_angle(target_field_pose.heading - current_field_pose.heading),
    )


def relative_odometry_update(field_pose: Pose2d, robot_pose_delta: Pose2d) -> Pose2d:
    """Apply a robot-frame pose delta using the SE(2) exponential map."""

    dtheta = robot_pose_delta.heading
    if epsilon_equals(dtheta, 0.0):
        sine_term = 1.0 - dtheta * dtheta / 6.0
        cosine_term = dtheta / 2.0
    else:
        sine_term = math.sin(dtheta) / dtheta
        cosine_term = (1.0 - math.cos(dtheta)) / dtheta

    dx = sine_term * robot_pose_delta.x - cosine_term * robot_pose_delta.y
    dy = cosine_term * robot_pose_delta.x + sine_term * robot_pose_delta.y
    field_dx, field_dy = rotate_vector((dx, dy), field_pose.heading)
    return Pose2d(
        field_pose.x + field_dx,
        field_pose.y + field_dy,
        wrap_angle(field_pose.heading + dtheta),
    )
