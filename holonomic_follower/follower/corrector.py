"""Per-tick pose error correction for holonomic trajectory following."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from holonomic_follower.common.drive import DriveSignal
from holonomic_follower.common.kinematics import (
    calculate_pose_error,
    field_to_robot_acceleration,
    field_to_robot_velocity,
)
from holonomic_follower.common.pose import Pose2d, VelocityMeasurement
from holonomic_follower.common.trajectories import TrajectoryLike
from holonomic_follower.control.pidf import PIDFController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorrectionResult:
    signal: DriveSignal
    pose_error: Pose2d
    correction: Pose2d
    target_pose: Pose2d
    target_robot_vel: Pose2d
    elapsed_s: float


class PoseErrorCorrector:
    """Turn a trajectory sample and a measured pose into a robot-frame command.

    Each axis controller is driven with the robot-frame pose error as its
    setpoint and a measurement of zero, so the controllers never need to know
    the current pose. Only the velocity is corrected; the feedforward
    acceleration passes through untouched.
    """

    def __init__(
        self,
        axial_controller: PIDFController,
        lateral_controller: PIDFController,
        heading_controller: PIDFController,
    ):
        self.axial_controller = axial_controller
        self.lateral_controller = lateral_controller
        self.heading_controller = heading_controller
        self.heading_controller.set_input_bounds(-math.pi, math.pi)

    def reset(self) -> None:
        self.axial_controller.reset()
        self.lateral_controller.reset()
        self.heading_controller.reset()
        self.heading_controller.set_input_bounds(-math.pi, math.pi)

    def correct(
        self,
        trajectory: TrajectoryLike,
        elapsed_s: float,
        current_pose: Pose2d,
        current_robot_vel: Pose2d | VelocityMeasurement | None = None,
    ) -> CorrectionResult:
        target_pose = trajectory.pose(elapsed_s)
        target_vel = trajectory.velocity(elapsed_s)
        target_accel = trajectory.acceleration(elapsed_s)

        target_robot_vel = field_to_robot_velocity(target_pose, target_vel)
        target_robot_accel = field_to_robot_acceleration(
            target_pose, target_vel, target_accel
        )

        pose_error = calculate_pose_error(target_pose, current_pose)

        self.axial_controller.target_position = pose_error.x
        self.lateral_controller.target_position = pose_error.y
        self.heading_controller.target_position = pose_error.heading

        self.axial_controller.target_velocity = target_robot_vel.x
        self.lateral_controller.target_velocity = target_robot_vel.y
        self.heading_controller.target_velocity = target_robot_vel.heading

        measured = current_robot_vel
        if measured is None:
            measured = VelocityMeasurement()

        axial_correction = self.axial_controller.update(0.0, measured.x)
        lateral_correction = self.lateral_controller.update(0.0, measured.y)
        heading_correction = self.heading_controller.update(0.0, measured.heading)

        correction = Pose2d(axial_correction, lateral_correction, heading_correction)
        corrected_velocity = target_robot_vel + correction

        logger.debug(
            "t=%.3f pose error %s correction %s", elapsed_s, pose_error, correction
        )

        return CorrectionResult(
            signal=DriveSignal(corrected_velocity, target_robot_accel),
            pose_error=pose_error,
            correction=correction,
            target_pose=target_pose,
            target_robot_vel=target_robot_vel,
            elapsed_s=float(elapsed_s),
        )
