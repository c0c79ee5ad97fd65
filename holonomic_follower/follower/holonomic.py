from __future__ import annotations

import logging
from typing import Protocol

from holonomic_follower.common.clock import Clock, SystemClock
from holonomic_follower.common.drive import DriveSignal
from holonomic_follower.common.pose import Pose2d, VelocityMeasurement
from holonomic_follower.common.trajectories import TrajectoryLike
from holonomic_follower.control.coefficients import PIDCoefficients
from holonomic_follower.control.pidf import PIDFController

from .config import FollowerConfig
from .corrector import CorrectionResult, PoseErrorCorrector
from .lifecycle import FollowerLifecycle

logger = logging.getLogger(__name__)


class TrajectoryFollower(Protocol):
    @property
    def last_error(self) -> Pose2d: ...

    def follow_trajectory(self, trajectory: TrajectoryLike) -> None: ...

    def update(
        self,
        current_pose: Pose2d,
        current_robot_vel: Pose2d | VelocityMeasurement | None = None,
    ) -> DriveSignal: ...

    def is_following(self) -> bool: ...


class HolonomicPIDVAFollower:
    """PID feedback on the robot pose with velocity/acceleration feedforward.

    Feedback from the axial, lateral and heading controllers corrects the
    feedforward velocity; the feedforward acceleration is handed on for the
    wheel-level feedforward.
    """

    def __init__(
        self,
        axial_coeffs: PIDCoefficients,
        lateral_coeffs: PIDCoefficients,
        heading_coeffs: PIDCoefficients,
        config: FollowerConfig | None = None,
        clock: Clock | None = None,
    ):
        self._clock = clock or SystemClock()
        self._lifecycle = FollowerLifecycle(config, self._clock)
        self._corrector = PoseErrorCorrector(
            PIDFController(axial_coeffs, clock=self._clock),
            PIDFController(lateral_coeffs, clock=self._clock),
            PIDFController(heading_coeffs, clock=self._clock),
        )
        self._last_error = Pose2d()
        self._last_result: CorrectionResult | None = None

    @property
    def corrector(self) -> PoseErrorCorrector:
        return self._corrector

    @property
    def config(self) -> FollowerConfig:
        return self._lifecycle.config

    @property
    def trajectory(self) -> TrajectoryLike:
        return self._lifecycle.trajectory

    @property
    def last_error(self) -> Pose2d:
        return self._last_error

    @property
    def last_result(self) -> CorrectionResult | None:
        return self._last_result

    def elapsed_time(self) -> float:
        return self._lifecycle.elapsed_time()

    def follow_trajectory(self, trajectory: TrajectoryLike) -> None:
        logger.debug("Resetting axis controllers before following a new trajectory")
        self._corrector.reset()
        self._last_error = Pose2d()
        self._last_result = None
        self._lifecycle.start(trajectory)

    def is_following(self) -> bool:
        return self._lifecycle.is_following()

    def update(
        self,
        current_pose: Pose2d,
        current_robot_vel: Pose2d | VelocityMeasurement | None = None,
    ) -> DriveSignal:
        self._lifecycle.check_admissible(current_pose)
        if not self._lifecycle.is_following():
            self._lifecycle.finish()
            return DriveSignal()

        result = self._corrector.correct(
            self._lifecycle.trajectory,
            self._lifecycle.elapsed_time(),
            current_pose,
            current_robot_vel,
        )
        self._last_error = result.pose_error
        self._last_result = result
        return result.signal
