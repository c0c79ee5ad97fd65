from __future__ import annotations

import logging
from enum import Enum

from holonomic_follower.common.clock import Clock, SystemClock
from holonomic_follower.common.kinematics import calculate_pose_error
from holonomic_follower.common.pose import Pose2d
from holonomic_follower.common.trajectories import TrajectoryLike

from .config import FollowerConfig

logger = logging.getLogger(__name__)


class FollowerError(Enum):
    NO_TRAJECTORY = "no_trajectory"


class FollowerException(RuntimeError):
    def __init__(self, error: FollowerError, message: str):
        super().__init__(message)
        self.error = error


class FollowerLifecycle:
    """Run timing and termination for one trajectory at a time.

    A run keeps going while trajectory time remains, or, once the trajectory
    has ended, until the pose error against the end pose is admissible or the
    timeout expires. After that the follower is allowed exactly one final
    update, which it uses to emit a stop command.
    """

    def __init__(self, config: FollowerConfig | None = None, clock: Clock | None = None):
        self._config = config or FollowerConfig()
        self._clock = clock or SystemClock()
        self._trajectory: TrajectoryLike | None = None
        self._start_s = 0.0
        self._admissible = False
        self._executed_final_update = False

    @property
    def config(self) -> FollowerConfig:
        return self._config

    @property
    def trajectory(self) -> TrajectoryLike:
        if self._trajectory is None:
            raise FollowerException(
                FollowerError.NO_TRAJECTORY, "No trajectory is being followed."
            )
        return self._trajectory

    @property
    def admissible(self) -> bool:
        return self._admissible

    def start(self, trajectory: TrajectoryLike) -> None:
        self._start_s = self._clock.seconds()
        self._trajectory = trajectory
        self._admissible = False
        self._executed_final_update = False
        logger.debug(
            "Started trajectory (%.3f s) at t=%.3f", trajectory.duration_s, self._start_s
        )

    def elapsed_time(self) -> float:
        return self._clock.seconds() - self._start_s

    def check_admissible(self, current_pose: Pose2d) -> bool:
        tolerance = self._config.admissible_error
        error = calculate_pose_error(self.trajectory.end(), current_pose)
        self._admissible = (
            abs(error.x) < tolerance.x
            and abs(error.y) < tolerance.y
            and abs(error.heading) < tolerance.heading
        )
        return self._admissible

    def is_following(self) -> bool:
        time_remaining = self.trajectory.duration_s - self.elapsed_time()
        return not self._executed_final_update and (
            time_remaining > 0.0
            or (not self._admissible and time_remaining > -self._config.timeout_s)
        )

    def finish(self) -> None:
        if not self._executed_final_update:
            logger.info(
                "Trajectory run finished after %.3f s (admissible=%s)",
                self.elapsed_time(),
                self._admissible,
            )
        self._executed_final_update = True
