from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable

import numpy as np

from holonomic_follower.common.drive import DriveSignal
from holonomic_follower.common.kinematics import relative_odometry_update
from holonomic_follower.common.math_utils import wrap_angle
from holonomic_follower.common.pose import Pose2d

from .config import SimulatorConfig
from .states import RobotState


@dataclass(frozen=True)
class SimulationStep:
    time_s: float
    state: RobotState
    command: DriveSignal


class HolonomicSimulator:
    """Kinematic holonomic base with a first-order velocity lag.

    The acceleration feedforward of the command is used the way a wheel-level
    feedforward would use it: the lag is driven with ``vel + tau * accel`` so a
    consistent velocity/acceleration pair is tracked without delay.
    """

    def __init__(self, config: SimulatorConfig | None = None) -> None:
        self._config = config or SimulatorConfig()
        self.dt = float(self._config.dt)
        self.state = RobotState(pose=self._config.initial_pose)
        self.time_s = 0.0

    @property
    def config(self) -> SimulatorConfig:
        return self._config

    def reset(self, state: RobotState | None = None, time_s: float = 0.0) -> None:
        self.state = state if state is not None else RobotState(pose=self._config.initial_pose)
        self.time_s = float(time_s)

    def step(self, command: DriveSignal, dt: float | None = None) -> SimulationStep:
        dt = float(dt if dt is not None else self.dt)
        if dt <= 0.0:
            raise ValueError("dt must be positive")

        tau = self._config.velocity_time_constant
        desired = (command.vel.as_array() + tau * command.accel.as_array()) * self._config.velocity_scale
        desired = _limit_robot_velocity(desired, self._config)

        # First-order lag emulating the drive train response.
        alpha = 1.0 if tau <= 0.0 else dt / (tau + dt)
        robot_vel = self.state.robot_vel.as_array()
        robot_vel = robot_vel + alpha * (desired - robot_vel)

        pose = relative_odometry_update(self.state.pose, Pose2d.from_array(robot_vel * dt))
        drift = self._config.drift_field
        pose = Pose2d(
            pose.x + drift.x * dt,
            pose.y + drift.y * dt,
            wrap_angle(pose.heading + drift.heading * dt),
        )

        self.state = RobotState(pose=pose, robot_vel=Pose2d.from_array(robot_vel))
        self.time_s += dt
        return SimulationStep(time_s=self.time_s, state=self.state, command=command)

    def run(
        self,
        final_time_s: float,
        command_fn: Callable[[float, RobotState], DriveSignal],
        progress_callback: Callable[[SimulationStep], None] | None = None,
    ) -> list[SimulationStep]:
        steps = int(np.ceil((final_time_s - self.time_s) / self.dt - 1e-9))
        history: list[SimulationStep] = []
        for _ in range(max(0, steps)):
            cmd = command_fn(self.time_s, self.state)
            step = self.step(cmd, dt=self.dt)
            history.append(step)
            if progress_callback is not None:
                progress_callback(step)
        return history


def _limit_robot_velocity(vel: np.ndarray, config: SimulatorConfig) -> np.ndarray:
    limited = np.array(vel, copy=True, dtype=float)
    speed = float(np.hypot(limited[0], limited[1]))
    if speed > config.max_speed_m_s:
        limited[:2] *= config.max_speed_m_s / speed
    limited[2] = math.copysign(
        min(abs(limited[2]), config.max_turn_rate_rad_s), limited[2]
    )
    return limited
