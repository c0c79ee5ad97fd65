from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Iterable

import numpy as np

from holonomic_follower.common import DriveSignal, ManualClock, Pose2d, Trajectory
from holonomic_follower.control import PIDCoefficients
from holonomic_follower.follower import FollowerConfig, HolonomicPIDVAFollower
from holonomic_follower.sim import (
    HolonomicSimulator,
    RobotState,
    SimulationStep,
    SimulatorConfig,
    TelemetryLogger,
)

DEFAULT_TRANSLATIONAL_COEFFS = PIDCoefficients(kp=4.0, ki=0.5, kd=0.0)
DEFAULT_HEADING_COEFFS = PIDCoefficients(kp=4.0, ki=0.2, kd=0.0)
DEFAULT_ADMISSIBLE_ERROR = Pose2d(0.05, 0.05, math.radians(2.0))


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser(description: str, default_log: Path) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=default_log,
        help=f"Telemetry CSV path (default: {default_log})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every control tick."
    )
    return parser


def analyze_history(history: Iterable[SimulationStep], trajectory: Trajectory) -> None:
    history = list(history)
    if not history:
        print("No simulation history recorded.")
        return

    position_errors: list[float] = []
    heading_errors: list[float] = []
    for step in history:
        ref = trajectory.pose(step.time_s)
        pose = step.state.pose
        position_errors.append(float(np.hypot(pose.x - ref.x, pose.y - ref.y)))
        heading_errors.append(abs(math.remainder(pose.heading - ref.heading, 2.0 * math.pi)))

    rms_error = math.sqrt(float(np.mean(np.square(position_errors))))
    max_error = float(np.max(position_errors))
    final_pose = history[-1].state.pose

    print(f"Simulated {len(history)} steps over {history[-1].time_s:.2f} s.")
    print(f"Final pose: {final_pose}")
    print(f"Trajectory end pose: {trajectory.end()}")
    print(f"RMS position error: {rms_error:.3f} m")
    print(f"Max position error: {max_error:.3f} m")
    print(f"Max heading error: {math.degrees(max(heading_errors)):.2f} deg")


def run_follower_example(
    trajectory: Trajectory,
    log_path: Path,
    *,
    simulator_config: SimulatorConfig | None = None,
    follower_config: FollowerConfig | None = None,
    axial_coeffs: PIDCoefficients = DEFAULT_TRANSLATIONAL_COEFFS,
    lateral_coeffs: PIDCoefficients = DEFAULT_TRANSLATIONAL_COEFFS,
    heading_coeffs: PIDCoefficients = DEFAULT_HEADING_COEFFS,
    use_velocity_feedback: bool = True,
    extra_time_s: float = 1.0,
    quiet: bool = False,
) -> list[SimulationStep]:
    """Follow ``trajectory`` in the simulator and write telemetry to ``log_path``."""

    if follower_config is None:
        follower_config = FollowerConfig(
            admissible_error=DEFAULT_ADMISSIBLE_ERROR, timeout_s=1.0
        )

    clock = ManualClock()
    follower = HolonomicPIDVAFollower(
        axial_coeffs,
        lateral_coeffs,
        heading_coeffs,
        config=follower_config,
        clock=clock,
    )
    simulator = HolonomicSimulator(simulator_config)
    simulator.reset(RobotState(pose=simulator.config.initial_pose), time_s=0.0)
    follower.follow_trajectory(trajectory)

    def command_fn(time_s: float, state: RobotState) -> DriveSignal:
        clock.set(time_s)
        measured_vel = state.robot_vel if use_velocity_feedback else None
        return follower.update(state.pose, measured_vel)

    final_time_s = trajectory.duration_s + follower_config.timeout_s + extra_time_s
    log_path.parent.mkdir(parents=True, exist_ok=True)

    with TelemetryLogger(log_path) as logger:

        def log_step(step: SimulationStep) -> None:
            # Once the run has stopped there is no reference to log.
            result = follower.last_result if follower.is_following() else None
            logger.log(
                step,
                reference_pose=None if result is None else result.target_pose,
                pose_error=None if result is None else result.pose_error,
            )

        history = simulator.run(
            final_time_s=final_time_s,
            command_fn=command_fn,
            progress_callback=log_step,
        )

    if not quiet:
        analyze_history(history, trajectory)
        print(f"Telemetry log written to: {log_path}")
    return history
