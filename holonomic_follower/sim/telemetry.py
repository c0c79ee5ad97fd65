import csv
from pathlib import Path
from typing import Self

from holonomic_follower.common.pose import Pose2d

from .simulator import SimulationStep

_NAN_POSE = (float("nan"), float("nan"), float("nan"))


class TelemetryLogger:
    """CSV logger for simulated trajectory-following runs."""

    HEADERS = [
        "time_s",
        "ref_x",
        "ref_y",
        "ref_heading",
        "pose_x",
        "pose_y",
        "pose_heading",
        "vel_x",
        "vel_y",
        "vel_heading",
        "err_x",
        "err_y",
        "err_heading",
        "cmd_vel_x",
        "cmd_vel_y",
        "cmd_vel_heading",
        "cmd_acc_x",
        "cmd_acc_y",
        "cmd_acc_heading",
    ]

    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADERS)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(
        self,
        step: SimulationStep,
        reference_pose: Pose2d | None = None,
        pose_error: Pose2d | None = None,
    ) -> None:
        ref = _NAN_POSE if reference_pose is None else reference_pose.as_array().tolist()
        err = _NAN_POSE if pose_error is None else pose_error.as_array().tolist()
        row = [
            step.time_s,
            *ref,
            *step.state.pose.as_array().tolist(),
            *step.state.robot_vel.as_array().tolist(),
            *err,
            *step.command.vel.as_array().tolist(),
            *step.command.accel.as_array().tolist(),
        ]
        self._writer.writerow(row)
        self._file.flush()
