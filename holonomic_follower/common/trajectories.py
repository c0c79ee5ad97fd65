from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

import numpy as np
from scipy.interpolate import CubicSpline

from .math_utils import wrap_angle
from .pose import Pose2d

PoseFn = Callable[[float], Pose2d]


class TrajectoryLike(Protocol):
    duration_s: float

    def pose(self, time_s: float) -> Pose2d: ...

    def velocity(self, time_s: float) -> Pose2d: ...

    def acceleration(self, time_s: float) -> Pose2d: ...

    def end(self) -> Pose2d: ...


@dataclass(frozen=True)
class Trajectory:
    """Bundle of callables describing a field-frame reference over [0, duration_s].

    Sampling before the start clamps to ``t = 0``. Sampling past the end holds
    the final pose with zero velocity and acceleration.
    """

    pose_fn: PoseFn
    velocity_fn: PoseFn
    acceleration_fn: PoseFn
    duration_s: float

    def __post_init__(self) -> None:
        duration = float(self.duration_s)
        if not math.isfinite(duration) or duration < 0.0:
            raise ValueError("duration_s must be finite and non-negative.")
        object.__setattr__(self, "duration_s", duration)

    def _clamp(self, time_s: float) -> float:
        return min(max(float(time_s), 0.0), self.duration_s)

    def pose(self, time_s: float) -> Pose2d:
        return self.pose_fn(self._clamp(time_s))

    def velocity(self, time_s: float) -> Pose2d:
        if time_s > self.duration_s:
            return Pose2d()
        return self.velocity_fn(self._clamp(time_s))

    def acceleration(self, time_s: float) -> Pose2d:
        if time_s > self.duration_s:
            return Pose2d()
        return self.acceleration_fn(self._clamp(time_s))

    def start(self) -> Pose2d:
        return self.pose(0.0)

    def end(self) -> Pose2d:
        return self.pose(self.duration_s)


def hold_trajectory(pose: Pose2d, duration_s: float) -> Trajectory:
    def position(_: float) -> Pose2d:
        return pose

    def zero(_: float) -> Pose2d:
        return Pose2d()

    return Trajectory(
        pose_fn=position, velocity_fn=zero, acceleration_fn=zero, duration_s=duration_s
    )


def line_trajectory(start: Pose2d, end: Pose2d, duration_s: float) -> Trajectory:
    """Straight move with a cubic time scaling, starting and ending at rest.

    The heading turns along the shortest arc while the robot translates.
    """

    if duration_s <= 0.0:
        raise ValueError("duration_s must be positive")

    dx = end.x - start.x
    dy = end.y - start.y
    dheading = wrap_angle(end.heading - start.heading)
    T = float(duration_s)

    def _scaling(time_s: float) -> tuple[float, float, float]:
        tau = time_s / T
        s = 3.0 * tau**2 - 2.0 * tau**3
        ds = (6.0 * tau - 6.0 * tau**2) / T
        dds = (6.0 - 12.0 * tau) / (T * T)
        return s, ds, dds

    def position(time_s: float) -> Pose2d:
        s, _, _ = _scaling(time_s)
        return Pose2d(
            start.x + s * dx,
            start.y + s * dy,
            wrap_angle(start.heading + s * dheading),
        )

    def velocity(time_s: float) -> Pose2d:
        _, ds, _ = _scaling(time_s)
        return Pose2d(ds * dx, ds * dy, ds * dheading)

    def acceleration(time_s: float) -> Pose2d:
        _, _, dds = _scaling(time_s)
        return Pose2d(dds * dx, dds * dy, dds * dheading)

    return Trajectory(
        pose_fn=position, velocity_fn=velocity, acceleration_fn=acceleration, duration_s=T
    )


def circle_trajectory(
    radius_m: float = 1.5,
    period_s: float = 12.0,
    center: Pose2d = Pose2d(),
    phase_rad: float = 0.0,
    heading_mode: str = "tangent",
    duration_s: float | None = None,
) -> Trajectory:
    """Constant-speed circle around ``center``.

    ``heading_mode="tangent"`` points the robot along the direction of travel;
    ``"fixed"`` keeps ``center.heading`` while the robot strafes around.
    """

    if radius_m <= 0.0:
        raise ValueError("radius_m must be positive")
    if period_s <= 0.0:
        raise ValueError("period_s must be positive")
    if heading_mode not in ("tangent", "fixed"):
        raise ValueError(f"Unknown heading_mode: {heading_mode!r}")

    omega = 2.0 * math.pi / period_s
    linear_speed = radius_m * omega
    tangent = heading_mode == "tangent"

    def position(time_s: float) -> Pose2d:
        angle = omega * time_s + phase_rad
        heading = angle + math.pi / 2.0 if tangent else center.heading
        return Pose2d(
            center.x + radius_m * math.cos(angle),
            center.y + radius_m * math.sin(angle),
            wrap_angle(heading),
        )

    def velocity(time_s: float) -> Pose2d:
        angle = omega * time_s + phase_rad
        return Pose2d(
            -linear_speed * math.sin(angle),
            linear_speed * math.cos(angle),
            omega if tangent else 0.0,
        )

    def acceleration(time_s: float) -> Pose2d:
        angle = omega * time_s + phase_rad
        return Pose2d(
            -linear_speed * omega * math.cos(angle),
            -linear_speed * omega * math.sin(angle),
            0.0,
        )

    return Trajectory(
        pose_fn=position,
        velocity_fn=velocity,
        acceleration_fn=acceleration,
        duration_s=period_s if duration_s is None else duration_s,
    )


def spline_trajectory(
    times_s: Sequence[float] | np.ndarray, waypoints: Sequence[Pose2d]
) -> Trajectory:
    """Clamped cubic spline through timed waypoints, at rest at both ends.

    Waypoint headings are unwrapped before fitting so the spline never takes
    the long way around.
    """

    times = np.asarray(times_s, dtype=float)
    if times.ndim != 1 or len(times) != len(waypoints):
        raise ValueError("times_s and waypoints must have the same length")
    if len(waypoints) < 2:
        raise ValueError("spline_trajectory needs at least two waypoints")
    if np.any(np.diff(times) <= 0.0):
        raise ValueError("times_s must be strictly increasing")

    values = np.array([wp.as_array() for wp in waypoints], dtype=float)
    values[:, 2] = np.unwrap(values[:, 2])

    t0 = float(times[0])
    spline = CubicSpline(times - t0, values, axis=0, bc_type="clamped")
    d_spline = spline.derivative(1)
    dd_spline = spline.derivative(2)

    def position(time_s: float) -> Pose2d:
        x, y, heading = spline(time_s)
        return Pose2d(x, y, wrap_angle(heading))

    def velocity(time_s: float) -> Pose2d:
        return Pose2d.from_array(d_spline(time_s))

    def acceleration(time_s: float) -> Pose2d:
        return Pose2d.from_array(dd_spline(time_s))

    return Trajectory(
        pose_fn=position,
        velocity_fn=velocity,
        acceleration_fn=acceleration,
        duration_s=float(times[-1] - t0),
    )
