from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .math_utils import wrap_angle


@dataclass(frozen=True)
class Pose2d:
    """Planar pose (x, y, heading).

    The same shape carries poses, velocities and error vectors; the caller keeps
    track of which one it holds. Addition and subtraction wrap the heading
    component into (-pi, pi], scaling does not.
    """

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "heading", float(self.heading))

    @classmethod
    def from_vec(cls, vec: np.ndarray, heading: float = 0.0) -> Pose2d:
        vec = np.asarray(vec, dtype=float)
        if vec.shape != (2,):
            raise ValueError(f"vec must be length-2; received shape {vec.shape}")
        return cls(vec[0], vec[1], heading)

    @classmethod
    def from_array(cls, values: np.ndarray) -> Pose2d:
        values = np.asarray(values, dtype=float)
        if values.shape != (3,):
            raise ValueError(f"values must be length-3; received shape {values.shape}")
        return cls(values[0], values[1], values[2])

    def vec(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.heading], dtype=float)

    def __add__(self, other: Pose2d) -> Pose2d:
        if not isinstance(other, Pose2d):
            return NotImplemented
        return Pose2d(
            self.x + other.x,
            self.y + other.y,
            wrap_angle(self.heading + other.heading),
        )

    def __sub__(self, other: Pose2d) -> Pose2d:
        if not isinstance(other, Pose2d):
            return NotImplemented
        return Pose2d(
            self.x - other.x,
            self.y - other.y,
            wrap_angle(self.heading - other.heading),
        )

    def __mul__(self, scalar: float) -> Pose2d:
        return Pose2d(self.x * scalar, self.y * scalar, self.heading * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Pose2d:
        return Pose2d(self.x / scalar, self.y / scalar, self.heading / scalar)

    def __neg__(self) -> Pose2d:
        return Pose2d(-self.x, -self.y, -self.heading)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.heading:.3f})"


def _optional_float(value: float | None) -> float | None:
    return None if value is None else float(value)


@dataclass(frozen=True)
class VelocityMeasurement:
    """Robot-frame velocity reading where any component may be unavailable.

    ``None`` marks an axis with no sensing; the controller for that axis falls
    back to differencing its position error.
    """

    x: float | None = None
    y: float | None = None
    heading: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _optional_float(self.x))
        object.__setattr__(self, "y", _optional_float(self.y))
        object.__setattr__(self, "heading", _optional_float(self.heading))

    @classmethod
    def from_pose(cls, pose: Pose2d) -> VelocityMeasurement:
        return cls(pose.x, pose.y, pose.heading)
