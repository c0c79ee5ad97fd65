"""Tests for the Pose2d value type and angle helpers."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from holonomic_follower.common import Pose2d, wrap_angle


@pytest.mark.parametrize(
    ("angle", "expected"),
    [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (1.5 * math.pi, -0.5 * math.pi),
        (-1.5 * math.pi, 0.5 * math.pi),
        (0.3 + 4.0 * math.pi, 0.3),
    ],
)
def test_wrap_angle_range(angle: float, expected: float) -> None:
    wrapped = wrap_angle(angle)
    assert -math.pi < wrapped <= math.pi
    assert wrapped == pytest.approx(expected, abs=1e-12)


def test_addition_wraps_heading() -> None:
    total = Pose2d(1.0, 2.0, 3.0) + Pose2d(0.5, -1.0, 1.0)
    assert total.x == pytest.approx(1.5)
    assert total.y == pytest.approx(1.0)
    assert total.heading == pytest.approx(4.0 - 2.0 * math.pi)


def test_subtraction_wraps_heading() -> None:
    delta = Pose2d(0.0, 0.0, -3.0) - Pose2d(0.0, 0.0, 3.0)
    assert delta.heading == pytest.approx(2.0 * math.pi - 6.0)


def test_scaling_does_not_wrap() -> None:
    scaled = 2.0 * Pose2d(1.0, -2.0, 3.0)
    assert scaled == Pose2d(2.0, -4.0, 6.0)
    assert (scaled / 2.0) == Pose2d(1.0, -2.0, 3.0)
    assert -scaled == Pose2d(-2.0, 4.0, -6.0)


def test_array_conversions() -> None:
    pose = Pose2d.from_array(np.array([1.0, 2.0, 0.5]))
    assert np.allclose(pose.as_array(), [1.0, 2.0, 0.5])
    assert np.allclose(pose.vec(), [1.0, 2.0])
    assert Pose2d.from_vec(pose.vec(), 0.25) == Pose2d(1.0, 2.0, 0.25)

    with pytest.raises(ValueError):
        Pose2d.from_array(np.zeros(2))
    with pytest.raises(ValueError):
        Pose2d.from_vec(np.zeros(3))


def test_pose_is_immutable() -> None:
    pose = Pose2d(1.0, 2.0, 0.1)
    with pytest.raises(AttributeError):
        pose.x = 5.0  # type: ignore[misc]
