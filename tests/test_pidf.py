"""Unit tests for the single-axis PIDF controller."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from holonomic_follower.common import ManualClock
from holonomic_follower.control import PIDCoefficients, PIDFController


def make_controller(kp: float = 0.0, ki: float = 0.0, kd: float = 0.0, **kwargs):
    clock = ManualClock()
    controller = PIDFController(PIDCoefficients(kp, ki, kd), clock=clock, **kwargs)
    return controller, clock


def test_first_update_applies_proportional_term() -> None:
    controller, _ = make_controller(kp=2.0)
    controller.target_position = 1.5
    assert controller.update(0.0) == pytest.approx(3.0)
    assert controller.last_error == pytest.approx(1.5)


def test_integral_uses_trapezoidal_rule() -> None:
    controller, clock = make_controller(ki=1.0)
    controller.target_position = 1.0
    assert controller.update(0.0) == 0.0

    clock.advance(0.5)
    controller.target_position = 3.0
    assert controller.update(0.0) == pytest.approx(1.0)
    assert controller.error_sum == pytest.approx(1.0)


def test_derivative_differences_error_without_velocity() -> None:
    controller, clock = make_controller(kd=1.0)
    controller.target_position = 0.0
    assert controller.update(0.0) == 0.0

    clock.advance(0.5)
    controller.target_position = 1.0
    assert controller.update(0.0) == pytest.approx(2.0)


def test_derivative_uses_measured_velocity_directly() -> None:
    controller, clock = make_controller(kd=1.0)
    controller.target_velocity = 2.0
    assert controller.update(0.0, 0.5) == pytest.approx(1.5)

    # A jump in position error must not leak into the derivative term.
    clock.advance(0.1)
    controller.target_position = 10.0
    assert controller.update(0.0, 0.5) == pytest.approx(1.5)


def test_zero_dt_skips_integral_and_difference() -> None:
    controller, _ = make_controller(ki=1.0, kd=1.0)
    controller.target_position = 1.0
    controller.update(0.0)
    controller.target_position = 2.0
    assert controller.update(0.0) == 0.0
    assert controller.error_sum == 0.0


def test_input_bounds_wrap_error() -> None:
    controller, _ = make_controller(kp=1.0)
    controller.set_input_bounds(-math.pi, math.pi)
    controller.target_position = math.pi - 0.1
    assert controller.update(-math.pi + 0.1) == pytest.approx(-0.2)


def test_invalid_bounds_are_ignored() -> None:
    controller, _ = make_controller(kp=1.0)
    controller.set_input_bounds(1.0, -1.0)
    controller.set_output_bounds(0.5, 0.5)
    assert controller.input_bounds is None
    controller.target_position = 4.0
    assert controller.update(0.0) == pytest.approx(4.0)


def test_output_bounds_clamp() -> None:
    controller, _ = make_controller(kp=10.0)
    controller.set_output_bounds(-1.0, 1.0)
    controller.target_position = 1.0
    assert controller.update(0.0) == pytest.approx(1.0)
    controller.target_position = -1.0
    assert controller.update(0.0) == pytest.approx(-1.0)


def test_static_friction_term_follows_output_sign() -> None:
    controller, _ = make_controller(kp=1.0, kstatic=0.1)
    controller.target_position = -0.5
    assert controller.update(0.0) == pytest.approx(-0.6)
    controller.target_position = 0.0
    assert controller.update(0.0) == 0.0


def test_velocity_acceleration_and_custom_feedforward() -> None:
    controller, _ = make_controller(kv=0.5, ka=0.25, kf=lambda position, velocity: 0.1)
    controller.target_velocity = 2.0
    controller.target_acceleration = 4.0
    assert controller.update(0.0) == pytest.approx(2.1)


def test_reset_forgets_history() -> None:
    controller, clock = make_controller(kp=1.0, ki=1.0)
    controller.target_position = 1.0
    first = controller.update(0.0)
    clock.advance(1.0)
    controller.update(0.0)
    assert controller.error_sum > 0.0

    controller.reset()
    assert controller.error_sum == 0.0
    assert controller.last_error == 0.0
    clock.advance(1.0)
    assert controller.update(0.0) == pytest.approx(first)


def test_coefficients_must_be_finite() -> None:
    with pytest.raises(ValueError):
        PIDCoefficients(kp=float("inf"))


def test_input_bounds_wrap_many_turns_at_once() -> None:
    controller, _ = make_controller(kp=1.0)
    controller.set_input_bounds(-math.pi, math.pi)
    controller.target_position = 1.0e12
    output = controller.update(0.0)
    assert math.isfinite(output)
    assert abs(output) <= math.pi


@pytest.mark.parametrize("target", [math.inf, -math.inf, math.nan])
def test_non_finite_error_passes_through_input_bounds(target: float) -> None:
    controller, _ = make_controller(kp=1.0)
    controller.set_input_bounds(-math.pi, math.pi)
    controller.target_position = target
    output = controller.update(0.0)
    if math.isnan(target):
        assert math.isnan(output)
    else:
        assert output == target
