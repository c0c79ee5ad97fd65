"""Single-axis PID controller with velocity/acceleration feedforward."""

from __future__ import annotations

import math
from typing import Callable

from holonomic_follower.common.clock import Clock, SystemClock
from holonomic_follower.common.math_utils import epsilon_equals

from .coefficients import PIDCoefficients

FeedforwardFn = Callable[[float, float | None], float]


class PIDFController:
    """PID controller with kV/kA/kStatic feedforward and optional circular input.

    Set ``target_position`` / ``target_velocity`` / ``target_acceleration`` and
    call :meth:`update` with the measurement. When a measured velocity is given,
    the derivative term is ``target_velocity - measured_velocity``; the position
    error is only differenced when no velocity measurement is available.
    """

    def __init__(
        self,
        pid: PIDCoefficients,
        kv: float = 0.0,
        ka: float = 0.0,
        kstatic: float = 0.0,
        kf: FeedforwardFn | None = None,
        clock: Clock | None = None,
    ):
        self.pid = pid
        self.kv = kv
        self.ka = ka
        self.kstatic = kstatic
        self.kf = kf
        self._clock = clock or SystemClock()

        self.target_position = 0.0
        self.target_velocity = 0.0
        self.target_acceleration = 0.0
        self.last_error = 0.0

        self._error_sum = 0.0
        self._last_update_s: float | None = None

        self._input_bounds: tuple[float, float] | None = None
        self._output_bounds: tuple[float, float] | None = None

    @property
    def error_sum(self) -> float:
        return self._error_sum

    @property
    def input_bounds(self) -> tuple[float, float] | None:
        return self._input_bounds

    def set_input_bounds(self, min_input: float, max_input: float) -> None:
        """Treat the input as circular over [min_input, max_input]."""
        if min_input < max_input:
            self._input_bounds = (float(min_input), float(max_input))

    def set_output_bounds(self, min_output: float, max_output: float) -> None:
        if min_output < max_output:
            self._output_bounds = (float(min_output), float(max_output))

    def reset(self) -> None:
        self._error_sum = 0.0
        self.last_error = 0.0
        self._last_update_s = None

    def position_error(self, measured_position: float) -> float:
        error = self.target_position - measured_position
        if self._input_bounds is not None and math.isfinite(error):
            min_input, max_input = self._input_bounds
            error = math.remainder(error, max_input - min_input)
        return error

    def update(
        self, measured_position: float, measured_velocity: float | None = None
    ) -> float:
        now_s = self._clock.seconds()
        error = self.position_error(measured_position)

        if self._last_update_s is None:
            # No dt yet: skip the integral and the differenced derivative.
            error_deriv = 0.0
        else:
            dt = now_s - self._last_update_s
            if dt > 0.0:
                self._error_sum += 0.5 * (error + self.last_error) * dt
                error_deriv = (error - self.last_error) / dt
            else:
                error_deriv = 0.0

        if measured_velocity is not None:
            error_deriv = self.target_velocity - measured_velocity

        self.last_error = error
        self._last_update_s = now_s

        output = (
            self.pid.kp * error
            + self.pid.ki * self._error_sum
            + self.pid.kd * error_deriv
            + self.kv * self.target_velocity
            + self.ka * self.target_acceleration
        )
        if self.kf is not None:
            output += self.kf(measured_position, measured_velocity)

        if epsilon_equals(output, 0.0):
            output = 0.0
        else:
            output += math.copysign(self.kstatic, output)

        if self._output_bounds is not None:
            min_output, max_output = self._output_bounds
            output = max(min_output, min(output, max_output))
        return output
