from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class PIDCoefficients:
    """Proportional, integral and derivative gains for one feedback axis."""

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0

    def __post_init__(self) -> None:
        for name in ("kp", "ki", "kd"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite.")
            object.__setattr__(self, name, value)
