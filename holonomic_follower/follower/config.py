from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from holonomic_follower.common.pose import Pose2d


@dataclass(frozen=True)
class FollowerConfig:
    """Termination settings shared by trajectory followers.

    ``admissible_error`` is the per-axis pose error (robot frame, metres and
    radians) against the trajectory end pose below which a run may stop.
    ``timeout_s`` is how long past the trajectory duration the follower keeps
    correcting while that error is not yet admissible.
    """

    admissible_error: Pose2d = field(default_factory=Pose2d)
    timeout_s: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.timeout_s) or self.timeout_s < 0.0:
            raise ValueError("timeout_s must be finite and non-negative.")
        tolerance = self.admissible_error.as_array()
        if not np.all(np.isfinite(tolerance)) or np.any(tolerance < 0.0):
            raise ValueError("admissible_error components must be finite and non-negative.")
