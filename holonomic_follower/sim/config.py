from dataclasses import dataclass, field
import math

from holonomic_follower.common.pose import Pose2d


@dataclass(frozen=True)
class SimulatorConfig:
    """Configuration parameters for the holonomic base simulator.

    ``velocity_scale`` multiplies every commanded velocity to model actuator
    mismatch, and ``drift_field`` is a constant field-frame velocity added on
    top (wheel slip, a sloped floor). Both give the feedback loops something to
    reject.
    """

    dt: float = 0.02
    velocity_time_constant: float = 0.1
    velocity_scale: float = 1.0
    drift_field: Pose2d = field(default_factory=Pose2d)
    max_speed_m_s: float = 3.0
    max_turn_rate_rad_s: float = 2.0 * math.pi
    initial_pose: Pose2d = field(default_factory=Pose2d)

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("dt must be positive.")
        if self.velocity_time_constant < 0.0:
            raise ValueError("velocity_time_constant must be non-negative.")
        if self.velocity_scale <= 0.0:
            raise ValueError("velocity_scale must be positive.")
        if self.max_speed_m_s <= 0.0 or self.max_turn_rate_rad_s <= 0.0:
            raise ValueError("Speed limits must be strictly positive.")
