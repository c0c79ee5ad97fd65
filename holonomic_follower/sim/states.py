from dataclasses import dataclass, field

from holonomic_follower.common.pose import Pose2d


@dataclass(frozen=True)
class RobotState:
    """State tracked by the simulator: field-frame pose, robot-frame velocity."""

    pose: Pose2d = field(default_factory=Pose2d)
    robot_vel: Pose2d = field(default_factory=Pose2d)
