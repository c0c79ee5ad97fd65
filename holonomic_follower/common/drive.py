from dataclasses import dataclass, field

from .pose import Pose2d


@dataclass(frozen=True)
class DriveSignal:
    """Robot-frame drive command.

    ``vel`` carries feedforward plus feedback; ``accel`` is feedforward only and
    is meant for the layer that applies motor feedforward.
    """

    vel: Pose2d = field(default_factory=Pose2d)
    accel: Pose2d = field(default_factory=Pose2d)
