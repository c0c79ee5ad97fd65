import math
from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples import line_trajectory, run_follower_example, setup_logging
from examples.common import build_parser
from holonomic_follower.common import Pose2d
from holonomic_follower.sim import SimulatorConfig

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"
LOG_FILE = LOG_DIR / "sim_follow_line.csv"


def main() -> None:
    args = build_parser("Follow a straight strafing move.", LOG_FILE).parse_args()
    setup_logging(args.verbose)

    trajectory = line_trajectory(
        start=Pose2d(0.0, 0.0, 0.0),
        end=Pose2d(2.0, 1.0, math.radians(90.0)),
        duration_s=4.0,
    )
    run_follower_example(
        trajectory=trajectory,
        log_path=args.output,
        simulator_config=SimulatorConfig(velocity_scale=0.85),
    )


if __name__ == "__main__":
    main()
