import math
from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples import run_follower_example, setup_logging, spline_trajectory
from examples.common import build_parser
from holonomic_follower.common import Pose2d

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"
LOG_FILE = LOG_DIR / "sim_follow_spline.csv"

WAYPOINT_TIMES_S = (0.0, 2.0, 4.0, 6.0, 8.0)
WAYPOINTS = (
    Pose2d(0.0, 0.0, 0.0),
    Pose2d(1.0, 0.5, math.radians(45.0)),
    Pose2d(2.0, 0.0, math.radians(170.0)),
    Pose2d(2.5, -1.0, math.radians(-170.0)),
    Pose2d(1.5, -1.5, math.radians(-90.0)),
)


def main() -> None:
    args = build_parser("Follow a spline through timed waypoints.", LOG_FILE).parse_args()
    setup_logging(args.verbose)

    trajectory = spline_trajectory(WAYPOINT_TIMES_S, WAYPOINTS)
    run_follower_example(trajectory=trajectory, log_path=args.output)


if __name__ == "__main__":
    main()
