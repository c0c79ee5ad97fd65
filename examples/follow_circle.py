from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from examples import circle_trajectory, run_follower_example, setup_logging
from examples.common import build_parser
from holonomic_follower.common import Pose2d
from holonomic_follower.sim import SimulatorConfig

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"
LOG_FILE = LOG_DIR / "sim_follow_circle.csv"


def main() -> None:
    args = build_parser("Follow a circle facing along the direction of travel.", LOG_FILE).parse_args()
    setup_logging(args.verbose)

    trajectory = circle_trajectory(radius_m=1.5, period_s=12.0, heading_mode="tangent")
    run_follower_example(
        trajectory=trajectory,
        log_path=args.output,
        simulator_config=SimulatorConfig(
            initial_pose=trajectory.start(),
            drift_field=Pose2d(0.05, -0.05, 0.0),
        ),
    )


if __name__ == "__main__":
    main()
