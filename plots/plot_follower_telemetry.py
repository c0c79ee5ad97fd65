from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED_COLUMNS = ("pose_x", "ref_x", "err_x", "cmd_vel_x")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot telemetry captured from a simulated trajectory-following run."
    )
    parser.add_argument("logfile", type=Path, help="Path to a follower CSV log")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Optional path to save the figure instead of displaying it.",
    )
    return parser


def plot_follower_telemetry(df: pd.DataFrame, output: Path | None) -> None:
    time = df["time_s"].to_numpy()

    fig = plt.figure(figsize=(12, 12))
    grid = fig.add_gridspec(4, 2)
    ax_xy = fig.add_subplot(grid[:2, 0])
    ax_err = fig.add_subplot(grid[0, 1])
    ax_heading = fig.add_subplot(grid[1, 1], sharex=ax_err)
    ax_vel = fig.add_subplot(grid[2, :])
    ax_acc = fig.add_subplot(grid[3, :], sharex=ax_vel)

    ax_xy.plot(df["ref_x"], df["ref_y"], linestyle="--", label="Reference")
    ax_xy.plot(df["pose_x"], df["pose_y"], label="Robot")
    ax_xy.set_xlabel("X (m)")
    ax_xy.set_ylabel("Y (m)")
    ax_xy.set_aspect("equal", adjustable="datalim")
    ax_xy.legend(loc="best", fontsize="small")
    ax_xy.grid(True, linestyle=":")

    ax_err.plot(time, df["err_x"], label="Axial error")
    ax_err.plot(time, df["err_y"], label="Lateral error")
    ax_err.set_ylabel("Error (m)")
    ax_err.legend(loc="upper right", fontsize="small")
    ax_err.grid(True, linestyle=":")

    ax_heading.plot(time, np.rad2deg(df["err_heading"].to_numpy()), label="Heading error")
    ax_heading.plot(
        time,
        np.rad2deg(np.unwrap(df["pose_heading"].to_numpy())),
        label="Heading",
    )
    ref_heading = df["ref_heading"].ffill().bfill().to_numpy()
    ax_heading.plot(
        time,
        np.rad2deg(np.unwrap(ref_heading)),
        linestyle="--",
        label="Heading reference",
    )
    ax_heading.set_ylabel("Heading (deg)")
    ax_heading.set_xlabel("Time (s)")
    ax_heading.legend(loc="upper right", fontsize="small")
    ax_heading.grid(True, linestyle=":")

    for comp, label in zip(("x", "y", "heading"), ("Axial", "Lateral", "Heading")):
        ax_vel.plot(time, df[f"vel_{comp}"], label=f"{label} actual")
        ax_vel.plot(time, df[f"cmd_vel_{comp}"], linestyle="--", label=f"{label} command")
    ax_vel.set_ylabel("Robot velocity (m/s, rad/s)")
    ax_vel.legend(loc="upper right", fontsize="small", ncol=3)
    ax_vel.grid(True, linestyle=":")

    for comp, label in zip(("x", "y", "heading"), ("Axial", "Lateral", "Heading")):
        ax_acc.plot(time, df[f"cmd_acc_{comp}"], label=f"{label} feedforward")
    ax_acc.set_ylabel("Robot accel (m/s², rad/s²)")
    ax_acc.set_xlabel("Time (s)")
    ax_acc.legend(loc="upper right", fontsize="small")
    ax_acc.grid(True, linestyle=":")

    fig.tight_layout()

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=200)
    else:
        plt.show()


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if not args.logfile.exists():
        raise SystemExit(f"Telemetry log not found: {args.logfile}")

    df = pd.read_csv(args.logfile)
    missing = [col for col in REQUIRED_COLUMNS if col not in df]
    if missing:
        raise SystemExit(f"Log is missing expected columns: {missing}")

    plot_follower_telemetry(df, args.output)


if __name__ == "__main__":
    main()
