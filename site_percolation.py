import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from site_perc.constants import CANVAS_HEIGHT, CANVAS_WIDTH, DRAW_EVERY, PAUSE_S, RESOLUTION
from site_perc.models import PercolationConfig
from site_perc.simulation import report_trials, run_animation, run_trials


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Animate random site percolation on a rectangular grid "
                    "until the top row connects to the bottom row."
    )
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH,
                        help="Canvas width in pixels.")
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT,
                        help="Canvas height in pixels.")
    parser.add_argument("--resolution", type=int, default=RESOLUTION,
                        help="Edge length of one cell in pixels.")
    parser.add_argument("--cols", type=int, default=None,
                        help="Number of columns (overrides width / resolution).")
    parser.add_argument("--rows", type=int, default=None,
                        help="Number of rows (overrides height / resolution).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs.")
    parser.add_argument("--pause", type=float, default=PAUSE_S,
                        help="Animation delay per frame in seconds.")
    parser.add_argument("--draw-every", type=int, default=DRAW_EVERY,
                        help="Redraw every k steps.")
    parser.add_argument("--real-only", action="store_true",
                        help="Draw random sites from real cells only, never the virtual nodes.")
    parser.add_argument("--trials", type=int, default=None,
                        help="Run this many headless Monte Carlo trials instead of the animation.")
    parser.add_argument("--gif", type=Path, default=None,
                        help="Write the animation frames to this GIF file.")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = PercolationConfig(
            width=args.width,
            height=args.height,
            resolution=args.resolution,
            cols=args.cols,
            rows=args.rows,
            include_virtual_nodes=not args.real_only,
            seed=args.seed,
            pause_s=args.pause,
            draw_every=args.draw_every,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.trials is not None:
        if args.trials <= 0:
            parser.error("--trials must be a positive integer")
        report_trials(run_trials(config, args.trials))
        return

    run_animation(config, gif_path=args.gif)
    plt.show()


if __name__ == "__main__":
    main()
