import argparse
import os
import sys

import matplotlib

matplotlib.use("Agg")

# Ensure repository root is on sys.path so `from escapetime...` works when
# running this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from escapetime.pipeline import render_config
from escapetime.plotting import plot_iteration_grid
from scripts._cli import add_render_args, config_from_args


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an escape-time image of the Mandelbrot set")
    add_render_args(parser)
    parser.add_argument("--outfile", type=str, default=None)
    parser.add_argument("--figure", type=str, default=None,
                        help="also save a matplotlib figure of the raw iteration counts")
    args = parser.parse_args(argv)

    try:
        cfg = config_from_args(args, outfile=args.outfile)
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    view = cfg.view
    print("Rendering an image of the Mandelbrot set...")
    print(f"[run] view=({view.left}, {view.right}, {view.top}, {view.bottom}) "
          f"res={view.x_resolution}x{view.y_resolution} max_iter={cfg.max_iter} "
          f"iterator={cfg.iterator}, saving to {cfg.outfile}")

    try:
        result = render_config(cfg)
        if args.figure:
            fig_path = plot_iteration_grid(result.grid, view, args.figure, max_iter=cfg.max_iter)
            print(f"[run] figure saved to {fig_path}")
    except (OSError, ValueError) as e:
        print(f"[error] could not write image: {e}", file=sys.stderr)
        return 1

    print("[run] done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
