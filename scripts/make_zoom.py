"""
Render a zoom sequence into a directory of numbered frames.

Run:
    python -m scripts.make_zoom --target=-0.743643887+0.131825904j --frames 150 --outdir figures/zoom
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from escapetime.utils import parse_complex
from escapetime.zoom import render_zoom
from scripts._cli import add_render_args, config_from_args


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render a Mandelbrot zoom sequence")
    add_render_args(parser)
    parser.add_argument("--target", type=str, required=True,
                        help="plane point to zoom into, e.g. '-0.75+0.1j'")
    parser.add_argument("--frames", type=int, default=150)
    parser.add_argument("--zoom-rate", dest="zoom_rate", type=float, default=0.95,
                        help="size of each frame relative to the previous one")
    parser.add_argument("--outdir", type=str, default="figures/zoom")
    parser.add_argument("--prefix", type=str, default="frame")
    args = parser.parse_args(argv)

    try:
        cfg = config_from_args(args)
        target = parse_complex(args.target)
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    print(f"[zoom] target={target.to_complex()} frames={args.frames} "
          f"rate={args.zoom_rate} -> {args.outdir}")

    try:
        render_zoom(
            cfg.view,
            target,
            frames=args.frames,
            zoom_rate=args.zoom_rate,
            outdir=args.outdir,
            prefix=args.prefix,
            max_iter=cfg.max_iter,
            workers=cfg.workers,
            iterator=cfg.iterator,
            seed=cfg.seed,
        )
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[error] could not write frame: {e}", file=sys.stderr)
        return 1

    print("[zoom] done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
