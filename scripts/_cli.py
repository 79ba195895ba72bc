"""Flags shared by make_image and make_zoom."""

import argparse
from pathlib import Path

from escapetime.config import RenderConfig, config_from_dict, load_config
from escapetime.iterators import ITERATORS

VIEW_FLAGS = {
    "left": "left",
    "right": "right",
    "top": "top",
    "bottom": "bottom",
    "x_res": "x_resolution",
    "y_res": "y_resolution",
}


def add_render_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=str, default=None,
                        help="YAML render config; flags below override it")
    parser.add_argument("--left", type=float, default=None)
    parser.add_argument("--right", type=float, default=None)
    parser.add_argument("--top", type=float, default=None)
    parser.add_argument("--bottom", type=float, default=None)
    parser.add_argument("--x-res", dest="x_res", type=int, default=None)
    parser.add_argument("--y-res", dest="y_res", type=int, default=None)
    parser.add_argument("--max-iter", dest="max_iter", type=int, default=None)
    parser.add_argument("--workers", type=int, default=None,
                        help="sampling threads (default: cpu count)")
    parser.add_argument("--iterator", type=str, default=None, choices=sorted(ITERATORS))
    parser.add_argument("--seed", type=str, default=None,
                        help="orbit seed z0, e.g. '0.1+0.2j' (default 0)")


def config_from_args(args, outfile=None) -> RenderConfig:
    cfg = load_config(args.config) if args.config else RenderConfig()

    overrides = {}
    view = {key: getattr(args, flag) for flag, key in VIEW_FLAGS.items()
            if getattr(args, flag) is not None}
    if view:
        overrides["view"] = view
    for key in ("max_iter", "workers", "iterator", "seed"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    if outfile is not None:
        overrides["outfile"] = str(Path(outfile))

    return config_from_dict(overrides, cfg)
