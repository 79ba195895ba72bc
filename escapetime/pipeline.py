"""
Render one frame: sample the viewport, color it, write the image.

    single_frame(view, "mandelbrot.png", max_iter=255) -> FrameResult

Sampling and saving are timed separately and printed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from escapetime.complex_arith import ORIGIN, Complex
from escapetime.config import RenderConfig
from escapetime.render import colorize, save_image
from escapetime.sampler import compute_image
from escapetime.viewport import Viewport


@dataclass
class FrameResult:
    path: Path
    grid: np.ndarray
    compute_seconds: float
    save_seconds: float


def single_frame(
    view: Viewport,
    frame_name: str | Path,
    max_iter: int = 255,
    workers: Optional[int] = None,
    iterator: str = "expanded",
    seed: Complex = ORIGIN,
) -> FrameResult:
    view.validate()

    start = time.perf_counter()
    grid = compute_image(view, max_iter, workers=workers, iterator=iterator, seed=seed)
    compute_seconds = time.perf_counter() - start
    print(f"Time elapsed in computing image: {compute_seconds:.3f}s")

    start = time.perf_counter()
    path = save_image(colorize(grid), frame_name)
    save_seconds = time.perf_counter() - start
    print(f"Time elapsed in drawing and saving image: {save_seconds:.3f}s")

    return FrameResult(path=path, grid=grid, compute_seconds=compute_seconds, save_seconds=save_seconds)


def render_config(cfg: RenderConfig) -> FrameResult:
    return single_frame(
        cfg.view,
        cfg.outfile,
        max_iter=cfg.max_iter,
        workers=cfg.workers,
        iterator=cfg.iterator,
        seed=cfg.seed,
    )
