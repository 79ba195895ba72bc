"""
Zoom sequence: a run of frames closing in on a target point.

Frame 0 is the starting view re-centered on the target; every following
frame spans ``zoom_rate`` times the width and height of the one before it.
Frames are rendered independently with single_frame; nothing is interpolated
between them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import pandas as pd

from escapetime.complex_arith import ORIGIN, Complex
from escapetime.pipeline import single_frame
from escapetime.viewport import Viewport

MANIFEST_NAME = "frames.csv"


def zoom_viewports(
    view: Viewport,
    target: Complex,
    frames: int,
    zoom_rate: float,
) -> Iterator[Viewport]:
    view.validate()
    if frames < 1:
        raise ValueError(f"frames must be >= 1, got {frames}")
    if not 0.0 < zoom_rate < 1.0:
        raise ValueError(f"zoom_rate must be in (0, 1), got {zoom_rate}")

    for index in range(frames):
        yield view.zoomed(target, zoom_rate ** index)


def frame_path(outdir: str | Path, prefix: str, index: int) -> Path:
    return Path(outdir) / f"{prefix}{index:04d}.png"


def render_zoom(
    view: Viewport,
    target: Complex,
    frames: int,
    zoom_rate: float,
    outdir: str | Path,
    prefix: str = "frame",
    max_iter: int = 255,
    workers: Optional[int] = None,
    iterator: str = "expanded",
    seed: Complex = ORIGIN,
) -> pd.DataFrame:
    """
    Render every frame of the zoom and write a manifest CSV next to them.

    Returns:
        DataFrame with one row per frame: file, bounds, compute/save timings
    """
    views = list(zoom_viewports(view, target, frames, zoom_rate))
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    rows = []
    for index, frame_view in enumerate(views):
        path = frame_path(outdir, prefix, index)
        print(f"[zoom] frame {index + 1}/{frames} -> {path}")
        result = single_frame(
            frame_view,
            path,
            max_iter=max_iter,
            workers=workers,
            iterator=iterator,
            seed=seed,
        )
        rows.append({
            "frame": index,
            "file": path.name,
            "left": frame_view.left,
            "right": frame_view.right,
            "top": frame_view.top,
            "bottom": frame_view.bottom,
            "compute_seconds": result.compute_seconds,
            "save_seconds": result.save_seconds,
        })

    df = pd.DataFrame(rows)
    df.to_csv(outdir / MANIFEST_NAME, index=False)
    print(f"[zoom] wrote manifest {outdir / MANIFEST_NAME}")
    return df
