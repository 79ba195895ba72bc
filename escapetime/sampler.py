"""
Sample the escape time at every pixel of a viewport.

One vertical line (fixed column, all rows) is one unit of work.  Columns are
independent: each task reads the frozen Viewport and returns its own column,
which is written into grid[column, :] once the pool hands it back.
"""

from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Optional

import numpy as np

from escapetime.complex_arith import ORIGIN, Complex
from escapetime.iterators import pick_iterator
from escapetime.viewport import Viewport

GRID_DTYPE = np.uint32


def allocate_grid(view: Viewport) -> np.ndarray:
    return np.zeros(view.shape, dtype=GRID_DTYPE)


def compute_vertical_line(
    view: Viewport,
    column: int,
    max_iter: int,
    iterator: str = "expanded",
    seed: Complex = ORIGIN,
) -> np.ndarray:
    """Iteration counts for every row of ``column``."""
    step = pick_iterator(iterator)
    line = np.empty(view.y_resolution, dtype=GRID_DTYPE)
    for row, point in view.points_in_column(column):
        line[row] = step(point, max_iter, seed)
    return line


def compute_image_sequential(
    view: Viewport,
    max_iter: int,
    iterator: str = "expanded",
    seed: Complex = ORIGIN,
) -> np.ndarray:
    """Single-threaded reference: the same grid compute_image produces."""
    view.validate()
    grid = allocate_grid(view)
    for column in view.columns():
        grid[column, :] = compute_vertical_line(view, column, max_iter, iterator, seed)
    return grid


def compute_image(
    view: Viewport,
    max_iter: int,
    workers: Optional[int] = None,
    iterator: str = "expanded",
    seed: Complex = ORIGIN,
) -> np.ndarray:
    """
    Build the (x_resolution, y_resolution) iteration grid with a pool of
    ``workers`` processes (default: os.cpu_count()).  ``workers=1`` samples
    in this process.

    The pool is shut down before returning, so the grid is complete and no
    task is still running when the caller starts coloring.
    """
    view.validate()
    pick_iterator(iterator)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if workers == 1:
        return compute_image_sequential(view, max_iter, iterator, seed)

    grid = allocate_grid(view)
    columns = view.columns()
    line_for = partial(compute_vertical_line, view, max_iter=max_iter, iterator=iterator, seed=seed)
    chunksize = max(1, len(columns) // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers) as pool:
        lines = pool.map(line_for, columns, chunksize=chunksize)
        # map yields in submission order, whatever order the tasks finish in
        for column, line in zip(columns, lines):
            grid[column, :] = line
    return grid
