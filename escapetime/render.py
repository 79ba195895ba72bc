from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image

RGB = Tuple[int, int, int]

# (low, high, rgb) on iterations % 256, inclusive, first match wins.
# Anything unmatched (0 and 96-255) is drawn as gray (color, color, color).
BUCKETS = (
    (1, 1, (0, 0, 0)),
    (2, 2, (80, 0, 0)),
    (3, 3, (125, 0, 0)),
    (4, 8, (195, 50, 50)),
    (9, 20, (255, 150, 10)),
    (21, 25, (15, 180, 5)),
    (26, 50, (50, 25, 250)),
    (51, 95, (255, 0, 255)),
)


def bucket_color(iterations: int) -> RGB:
    """Map one iteration count to its RGB bucket."""
    color = int(iterations) % 256
    for low, high, rgb in BUCKETS:
        if low <= color <= high:
            return rgb
    return (color, color, color)


def colorize(grid: np.ndarray) -> np.ndarray:
    """
    Color a whole iteration grid.

    Args:
        grid: iteration counts indexed [column, row]

    Returns:
        uint8 image buffer of shape (rows, columns, 3), row-major as PIL wants it
    """
    color = (np.asarray(grid).T % 256).astype(np.uint8)
    rgb = np.stack([color, color, color], axis=-1)
    for low, high, bucket in BUCKETS:
        mask = (color >= low) & (color <= high)
        rgb[mask] = bucket
    return rgb


def save_image(rgb: np.ndarray, path: str | Path) -> Path:
    """Encode the buffer with Pillow; the format follows the file extension."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8)).save(out_path)
    return out_path
