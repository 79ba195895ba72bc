import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path

from escapetime.viewport import Viewport


def plot_iteration_grid(grid, view: Viewport, outfile, max_iter=None, cmap="magma"):
    """
    Save a figure of the raw iteration counts (not the bucket palette),
    with plane coordinates on the axes and a colorbar.
    """
    out_path = Path(outfile)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 10 * view.height / view.width + 1))
    # grid is [column, row]; imshow wants [row, column] with row 0 at the top
    im = ax.imshow(
        np.asarray(grid).T,
        cmap=cmap,
        extent=[view.left, view.right, view.bottom, view.top],
        vmin=0,
        vmax=max_iter,
    )
    title = f"Mandelbrot Set ({view.x_resolution}x{view.y_resolution})"
    if max_iter is not None:
        title += f" - max_iter={max_iter}"
    ax.set_title(title)
    ax.set_xlabel("Re(c)")
    ax.set_ylabel("Im(c)")
    ax.set_aspect("equal", adjustable="box")
    fig.colorbar(im, ax=ax, label="Iterations to Escape")

    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path
