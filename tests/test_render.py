import numpy as np
import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from PIL import Image

from escapetime.render import bucket_color, colorize, save_image


@pytest.mark.parametrize("iterations, rgb", [
    (1, (0, 0, 0)),
    (2, (80, 0, 0)),
    (3, (125, 0, 0)),
    (4, (195, 50, 50)),
    (8, (195, 50, 50)),
    (9, (255, 150, 10)),
    (20, (255, 150, 10)),
    (21, (15, 180, 5)),
    (25, (15, 180, 5)),
    (26, (50, 25, 250)),
    (50, (50, 25, 250)),
    (51, (255, 0, 255)),
    (95, (255, 0, 255)),
    (96, (96, 96, 96)),
    (200, (200, 200, 200)),
    (255, (255, 255, 255)),
    (0, (0, 0, 0)),
])
def test_bucket_table(iterations, rgb):
    assert bucket_color(iterations) == rgb


def test_buckets_wrap_mod_256():
    assert bucket_color(2 + 256) == (80, 0, 0)
    assert bucket_color(2 + 2 * 256) == (80, 0, 0)
    # a cap of 256 or 2560 falls on 0 -> grayscale black
    assert bucket_color(256) == (0, 0, 0)
    assert bucket_color(2560) == (0, 0, 0)
    # a cap of 2500 is 196 mod 256 -> gray
    assert bucket_color(2500) == (196, 196, 196)


def test_colorize_matches_bucket_color():
    grid = np.arange(0, 600, dtype=np.uint32).reshape(30, 20)
    rgb = colorize(grid)
    assert rgb.shape == (20, 30, 3)
    assert rgb.dtype == np.uint8
    for column in range(30):
        for row in range(20):
            assert tuple(int(v) for v in rgb[row, column]) == bucket_color(grid[column, row])


def test_save_image_writes_png(tmp_path):
    grid = np.array([[1, 2, 3], [96, 255, 256]], dtype=np.uint32)  # 2 columns x 3 rows
    out = save_image(colorize(grid), tmp_path / "nested" / "tiny.png")
    assert out.exists()
    with Image.open(out) as im:
        assert im.size == (2, 3)
        assert im.mode == "RGB"
        assert im.getpixel((0, 1)) == (80, 0, 0)
        assert im.getpixel((1, 0)) == (96, 96, 96)


def test_save_image_unwritable_path_raises(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory")
    rgb = colorize(np.ones((2, 2), dtype=np.uint32))
    with pytest.raises(OSError):
        save_image(rgb, blocker / "out.png")
