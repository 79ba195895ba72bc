import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from PIL import Image

from scripts import make_image, make_zoom


def test_make_image_cli(tmp_path, capsys):
    out = tmp_path / "cli.png"
    fig = tmp_path / "cli_fig.png"
    code = make_image.main([
        "--left", "-2.0", "--right", "1.0", "--top", "1.0", "--bottom", "-1.0",
        "--x-res", "30", "--y-res", "20", "--max-iter", "40", "--workers", "2",
        "--outfile", str(out), "--figure", str(fig),
    ])
    assert code == 0
    with Image.open(out) as im:
        assert im.size == (30, 20)
    assert fig.exists()
    assert "[run] done." in capsys.readouterr().out


def test_make_image_config_then_flags(tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("view:\n  x_resolution: 12\n  y_resolution: 9\nmax_iter: 10\n")
    out = tmp_path / "from_cfg.png"
    code = make_image.main(["--config", str(cfg), "--x-res", "15", "--outfile", str(out)])
    assert code == 0
    with Image.open(out) as im:
        assert im.size == (15, 9)


def test_make_image_rejects_degenerate_view(tmp_path, capsys):
    code = make_image.main(["--left", "1.0", "--right", "-1.0", "--outfile", str(tmp_path / "x.png")])
    assert code == 1
    assert "[error]" in capsys.readouterr().err
    assert not (tmp_path / "x.png").exists()


def test_make_image_write_failure(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    code = make_image.main(["--x-res", "4", "--y-res", "4", "--max-iter", "5",
                            "--outfile", str(blocker / "out.png")])
    assert code == 1
    assert "could not write image" in capsys.readouterr().err


def test_make_zoom_cli(tmp_path):
    code = make_zoom.main([
        "--target=-0.75+0.1j", "--frames", "2", "--zoom-rate", "0.5",
        "--x-res", "10", "--y-res", "6", "--max-iter", "15",
        "--outdir", str(tmp_path), "--prefix", "f",
    ])
    assert code == 0
    assert (tmp_path / "f0000.png").exists()
    assert (tmp_path / "f0001.png").exists()
    assert (tmp_path / "frames.csv").exists()


def test_make_zoom_bad_rate(tmp_path):
    code = make_zoom.main(["--target=0", "--frames", "2", "--zoom-rate", "2.0",
                           "--x-res", "4", "--y-res", "4", "--outdir", str(tmp_path)])
    assert code == 1
