"""
Render configuration.

A RenderConfig can be built directly, loaded from YAML, or assembled from
CLI flags on top of a YAML file:

    view:
      left: -2.5
      right: 1.0
      top: 1.0
      bottom: -1.0
      x_resolution: 2800
      y_resolution: 1600
    max_iter: 255
    outfile: figures/mandelbrot.png
    workers: 8
    iterator: expanded
    seed: "0+0j"
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from escapetime.complex_arith import ORIGIN, Complex
from escapetime.iterators import pick_iterator
from escapetime.utils import parse_complex
from escapetime.viewport import Viewport

# Standard starting view; 3.5:2 keeps the pixels square.
DEFAULT_VIEW = Viewport(
    left=-2.5,
    right=1.0,
    top=1.0,
    bottom=-1.0,
    x_resolution=2800,
    y_resolution=1600,
)

VIEW_KEYS = ("left", "right", "top", "bottom", "x_resolution", "y_resolution")
TOP_LEVEL_KEYS = ("view", "max_iter", "outfile", "workers", "iterator", "seed")


@dataclass
class RenderConfig:
    view: Viewport = DEFAULT_VIEW
    max_iter: int = 255
    outfile: Path = field(default_factory=lambda: Path("mandelbrot.png"))
    workers: Optional[int] = None  # None => os.cpu_count()
    iterator: str = "expanded"
    seed: Complex = ORIGIN

    def validate(self) -> None:
        self.view.validate()
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be >= 0, got {self.max_iter}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        pick_iterator(self.iterator)


def config_from_dict(data: Dict[str, Any], base: Optional[RenderConfig] = None) -> RenderConfig:
    """Overlay a plain mapping (as read from YAML) onto ``base``."""
    cfg = base if base is not None else RenderConfig()
    unknown = set(data) - set(TOP_LEVEL_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    view_data = data.get("view") or {}
    if not isinstance(view_data, dict):
        raise ValueError("'view' must be a mapping")
    unknown = set(view_data) - set(VIEW_KEYS)
    if unknown:
        raise ValueError(f"Unknown view keys: {sorted(unknown)}")
    bounds = {key: getattr(cfg.view, key) for key in VIEW_KEYS}
    bounds.update(view_data)
    view = Viewport.create(**bounds)

    updates: Dict[str, Any] = {"view": view}
    if "max_iter" in data:
        updates["max_iter"] = int(data["max_iter"])
    if "outfile" in data:
        updates["outfile"] = Path(data["outfile"])
    if "workers" in data:
        updates["workers"] = None if data["workers"] is None else int(data["workers"])
    if "iterator" in data:
        updates["iterator"] = str(data["iterator"])
    if "seed" in data:
        updates["seed"] = parse_complex(str(data["seed"]))

    cfg = replace(cfg, **updates)
    cfg.validate()
    return cfg


def load_config(path: str | Path, base: Optional[RenderConfig] = None) -> RenderConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")
    return config_from_dict(data, base)
