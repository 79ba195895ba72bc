"""
Viewport: the rectangle of the complex plane being rasterized, plus the
pixel grid laid over it.

Pixel (column, row) samples

    x = left + width * (column / x_resolution)
    y = top - height * (row / y_resolution)

so row 0 is the top of the image and y decreases going down.  Every column
0..x_resolution-1 and every row 0..y_resolution-1 is sampled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from escapetime.complex_arith import Complex


@dataclass(frozen=True)
class Viewport:
    left: float
    right: float
    top: float
    bottom: float
    x_resolution: int
    y_resolution: int

    @classmethod
    def create(cls, left, right, top, bottom, x_resolution, y_resolution) -> "Viewport":
        """Build a viewport and reject degenerate bounds or resolutions."""
        view = cls(
            left=float(left),
            right=float(right),
            top=float(top),
            bottom=float(bottom),
            x_resolution=int(x_resolution),
            y_resolution=int(y_resolution),
        )
        view.validate()
        return view

    @classmethod
    def centered(
        cls,
        center: Complex,
        width: float,
        height: float,
        x_resolution: int,
        y_resolution: int,
    ) -> "Viewport":
        half_w = width / 2.0
        half_h = height / 2.0
        return cls.create(
            left=center.x - half_w,
            right=center.x + half_w,
            top=center.iy + half_h,
            bottom=center.iy - half_h,
            x_resolution=x_resolution,
            y_resolution=y_resolution,
        )

    def validate(self) -> None:
        if self.x_resolution <= 0 or self.y_resolution <= 0:
            raise ValueError(
                f"Resolution must be positive, got {self.x_resolution}x{self.y_resolution}"
            )
        bounds = (self.left, self.right, self.top, self.bottom)
        if not all(math.isfinite(b) for b in bounds):
            raise ValueError(f"Viewport bounds must be finite, got {bounds}")
        if self.right <= self.left:
            raise ValueError(f"right ({self.right}) must be greater than left ({self.left})")
        if self.top <= self.bottom:
            raise ValueError(f"top ({self.top}) must be greater than bottom ({self.bottom})")

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center(self) -> Complex:
        return Complex((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    @property
    def pixel_width(self) -> float:
        return self.width / self.x_resolution

    @property
    def pixel_height(self) -> float:
        return self.height / self.y_resolution

    @property
    def shape(self) -> Tuple[int, int]:
        """Iteration grid shape, indexed (column, row)."""
        return (self.x_resolution, self.y_resolution)

    def column_x(self, column: int) -> float:
        return self.left + self.width * (column / self.x_resolution)

    def row_y(self, row: int) -> float:
        return self.top - self.height * (row / self.y_resolution)

    def pixel_to_point(self, column: int, row: int) -> Complex:
        return Complex(self.column_x(column), self.row_y(row))

    def columns(self) -> range:
        return range(self.x_resolution)

    def rows(self) -> range:
        return range(self.y_resolution)

    def points_in_column(self, column: int) -> Iterator[Tuple[int, Complex]]:
        """Yield (row, point) for every row of one vertical line."""
        x = self.column_x(column)
        for row in self.rows():
            yield row, Complex(x, self.row_y(row))

    def nearest_pixel(self, point: Complex) -> Tuple[int, int]:
        """Pixel whose sample lies closest to ``point``, clamped to the grid."""
        column = round((point.x - self.left) / self.pixel_width)
        row = round((self.top - point.iy) / self.pixel_height)
        column = max(0, min(column, self.x_resolution - 1))
        row = max(0, min(row, self.y_resolution - 1))
        return int(column), int(row)

    def zoomed(self, target: Complex, factor: float) -> "Viewport":
        """Same resolution, centered on ``target``, with both spans scaled by ``factor``."""
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")
        return Viewport.centered(
            target,
            self.width * factor,
            self.height * factor,
            self.x_resolution,
            self.y_resolution,
        )
