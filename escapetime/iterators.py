"""
Escape-time evaluators for the quadratic map z_{n+1} = z_n^2 + c.

Both evaluators apply the escape test to z_n *before* each update, so the
returned count is the smallest n with |z_n|^2 >= 4, or ``max_iter`` when
the orbit stays bounded for that long.  They agree on every input:

    in_mandelbrot           -> uses the Complex operators (clear, slower)
    in_mandelbrot_expanded  -> inlines the real/imaginary update (fast path)
"""

from __future__ import annotations

from typing import Callable, Union

from escapetime.complex_arith import ORIGIN, Complex

Point = Union[Complex, complex]
Iterator = Callable[..., int]


def _as_point(c: Point) -> Complex:
    if isinstance(c, Complex):
        return c
    return Complex.from_complex(c)


def _check_max_iter(max_iter: int) -> None:
    if max_iter < 0:
        raise ValueError(f"max_iter must be >= 0, got {max_iter}")


def in_mandelbrot(c: Point, max_iter: int, seed: Complex = ORIGIN) -> int:
    """Escape time of ``c`` using the generic complex multiply."""
    _check_max_iter(max_iter)
    c = _as_point(c)
    zn = seed
    iterations = 0
    while not zn.escaped() and iterations < max_iter:
        zn = zn * zn + c
        iterations += 1
    return iterations


def in_mandelbrot_expanded(c: Point, max_iter: int, seed: Complex = ORIGIN) -> int:
    """
    Same result as in_mandelbrot, with the squares shared between the
    escape test and the update.
    """
    _check_max_iter(max_iter)
    c = _as_point(c)
    cx, cy = c.x, c.iy
    x, y = seed.x, seed.iy
    iterations = 0
    while iterations < max_iter:
        x2 = x * x
        y2 = y * y
        if x2 + y2 >= 4.0:
            break
        y = 2.0 * (x * y) + cy
        x = x2 - y2 + cx
        iterations += 1
    return iterations


ITERATORS = {
    "generic": in_mandelbrot,
    "expanded": in_mandelbrot_expanded,
}


def pick_iterator(name: str) -> Iterator:
    """Return the evaluator registered under ``name`` ("generic" or "expanded")."""
    key = name.lower()
    if key not in ITERATORS:
        raise ValueError(f"Unknown iterator: {name}")
    return ITERATORS[key]
