from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """A complex number as a pair of floats (real part ``x``, imaginary part ``iy``)."""

    x: float
    iy: float

    def __add__(self, other: "Complex") -> "Complex":
        return Complex(self.x + other.x, self.iy + other.iy)

    def __mul__(self, other: "Complex") -> "Complex":
        # (a+bi)(c+di) = (ac - bd) + (ad + bc)i
        new_x = self.x * other.x - self.iy * other.iy
        new_iy = self.x * other.iy + self.iy * other.x
        return Complex(new_x, new_iy)

    def square(self) -> "Complex":
        return self * self

    def escaped(self) -> bool:
        """True once |z| >= 2, compared as x^2 + y^2 >= 4 to skip the sqrt."""
        return (self.x * self.x + self.iy * self.iy) >= 4.0

    @classmethod
    def from_complex(cls, z: complex) -> "Complex":
        z = complex(z)
        return cls(z.real, z.imag)

    def to_complex(self) -> complex:
        return complex(self.x, self.iy)


ORIGIN = Complex(0.0, 0.0)
