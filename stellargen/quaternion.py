"""Quaternions with Hamilton multiplication (i² = j² = k² = ijk = -1)."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from numbers import Real
from typing import Iterator, Sequence, Tuple, Union

Scalar = Union[int, float]


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion ``r + i·I + j·J + k·K``.

    Adding or subtracting a real number changes only the real part;
    multiplying or dividing by one scales every component.
    """

    r: float = 0.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    @classmethod
    def from_parts(cls, real: Scalar, imag: Sequence[Scalar]) -> "Quaternion":
        """Build a quaternion from a real part and a three-component imaginary part."""
        if len(imag) != 3:
            raise ValueError("imaginary part must have exactly three components")
        return cls(real, imag[0], imag[1], imag[2])

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> float:
        return astuple(self)[index]

    @property
    def real(self) -> float:
        return self.r

    def imag(self) -> Tuple[float, float, float]:
        """The imaginary components ``(i, j, k)``."""
        return (self.i, self.j, self.k)

    def norm2(self) -> float:
        """Squared norm."""
        return self.r * self.r + self.i * self.i + self.j * self.j + self.k * self.k

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def normalized(self) -> "Quaternion":
        """This quaternion scaled to unit norm; raises ZeroDivisionError for zero."""
        n = self.norm()
        if n == 0:
            raise ZeroDivisionError("cannot normalize a zero quaternion")
        return self / n

    def conjugate(self) -> "Quaternion":
        """The conjugate: the imaginary part negated."""
        return Quaternion(self.r, -self.i, -self.j, -self.k)

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.r, -self.i, -self.j, -self.k)

    def __add__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            return Quaternion(self.r + other.r, self.i + other.i, self.j + other.j, self.k + other.k)
        if isinstance(other, Real):
            return Quaternion(self.r + other, self.i, self.j, self.k)
        return NotImplemented

    def __radd__(self, other: object) -> "Quaternion":
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __sub__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            return Quaternion(self.r - other.r, self.i - other.i, self.j - other.j, self.k - other.k)
        if isinstance(other, Real):
            return Quaternion(self.r - other, self.i, self.j, self.k)
        return NotImplemented

    def __rsub__(self, other: object) -> "Quaternion":
        if isinstance(other, Real):
            return -self + other
        return NotImplemented

    def __mul__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            r, i, j, k = self.r, self.i, self.j, self.k
            qr, qi, qj, qk = other.r, other.i, other.j, other.k
            return Quaternion(
                r * qr - i * qi - j * qj - k * qk,
                r * qi + i * qr + j * qk - k * qj,
                r * qj + j * qr + k * qi - i * qk,
                r * qk + k * qr + i * qj - j * qi,
            )
        if isinstance(other, Real):
            return Quaternion(self.r * other, self.i * other, self.j * other, self.k * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Quaternion":
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar: object) -> "Quaternion":
        if isinstance(scalar, Real):
            return Quaternion(self.r / scalar, self.i / scalar, self.j / scalar, self.k / scalar)
        return NotImplemented