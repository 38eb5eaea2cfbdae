"""Rotations in the plane: the Lie group SO(2) stored as a unit complex number."""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from lietransforms.so3 import SMALL_EPS


class SO2:
    """A planar rotation stored as a unit complex number."""

    DOF: ClassVar[int] = 2

    __slots__ = ("_unit_complex",)

    def __init__(self, unit_complex: complex = 1 + 0j):
        z = complex(unit_complex)
        magnitude = abs(z)
        if magnitude == 0.0:
            raise ValueError("complex number must not be zero")
        self._unit_complex = z / magnitude

    @classmethod
    def from_matrix(cls, matrix) -> SO2:
        r = np.asarray(matrix, dtype=float)
        if r.shape != (2, 2):
            raise ValueError(f"matrix must have shape (2, 2), got {r.shape}")
        return cls(complex(0.5 * (r[0, 0] + r[1, 1]), 0.5 * (r[1, 0] - r[0, 1])))

    @property
    def unit_complex(self) -> complex:
        return self._unit_complex

    def __mul__(self, other):
        if isinstance(other, SO2):
            return SO2(self._unit_complex * other._unit_complex)
        xy = np.asarray(other, dtype=float)
        if xy.shape != (2,):
            raise ValueError(f"vector must have shape (2,), got {xy.shape}")
        real, imag = self._unit_complex.real, self._unit_complex.imag
        return np.array([real * xy[0] - imag * xy[1], imag * xy[0] + real * xy[1]])

    def inverse(self) -> SO2:
        return SO2(self._unit_complex.conjugate())

    def matrix(self) -> np.ndarray:
        real, imag = self._unit_complex.real, self._unit_complex.imag
        return np.array([[real, -imag], [imag, real]])

    def adj(self) -> float:
        return 1.0

    @staticmethod
    def generator(i: int) -> np.ndarray:
        if i != 0:
            raise ValueError(f"generator index must be 0, got {i}")
        return SO2.hat(1.0)

    def log(self) -> float:
        return math.atan2(self._unit_complex.imag, self._unit_complex.real)

    @staticmethod
    def exp(theta: float) -> SO2:
        return SO2(complex(math.cos(theta), math.sin(theta)))

    @staticmethod
    def hat(omega: float) -> np.ndarray:
        v = float(omega)
        return np.array([[0.0, -v], [v, 0.0]])

    @staticmethod
    def vee(omega_hat) -> float:
        m = np.asarray(omega_hat, dtype=float)
        if m.shape != (2, 2):
            raise ValueError(f"matrix must have shape (2, 2), got {m.shape}")
        if abs(m[1, 0] + m[0, 1]) >= SMALL_EPS:
            raise ValueError("matrix is not skew-symmetric")
        return float(m[1, 0])

    @staticmethod
    def lie_bracket(omega1: float, omega2: float) -> float:
        """Return the Lie bracket, which vanishes since SO(2) is commutative."""
        h1 = SO2.hat(omega1)
        h2 = SO2.hat(omega2)
        return SO2.vee(h1 @ h2 - h2 @ h1)

    def __str__(self) -> str:
        return f"{self.log():g}"

    def __repr__(self) -> str:
        return f"SO2({self._unit_complex!r})"