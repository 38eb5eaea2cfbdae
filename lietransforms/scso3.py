"""Rotations combined with a positive scale in 3D: the Lie group ScSO(3)."""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from lietransforms.so3 import SMALL_EPS, SO3, Quaternion


def _vector(values, size: int, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {arr.shape}")
    return arr


def _matrix(values, size: int, name: str = "matrix") -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size, size):
        raise ValueError(f"{name} must have shape ({size}, {size}), got {arr.shape}")
    return arr


class ScSO3:
    """A scaled rotation stored as a quaternion whose norm is the scale."""

    DOF: ClassVar[int] = 4

    __slots__ = ("_quaternion",)

    def __init__(self, quaternion: Quaternion | None = None):
        if quaternion is None:
            quaternion = Quaternion.identity()
        if quaternion.squared_norm() == 0.0:
            raise ValueError("quaternion must not be zero")
        self._quaternion = quaternion

    @classmethod
    def from_matrix(cls, scale_times_rotation) -> ScSO3:
        """Build from a 3x3 matrix equal to scale times a rotation matrix."""
        m = _matrix(scale_times_rotation, 3)
        # The diagonal of m m^T sums to the sum of all squared entries of m.
        squared_scale = float(np.sum(m * m)) / 3.0
        if squared_scale <= 0.0:
            raise ValueError("matrix has no positive scale")
        scale = math.sqrt(squared_scale)
        return cls(Quaternion.from_matrix(m / scale).scaled(scale))

    @classmethod
    def from_scale_and_rotation(cls, scale: float, rotation) -> ScSO3:
        """Build from a positive scale and an SO3 or a 3x3 rotation matrix."""
        if not scale > 0.0:
            raise ValueError(f"scale must be positive, got {scale}")
        if isinstance(rotation, SO3):
            unit = rotation.unit_quaternion
        else:
            unit = Quaternion.from_matrix(rotation).normalized()
        return cls(unit.scaled(scale))

    @property
    def quaternion(self) -> Quaternion:
        return self._quaternion

    @property
    def scale(self) -> float:
        return self._quaternion.norm()

    def _unit(self) -> Quaternion:
        return self._quaternion.normalized()

    def rotation_matrix(self) -> np.ndarray:
        return self._unit().rotation_matrix()

    def __mul__(self, other):
        if isinstance(other, ScSO3):
            return ScSO3(self._quaternion * other._quaternion)
        if isinstance(other, Quaternion):
            return NotImplemented
        xyz = _vector(other, 3, "vector")
        return self.scale * self._unit().rotate(xyz)

    def inverse(self) -> ScSO3:
        return ScSO3(self._quaternion.inverse())

    def matrix(self) -> np.ndarray:
        """The 3x3 matrix scale times rotation."""
        return self.scale * self.rotation_matrix()

    def adj(self) -> np.ndarray:
        res = np.eye(4)
        res[:3, :3] = self.rotation_matrix()
        return res

    @staticmethod
    def generator(i: int) -> np.ndarray:
        if not 0 <= i < 4:
            raise ValueError(f"generator index must be in 0..3, got {i}")
        e = np.zeros(4)
        e[i] = 1.0
        return ScSO3.hat(e)

    def log(self) -> np.ndarray:
        return self.log_and_theta()[0]

    def log_and_theta(self) -> tuple[np.ndarray, float]:
        """Tangent vector (omega, sigma) and the rotation angle."""
        omega, theta = SO3(self._unit()).log_and_theta()
        return np.concatenate([omega, [math.log(self.scale)]]), theta

    @staticmethod
    def exp(omega_sigma) -> ScSO3:
        return ScSO3.exp_and_theta(omega_sigma)[0]

    @staticmethod
    def exp_and_theta(omega_sigma) -> tuple[ScSO3, float]:
        """Group element of a tangent vector and the rotation angle."""
        v = _vector(omega_sigma, 4, "omega_sigma")
        so3, theta = SO3.exp_and_theta(v[:3])
        scale = math.exp(float(v[3]))
        return ScSO3(so3.unit_quaternion.scaled(scale)), theta

    @staticmethod
    def hat(v) -> np.ndarray:
        u = _vector(v, 4, "v")
        return np.array(
            [
                [u[3], -u[2], u[1]],
                [u[2], u[3], -u[0]],
                [-u[1], u[0], u[3]],
            ]
        )

    @staticmethod
    def vee(omega_hat) -> np.ndarray:
        m = _matrix(omega_hat, 3)
        if (
            abs(m[2, 1] + m[1, 2]) >= SMALL_EPS
            or abs(m[0, 2] + m[2, 0]) >= SMALL_EPS
            or abs(m[1, 0] + m[0, 1]) >= SMALL_EPS
        ):
            raise ValueError("matrix is not skew-symmetric off the diagonal")
        if abs(m[0, 0] - m[1, 1]) >= SMALL_EPS or abs(m[0, 0] - m[2, 2]) >= SMALL_EPS:
            raise ValueError("matrix diagonal entries differ")
        return np.array([m[2, 1], m[0, 2], m[1, 0], m[0, 0]])

    @staticmethod
    def lie_bracket(omega_sigma1, omega_sigma2) -> np.ndarray:
        a = _vector(omega_sigma1, 4, "omega_sigma1")
        b = _vector(omega_sigma2, 4, "omega_sigma2")
        return np.concatenate([np.cross(a[:3], b[:3]), [0.0]])

    @staticmethod
    def d_lie_bracket_ab_by_d_a(b) -> np.ndarray:
        u = _vector(b, 4, "b")
        res = np.zeros((4, 4))
        res[:3, :3] = -SO3.hat(u[:3])
        return res

    def __str__(self) -> str:
        omega = " ".join(f"{value:g}" for value in self.log()[:3])
        return f"{self.scale:g} * {omega}"

    def __repr__(self) -> str:
        return f"ScSO3({self._quaternion!r})"