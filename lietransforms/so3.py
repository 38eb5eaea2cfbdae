"""Rotations in three dimensions: quaternions and the Lie group SO(3)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

SMALL_EPS = 1e-10


def _vector(values, size: int, name: str = "vector") -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {arr.shape}")
    return arr


def _matrix(values, size: int, name: str = "matrix") -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size, size):
        raise ValueError(f"{name} must have shape ({size}, {size}), got {arr.shape}")
    return arr


@dataclass(frozen=True)
class Quaternion:
    """A quaternion w + xi + yj + zk."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_matrix(cls, matrix) -> Quaternion:
        """Quaternion of a 3x3 rotation matrix."""
        m = _matrix(matrix, 3)
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            t = math.sqrt(trace + 1.0)
            w = 0.5 * t
            t = 0.5 / t
            return cls(
                w,
                (m[2, 1] - m[1, 2]) * t,
                (m[0, 2] - m[2, 0]) * t,
                (m[1, 0] - m[0, 1]) * t,
            )
        i = max(range(3), key=lambda k: m[k, k])
        j = (i + 1) % 3
        k = (j + 1) % 3
        t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        v = [0.0, 0.0, 0.0]
        v[i] = 0.5 * t
        t = 0.5 / t
        w = (m[k, j] - m[j, k]) * t
        v[j] = (m[j, i] + m[i, j]) * t
        v[k] = (m[k, i] + m[i, k]) * t
        return cls(w, v[0], v[1], v[2])

    @property
    def vec(self) -> np.ndarray:
        """The imaginary part as a 3-vector."""
        return np.array([self.x, self.y, self.z])

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def squared_norm(self) -> float:
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Quaternion:
        n = self.norm()
        if n == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return self.scaled(1.0 / n)

    def scaled(self, factor: float) -> Quaternion:
        return Quaternion(
            self.w * factor, self.x * factor, self.y * factor, self.z * factor
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        sq = self.squared_norm()
        if sq == 0.0:
            raise ValueError("a zero quaternion has no inverse")
        return self.conjugate().scaled(1.0 / sq)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def rotation_matrix(self) -> np.ndarray:
        """Rotation matrix, assuming the quaternion has unit length."""
        tx, ty, tz = 2.0 * self.x, 2.0 * self.y, 2.0 * self.z
        twx, twy, twz = tx * self.w, ty * self.w, tz * self.w
        txx, txy, txz = tx * self.x, ty * self.x, tz * self.x
        tyy, tyz, tzz = ty * self.y, tz * self.y, tz * self.z
        return np.array(
            [
                [1.0 - (tyy + tzz), txy - twz, txz + twy],
                [txy + twz, 1.0 - (txx + tzz), tyz - twx],
                [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
            ]
        )

    def rotate(self, vector) -> np.ndarray:
        """Rotate a 3-vector, assuming the quaternion has unit length."""
        v = _vector(vector, 3)
        q = self.vec
        uv = 2.0 * np.cross(q, v)
        return v + self.w * uv + np.cross(q, uv)


def _two_atan_nbyw_by_n(n: float, w: float) -> float:
    if n < SMALL_EPS:
        if abs(w) <= SMALL_EPS:
            raise ValueError("quaternion is degenerate: both parts are near zero")
        return 2.0 / w - 2.0 * (n * n) / (w * w * w)
    if w == 0.0:
        return math.copysign(math.pi, w) / n
    return 2.0 * math.atan(n / w) / n


class SO3:
    """A rotation in 3D stored as a unit quaternion."""

    DOF: ClassVar[int] = 3

    __slots__ = ("_quaternion",)

    def __init__(self, quaternion: Quaternion | None = None):
        if quaternion is None:
            quaternion = Quaternion.identity()
        if quaternion.squared_norm() <= SMALL_EPS:
            raise ValueError("quaternion is too close to zero")
        self._quaternion = quaternion.normalized()

    @classmethod
    def from_matrix(cls, matrix) -> SO3:
        return cls(Quaternion.from_matrix(matrix))

    @classmethod
    def from_euler(cls, rot_x: float, rot_y: float, rot_z: float) -> SO3:
        """Rotation exp(x) * exp(y) * exp(z) about the coordinate axes."""
        return (
            cls.exp([rot_x, 0.0, 0.0])
            * cls.exp([0.0, rot_y, 0.0])
            * cls.exp([0.0, 0.0, rot_z])
        )

    @property
    def unit_quaternion(self) -> Quaternion:
        return self._quaternion

    def __mul__(self, other):
        if isinstance(other, SO3):
            return SO3(self._quaternion * other._quaternion)
        if isinstance(other, Quaternion):
            return NotImplemented
        return self._quaternion.rotate(other)

    def inverse(self) -> SO3:
        return SO3(self._quaternion.conjugate())

    def matrix(self) -> np.ndarray:
        return self._quaternion.rotation_matrix()

    def adj(self) -> np.ndarray:
        return self.matrix()

    @staticmethod
    def generator(i: int) -> np.ndarray:
        if not 0 <= i < 3:
            raise ValueError(f"generator index must be 0, 1 or 2, got {i}")
        e = np.zeros(3)
        e[i] = 1.0
        return SO3.hat(e)

    def log(self) -> np.ndarray:
        return self.log_and_theta()[0]

    def log_and_theta(self) -> tuple[np.ndarray, float]:
        """Tangent vector of the rotation and its angle."""
        q = self._quaternion
        vec = q.vec
        n = float(np.linalg.norm(vec))
        factor = _two_atan_nbyw_by_n(n, q.w)
        return factor * vec, factor * n

    @staticmethod
    def exp(omega) -> SO3:
        return SO3.exp_and_theta(omega)[0]

    @staticmethod
    def exp_and_theta(omega) -> tuple[SO3, float]:
        """Rotation of a tangent vector and the vector's length."""
        w = _vector(omega, 3, "omega")
        theta = float(np.linalg.norm(w))
        half_theta = 0.5 * theta
        real_factor = math.cos(half_theta)
        if theta < SMALL_EPS:
            theta_sq = theta * theta
            theta_po4 = theta_sq * theta_sq
            imag_factor = 0.5 - 0.0208333 * theta_sq + 0.000260417 * theta_po4
        else:
            imag_factor = math.sin(half_theta) / theta
        quaternion = Quaternion(
            real_factor,
            imag_factor * w[0],
            imag_factor * w[1],
            imag_factor * w[2],
        )
        return SO3(quaternion), theta

    @staticmethod
    def hat(omega) -> np.ndarray:
        v = _vector(omega, 3, "omega")
        return np.array(
            [
                [0.0, -v[2], v[1]],
                [v[2], 0.0, -v[0]],
                [-v[1], v[0], 0.0],
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
            raise ValueError("matrix is not skew-symmetric")
        return np.array([m[2, 1], m[0, 2], m[1, 0]])

    @staticmethod
    def lie_bracket(omega1, omega2) -> np.ndarray:
        return np.cross(_vector(omega1, 3), _vector(omega2, 3))

    @staticmethod
    def d_lie_bracket_ab_by_d_a(b) -> np.ndarray:
        return -SO3.hat(b)

    def __str__(self) -> str:
        return " ".join(f"{value:g}" for value in self.log())

    def __repr__(self) -> str:
        return f"SO3({self._quaternion!r})"