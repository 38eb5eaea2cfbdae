"""Rigid motions in the plane: the Lie group SE(2)."""

from __future__ import annotations

import numbers
from typing import ClassVar

import numpy as np

from lietransforms.so2 import SO2
from lietransforms.so3 import SMALL_EPS


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


class SE2:
    """A planar rigid motion: a rotation followed by a translation."""

    DOF: ClassVar[int] = 3

    __slots__ = ("_so2", "_translation")

    def __init__(self, rotation=None, translation=None):
        """Build from an SO2, an angle in radians or a 2x2 rotation matrix."""
        if rotation is None:
            so2 = SO2()
        elif isinstance(rotation, SO2):
            so2 = rotation
        elif isinstance(rotation, numbers.Real):
            so2 = SO2.exp(float(rotation))
        else:
            so2 = SO2.from_matrix(rotation)
        self._so2 = so2
        if translation is None:
            self._translation = np.zeros(2)
        else:
            self._translation = _vector(translation, 2, "translation").copy()

    @property
    def so2(self) -> SO2:
        return self._so2

    @property
    def translation(self) -> np.ndarray:
        return self._translation.copy()

    def rotation_matrix(self) -> np.ndarray:
        return self._so2.matrix()

    def __mul__(self, other):
        if isinstance(other, SE2):
            return SE2(
                self._so2 * other._so2,
                self._translation + self._so2 * other._translation,
            )
        xy = _vector(other, 2, "vector")
        return self._so2 * xy + self._translation

    def inverse(self) -> SE2:
        so2_inv = self._so2.inverse()
        return SE2(so2_inv, so2_inv * (-self._translation))

    def log(self) -> np.ndarray:
        """Tangent vector (upsilon_x, upsilon_y, theta)."""
        theta = self._so2.log()
        half_theta = 0.5 * theta
        if abs(theta) < SMALL_EPS:
            k = 1.0 - (1.0 / 12.0) * theta * theta
        else:
            z = self._so2.unit_complex
            k = -(half_theta * z.imag) / (z.real - 1.0)
        v_inv = np.array([[k, half_theta], [-half_theta, k]])
        return np.concatenate([v_inv @ self._translation, [theta]])

    @staticmethod
    def exp(update) -> SE2:
        u = _vector(update, 3, "update")
        upsilon = u[:2]
        theta = float(u[2])
        so2 = SO2.exp(theta)
        if abs(theta) < SMALL_EPS:
            theta_sq = theta * theta
            sin_by_theta = 1.0 - (1.0 / 6.0) * theta_sq
            one_minus_cos_by_theta = 0.5 * theta - (1.0 / 24.0) * theta * theta_sq
        else:
            z = so2.unit_complex
            sin_by_theta = z.imag / theta
            one_minus_cos_by_theta = (1.0 - z.real) / theta
        v = np.array(
            [
                [sin_by_theta, -one_minus_cos_by_theta],
                [one_minus_cos_by_theta, sin_by_theta],
            ]
        )
        return SE2(so2, v @ upsilon)

    def matrix(self) -> np.ndarray:
        """Homogeneous 3x3 matrix."""
        m = np.eye(3)
        m[:2, :2] = self.rotation_matrix()
        m[:2, 2] = self._translation
        return m

    def adj(self) -> np.ndarray:
        m = np.eye(3)
        m[:2, :2] = self._so2.matrix()
        m[0, 2] = self._translation[1]
        m[1, 2] = -self._translation[0]
        return m

    @staticmethod
    def hat(v) -> np.ndarray:
        u = _vector(v, 3, "v")
        omega = np.zeros((3, 3))
        omega[:2, :2] = SO2.hat(u[2])
        omega[:2, 2] = u[:2]
        return omega

    @staticmethod
    def vee(omega_hat) -> np.ndarray:
        m = _matrix(omega_hat, 3)
        return np.array([m[0, 2], m[1, 2], SO2.vee(m[:2, :2])])

    @staticmethod
    def lie_bracket(v1, v2) -> np.ndarray:
        a = _vector(v1, 3, "v1")
        b = _vector(v2, 3, "v2")
        theta1, theta2 = a[2], b[2]
        return np.array(
            [
                -theta1 * b[1] + theta2 * a[1],
                theta1 * b[0] - theta2 * a[0],
                0.0,
            ]
        )

    @staticmethod
    def d_lie_bracket_ab_by_d_a(b) -> np.ndarray:
        u = _vector(b, 3, "b")
        theta2 = u[2]
        return np.array(
            [
                [0.0, theta2, -u[1]],
                [-theta2, 0.0, u[0]],
                [0.0, 0.0, 0.0],
            ]
        )

    def __str__(self) -> str:
        t = self._translation
        return f"{self._so2}\n{t[0]:g} {t[1]:g}"

    def __repr__(self) -> str:
        return f"SE2({self._so2!r}, {self._translation.tolist()!r})"