"""Rigid motions in space: the Lie group SE(3)."""

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


class SE3:
    """A rigid motion in 3D: a rotation followed by a translation."""

    DOF: ClassVar[int] = 6

    __slots__ = ("_so3", "_translation")

    def __init__(self, rotation=None, translation=None):
        """Build from an SO3, a quaternion or a 3x3 rotation matrix."""
        if rotation is None:
            so3 = SO3()
        elif isinstance(rotation, SO3):
            so3 = rotation
        elif isinstance(rotation, Quaternion):
            so3 = SO3(rotation)
        else:
            so3 = SO3.from_matrix(rotation)
        self._so3 = so3
        if translation is None:
            self._translation = np.zeros(3)
        else:
            self._translation = _vector(translation, 3, "translation").copy()

    @property
    def so3(self) -> SO3:
        return self._so3

    @property
    def translation(self) -> np.ndarray:
        return self._translation.copy()

    @property
    def unit_quaternion(self) -> Quaternion:
        return self._so3.unit_quaternion

    def rotation_matrix(self) -> np.ndarray:
        return self._so3.matrix()

    def __mul__(self, other):
        if isinstance(other, SE3):
            return SE3(
                self._so3 * other._so3,
                self._translation + self._so3 * other._translation,
            )
        xyz = _vector(other, 3, "vector")
        return self._so3 * xyz + self._translation

    def inverse(self) -> SE3:
        so3_inv = self._so3.inverse()
        return SE3(so3_inv, so3_inv * (-self._translation))

    def log(self) -> np.ndarray:
        """Tangent vector (upsilon, omega)."""
        omega, theta = self._so3.log_and_theta()
        omega_hat = SO3.hat(omega)
        omega_hat_sq = omega_hat @ omega_hat
        if theta < SMALL_EPS:
            v_inv = np.eye(3) - 0.5 * omega_hat + (1.0 / 12.0) * omega_hat_sq
        else:
            factor = (1.0 - theta / (2.0 * math.tan(0.5 * theta))) / (theta * theta)
            v_inv = np.eye(3) - 0.5 * omega_hat + factor * omega_hat_sq
        return np.concatenate([v_inv @ self._translation, omega])

    @staticmethod
    def exp(update) -> SE3:
        u = _vector(update, 6, "update")
        upsilon = u[:3]
        omega = u[3:]
        so3, theta = SO3.exp_and_theta(omega)
        if theta < SMALL_EPS:
            v = so3.matrix()
        else:
            omega_hat = SO3.hat(omega)
            theta_sq = theta * theta
            v = (
                np.eye(3)
                + (1.0 - math.cos(theta)) / theta_sq * omega_hat
                + (theta - math.sin(theta)) / (theta_sq * theta) * (omega_hat @ omega_hat)
            )
        return SE3(so3, v @ upsilon)

    def matrix(self) -> np.ndarray:
        """Homogeneous 4x4 matrix."""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix()
        m[:3, 3] = self._translation
        return m

    def adj(self) -> np.ndarray:
        r = self._so3.matrix()
        res = np.zeros((6, 6))
        res[:3, :3] = r
        res[3:, 3:] = r
        res[:3, 3:] = SO3.hat(self._translation) @ r
        return res

    @staticmethod
    def hat(v) -> np.ndarray:
        u = _vector(v, 6, "v")
        omega = np.zeros((4, 4))
        omega[:3, :3] = SO3.hat(u[3:])
        omega[:3, 3] = u[:3]
        return omega

    @staticmethod
    def vee(omega_hat) -> np.ndarray:
        m = _matrix(omega_hat, 4)
        return np.concatenate([m[:3, 3], SO3.vee(m[:3, :3])])

    @staticmethod
    def lie_bracket(v1, v2) -> np.ndarray:
        a = _vector(v1, 6, "v1")
        b = _vector(v2, 6, "v2")
        upsilon1, omega1 = a[:3], a[3:]
        upsilon2, omega2 = b[:3], b[3:]
        return np.concatenate(
            [
                np.cross(omega1, upsilon2) + np.cross(upsilon1, omega2),
                np.cross(omega1, omega2),
            ]
        )

    @staticmethod
    def d_lie_bracket_ab_by_d_a(b) -> np.ndarray:
        u = _vector(b, 6, "b")
        upsilon2, omega2 = u[:3], u[3:]
        res = np.zeros((6, 6))
        res[:3, :3] = -SO3.hat(omega2)
        res[:3, 3:] = -SO3.hat(upsilon2)
        res[3:, 3:] = -SO3.hat(omega2)
        return res

    def __str__(self) -> str:
        t = " ".join(f"{value:g}" for value in self._translation)
        return f"{self._so3}\n{t}"

    def __repr__(self) -> str:
        return f"SE3({self._so3!r}, {self._translation.tolist()!r})"