"""Similarity transformations in 3D: the Lie group Sim(3)."""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from lietransforms.scso3 import ScSO3
from lietransforms.se3 import SE3
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


def _calc_w(theta: float, sigma: float, scale: float, omega_hat: np.ndarray) -> np.ndarray:
    if abs(sigma) < SMALL_EPS:
        c = 1.0
        if theta < SMALL_EPS:
            a = 0.5
            b = 1.0 / 6.0
        else:
            theta_sq = theta * theta
            a = (1.0 - math.cos(theta)) / theta_sq
            b = (theta - math.sin(theta)) / (theta_sq * theta)
    else:
        c = (scale - 1.0) / sigma
        if theta < SMALL_EPS:
            sigma_sq = sigma * sigma
            a = ((sigma - 1.0) * scale + 1.0) / sigma_sq
            b = ((0.5 * sigma * sigma - sigma + 1.0) * scale) / (sigma_sq * sigma)
        else:
            theta_sq = theta * theta
            sa = scale * math.sin(theta)
            sb = scale * math.cos(theta)
            denom = theta_sq + sigma * sigma
            a = (sa * sigma + (1.0 - sb) * theta) / (theta * denom)
            b = (c - ((sb - 1.0) * sigma + sa * theta) / denom) / theta_sq
    return a * omega_hat + b * (omega_hat @ omega_hat) + c * np.eye(3)


class Sim3:
    """A similarity transform: scaled rotation followed by a translation."""

    DOF: ClassVar[int] = 7

    __slots__ = ("_scso3", "_translation")

    def __init__(self, scso3=None, translation=None):
        """Build from a ScSO3 (or a quaternion whose norm is the scale)."""
        if scso3 is None:
            scso3 = ScSO3()
        elif isinstance(scso3, Quaternion):
            scso3 = ScSO3(scso3)
        elif not isinstance(scso3, ScSO3):
            raise TypeError("scso3 must be a ScSO3 or a Quaternion")
        self._scso3 = scso3
        if translation is None:
            self._translation = np.zeros(3)
        else:
            self._translation = _vector(translation, 3, "translation").copy()

    @classmethod
    def from_se3(cls, se3: SE3) -> Sim3:
        return cls(ScSO3.from_scale_and_rotation(1.0, se3.so3), se3.translation)

    def to_se3(self) -> SE3:
        """The rigid motion with the same rotation and translation; scale dropped."""
        return SE3(self.so3, self._translation)

    @property
    def scso3(self) -> ScSO3:
        return self._scso3

    @property
    def translation(self) -> np.ndarray:
        return self._translation.copy()

    @property
    def quaternion(self) -> Quaternion:
        return self._scso3.quaternion

    @property
    def scale(self) -> float:
        return self._scso3.scale

    def rotation_matrix(self) -> np.ndarray:
        return self._scso3.rotation_matrix()

    @property
    def so3(self) -> SO3:
        return SO3(self._scso3.quaternion)

    def __mul__(self, other):
        if isinstance(other, Sim3):
            return Sim3(
                self._scso3 * other._scso3,
                self._scso3 * other._translation + self._translation,
            )
        xyz = _vector(other, 3, "vector")
        return self._scso3 * xyz + self._translation

    def inverse(self) -> Sim3:
        inv = self._scso3.inverse()
        return Sim3(inv, -(inv * self._translation))

    def matrix(self) -> np.ndarray:
        """Homogeneous 4x4 matrix."""
        m = np.eye(4)
        m[:3, :3] = self.scale * self.rotation_matrix()
        m[:3, 3] = self._translation
        return m

    def adj(self) -> np.ndarray:
        r = self._scso3.rotation_matrix()
        res = np.zeros((7, 7))
        res[:3, :3] = self.scale * r
        res[:3, 3:6] = SO3.hat(self._translation) @ r
        res[:3, 6] = -self._translation
        res[3:6, 3:6] = r
        res[6, 6] = 1.0
        return res

    def log(self) -> np.ndarray:
        """Tangent vector (upsilon, omega, sigma)."""
        omega_sigma, theta = self._scso3.log_and_theta()
        omega = omega_sigma[:3]
        sigma = float(omega_sigma[3])
        w = _calc_w(theta, sigma, self.scale, SO3.hat(omega))
        upsilon = np.linalg.solve(w, self._translation)
        return np.concatenate([upsilon, omega, [sigma]])

    @staticmethod
    def exp(vect) -> Sim3:
        v = _vector(vect, 7, "vect")
        upsilon = v[:3]
        omega = v[3:6]
        sigma = float(v[6])
        scso3, theta = ScSO3.exp_and_theta(v[3:])
        w = _calc_w(theta, sigma, scso3.scale, SO3.hat(omega))
        return Sim3(scso3, w @ upsilon)

    @staticmethod
    def hat(v) -> np.ndarray:
        u = _vector(v, 7, "v")
        omega_hat = np.zeros((4, 4))
        omega_hat[:3, :3] = ScSO3.hat(u[3:])
        omega_hat[:3, 3] = u[:3]
        return omega_hat

    @staticmethod
    def vee(omega_hat) -> np.ndarray:
        m = _matrix(omega_hat, 4)
        return np.concatenate([m[:3, 3], ScSO3.vee(m[:3, :3])])

    @staticmethod
    def lie_bracket(v1, v2) -> np.ndarray:
        a = _vector(v1, 7, "v1")
        b = _vector(v2, 7, "v2")
        upsilon1, omega1, sigma1 = a[:3], a[3:6], a[6]
        upsilon2, omega2, sigma2 = b[:3], b[3:6], b[6]
        head = (
            SO3.hat(omega1) @ upsilon2
            + SO3.hat(upsilon1) @ omega2
            + sigma1 * upsilon2
            - sigma2 * upsilon1
        )
        return np.concatenate([head, np.cross(omega1, omega2), [0.0]])

    @staticmethod
    def d_lie_bracket_ab_by_d_a(b) -> np.ndarray:
        u = _vector(b, 7, "b")
        upsilon2, omega2, sigma2 = u[:3], u[3:6], u[6]
        res = np.zeros((7, 7))
        res[:3, :3] = -SO3.hat(omega2) - sigma2 * np.eye(3)
        res[:3, 3:6] = -SO3.hat(upsilon2)
        res[:3, 6] = upsilon2
        res[3:6, 3:6] = -SO3.hat(omega2)
        return res

    def __str__(self) -> str:
        t = " ".join(f"{value:g}" for value in self._translation)
        return f"{self._scso3}\n{t}"

    def __repr__(self) -> str:
        return f"Sim3({self._scso3!r}, {self._translation.tolist()!r})"