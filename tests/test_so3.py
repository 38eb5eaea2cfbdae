import itertools
import math

import numpy as np
import pytest
from scipy.linalg import expm

from lietransforms.so3 import SMALL_EPS, SO3, Quaternion


def _rotations():
    return [
        SO3(Quaternion(0.1e-11, 0.0, 1.0, 0.0)),
        SO3(Quaternion(-1.0, 0.00001, 0.0, 0.0)),
        SO3.exp([0.2, 0.5, 0.0]),
        SO3.exp([0.2, 0.5, -1.0]),
        SO3.exp([0.0, 0.0, 0.0]),
        SO3.exp([0.0, 0.0, 0.00001]),
        SO3.exp([math.pi, 0.0, 0.0]),
        SO3.exp([0.2, 0.5, 0.0])
        * SO3.exp([math.pi, 0.0, 0.0])
        * SO3.exp([-0.2, -0.5, -0.0]),
        SO3.exp([0.3, 0.5, 0.1])
        * SO3.exp([math.pi, 0.0, 0.0])
        * SO3.exp([-0.3, -0.5, -0.1]),
    ]


ROTATIONS = _rotations()

VECTORS = [
    np.array([0.0, 0.0, 0.0]),
    np.array([1.0, 0.0, 0.0]),
    np.array([0.0, 1.0, 0.0]),
    np.array([math.pi / 2, math.pi / 2, 0.0]),
    np.array([-1.0, 1.0, 0.0]),
    np.array([20.0, -1.0, 0.0]),
    np.array([30.0, 5.0, -1.0]),
]


@pytest.mark.parametrize("rotation", ROTATIONS)
def test_exp_of_log_reproduces_matrix(rotation):
    omega, theta = rotation.log_and_theta()
    diff = rotation.matrix() - SO3.exp(omega).matrix()
    assert np.linalg.norm(diff) <= SMALL_EPS
    assert -math.pi <= theta <= math.pi


@pytest.mark.parametrize("rotation", ROTATIONS)
def test_transform_vector_matches_matrix(rotation):
    p = np.array([1.0, 2.0, 4.0])
    assert np.linalg.norm(rotation * p - SO3.matrix(rotation) @ p) <= SMALL_EPS


@pytest.mark.parametrize("rotation", ROTATIONS)
def test_inverse(rotation):
    product = rotation.matrix() @ SO3.inverse(rotation).matrix()
    assert np.linalg.norm(product - np.eye(3)) <= SMALL_EPS


@pytest.mark.parametrize("a, b", list(itertools.product(VECTORS, repeat=2)))
def test_lie_bracket_matches_commutator(a, b):
    commutator = SO3.hat(a) @ SO3.hat(b) - SO3.hat(b) @ SO3.hat(a)
    diff = SO3.lie_bracket(a, b) - SO3.vee(commutator)
    assert np.linalg.norm(diff) <= SMALL_EPS


@pytest.mark.parametrize("omega", VECTORS)
def test_exp_matches_matrix_exponential_of_hat(omega):
    diff = SO3.exp(omega).matrix() - expm(SO3.hat(omega))
    assert np.linalg.norm(diff) <= 1e-9


@pytest.mark.parametrize("omega", VECTORS)
def test_vee_inverts_hat(omega):
    assert np.allclose(SO3.vee(SO3.hat(omega)), omega)


def test_hat_values():
    expected = np.array([[0.0, -3.0, 2.0], [3.0, 0.0, -1.0], [-2.0, 1.0, 0.0]])
    assert np.array_equal(SO3.hat([1.0, 2.0, 3.0]), expected)


def test_vee_rejects_non_skew_matrix():
    with pytest.raises(ValueError):
        SO3.vee([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])


@pytest.mark.parametrize("i", [0, 1, 2])
def test_generators_are_hat_of_unit_vectors(i):
    e = np.zeros(3)
    e[i] = 1.0
    assert np.array_equal(SO3.generator(i), SO3.hat(e))


@pytest.mark.parametrize("i", [-1, 3])
def test_generator_out_of_range(i):
    with pytest.raises(ValueError):
        SO3.generator(i)


@pytest.mark.parametrize("a, b", [(VECTORS[1], VECTORS[2]), (VECTORS[6], VECTORS[3])])
def test_d_lie_bracket_is_linear_map_of_bracket(a, b):
    assert np.allclose(SO3.d_lie_bracket_ab_by_d_a(b) @ a, SO3.lie_bracket(a, b))


def test_zero_quaternion_is_rejected():
    with pytest.raises(ValueError):
        SO3(Quaternion(0.0, 0.0, 0.0, 0.0))


def test_default_is_identity():
    assert np.array_equal(SO3().matrix(), np.eye(3))


def test_from_euler_is_product_of_axis_rotations():
    rotation = SO3.from_euler(0.1, -0.4, 0.7)
    expected = SO3.exp([0.1, 0, 0]) * SO3.exp([0, -0.4, 0]) * SO3.exp([0, 0, 0.7])
    assert np.allclose(rotation.matrix(), expected.matrix())


@pytest.mark.parametrize("rotation", ROTATIONS)
def test_from_matrix_round_trip(rotation):
    restored = SO3.from_matrix(rotation.matrix())
    assert np.linalg.norm(restored.matrix() - rotation.matrix()) <= SMALL_EPS


def test_adj_is_matrix():
    rotation = SO3.exp([0.2, 0.5, -1.0])
    assert np.array_equal(rotation.adj(), rotation.matrix())


def test_quaternion_product_of_units():
    assert Quaternion(0, 1, 0, 0) * Quaternion(0, 0, 1, 0) == Quaternion(0, 0, 0, 1)


def test_quaternion_inverse():
    q = Quaternion(1.0, 2.0, -3.0, 0.5)
    product = q * q.inverse()
    assert product.w == pytest.approx(1.0)
    assert np.allclose(product.vec, 0.0)


def test_quaternion_inverse_of_zero_raises():
    with pytest.raises(ValueError):
        Quaternion(0.0, 0.0, 0.0, 0.0).inverse()


def test_unit_quaternion_has_unit_norm():
    rotation = SO3(Quaternion(2.0, 1.0, 0.0, 0.0))
    assert rotation.unit_quaternion.norm() == pytest.approx(1.0)


def test_rotation_about_z_by_quarter_turn():
    rotation = SO3.exp([0.0, 0.0, math.pi / 2])
    assert np.allclose(rotation * [1.0, 0.0, 0.0], [0.0, 1.0, 0.0])


def test_str_shows_tangent_vector():
    assert str(SO3.exp([0.2, 0.5, 0.0])) == "0.2 0.5 0"