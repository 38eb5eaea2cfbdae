import math

import numpy as np
import pytest
from scipy.linalg import expm

from lietransforms.se2 import SE2
from lietransforms.so2 import SO2
from lietransforms.so3 import SMALL_EPS

PI = 3.14159265


def _elements():
    return [
        SE2(0.0, [0, 0]),
        SE2(0.2, [10, 0]),
        SE2(0.0, [0, 100]),
        SE2(-1.0, [20, -1]),
        SE2(0.00001, [-0.00000001, 0.0000000001]),
        SE2(0.2, [0, 0]) * SE2(PI, [0, 0]) * SE2(-0.2, [0, 0]),
        SE2(0.3, [2, 0]) * SE2(PI, [0, 0]) * SE2(-0.3, [0, 6]),
    ]


VECS = [
    [0, 0, 0],
    [1, 0, 0],
    [0, 1, 1],
    [-1, 1, 0],
    [20, -1, -1],
    [30, 5, 20],
]


@pytest.mark.parametrize("element", _elements())
def test_exp_of_log_restores_element(element):
    restored = SE2.exp(element.log()).matrix()
    assert np.linalg.norm(element.matrix() - restored) <= SMALL_EPS


@pytest.mark.parametrize("element", _elements())
def test_transform_vector_matches_matrix(element):
    p = np.array([1.0, 2.0])
    t = SE2.matrix(element)
    expected = t[:2, :2] @ p + t[:2, 2]
    assert np.linalg.norm(element * p - expected) <= SMALL_EPS


@pytest.mark.parametrize("element", _elements())
def test_inverse_gives_identity(element):
    product = element.matrix() @ SE2.inverse(element).matrix()
    assert np.linalg.norm(product - np.eye(3)) <= SMALL_EPS


@pytest.mark.parametrize("v", VECS)
def test_hat_vee_round_trip(v):
    assert np.linalg.norm(np.asarray(v, float) - SE2.vee(SE2.hat(v))) <= SMALL_EPS


@pytest.mark.parametrize("v1", VECS)
@pytest.mark.parametrize("v2", VECS)
def test_lie_bracket_matches_commutator(v1, v2):
    h1, h2 = SE2.hat(v1), SE2.hat(v2)
    expected = SE2.vee(h1 @ h2 - h2 @ h1)
    assert np.linalg.norm(SE2.lie_bracket(v1, v2) - expected) <= SMALL_EPS


@pytest.mark.parametrize("v", VECS)
def test_exp_matches_matrix_exponential(v):
    diff = SE2.exp(v).matrix() - expm(SE2.hat(v))
    assert np.linalg.norm(diff) <= 1e-8


@pytest.mark.parametrize("v1", VECS)
@pytest.mark.parametrize("v2", VECS)
def test_bracket_derivative_is_linear_map(v1, v2):
    expected = SE2.lie_bracket(v1, v2)
    got = SE2.d_lie_bracket_ab_by_d_a(v2) @ np.asarray(v1, float)
    assert np.allclose(got, expected)


@pytest.mark.parametrize("v", [[0.3, -0.2, 0.4], [1.0, 2.0, -0.7], [0.0, 0.5, 0.0]])
def test_adjoint_conjugates_exponential(v):
    t = SE2(0.8, [1.5, -2.0])
    lhs = (t * SE2.exp(v) * t.inverse()).matrix()
    rhs = SE2.exp(t.adj() @ np.asarray(v, float)).matrix()
    assert np.allclose(lhs, rhs, atol=1e-12)


def test_default_is_identity():
    assert np.array_equal(SE2().matrix(), np.eye(3))


def test_exp_of_pure_translation():
    element = SE2.exp([1.0, 2.0, 0.0])
    assert np.allclose(element.translation, [1.0, 2.0])
    assert np.allclose(element.rotation_matrix(), np.eye(2))


def test_constructors_agree():
    theta = 0.4
    a = SE2(theta, [1, 2])
    b = SE2(SO2.exp(theta), [1, 2])
    c = SE2([[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]], [1, 2])
    assert np.allclose(a.matrix(), b.matrix())
    assert np.allclose(a.matrix(), c.matrix())


def test_adj_values():
    adj = SE2(0.0, [3.0, 4.0]).adj()
    assert np.allclose(adj, [[1, 0, 4], [0, 1, -3], [0, 0, 1]])


def test_hat_values():
    assert np.allclose(SE2.hat([1, 2, 3]), [[0, -3, 1], [3, 0, 2], [0, 0, 0]])


def test_vee_rejects_non_skew():
    with pytest.raises(ValueError):
        SE2.vee([[1, 1, 0], [2, 0, 0], [0, 0, 0]])


def test_bad_translation_shape():
    with pytest.raises(ValueError):
        SE2(0.0, [1, 2, 3])


def test_translation_is_a_copy():
    element = SE2(0.0, [1, 2])
    t = element.translation
    t[0] = 99.0
    assert np.allclose(element.translation, [1, 2])


def test_str():
    assert str(SE2(0.5, [1, 2])) == "0.5\n1 2"