"""Mixed-operation tests for EuclideanVector and its utilities."""

import pytest

from euclidean_vector import EuclideanVector, dot, euclidean_norm, unit


@pytest.fixture
def a():
    return EuclideanVector.of(2.54, 7.98, -3.76, 4.25)


@pytest.fixture
def b():
    return EuclideanVector.of(-8.964, 5.2, 13.19, -5.2)


def test_expression_chain(a, b):
    assert (a * 0.3 + b / -2.5).to_list() == pytest.approx(
        [4.3476, 0.314, -6.404, 3.355]
    )
    result = a / 3.598 - b * 3.14
    assert result.to_list() == pytest.approx(
        [28.85290, -14.11010, -42.46162, 17.50921], rel=1e-4
    )
    assert str(result) == "[28.8529 -14.1101 -42.4616 17.5092]"


def test_inequality(a, b):
    assert a != b
    assert a * 0.5 != b * 3.14


def test_mutate_then_utilities(a, b):
    a += b
    a *= 3.14
    assert a.to_list() == pytest.approx(
        [-20.1714, 41.3852, 29.6102, -2.983], rel=1e-4
    )
    assert euclidean_norm(a) == pytest.approx(54.8204, rel=1e-4)
    assert unit(a).to_list() == pytest.approx(
        [-0.367953, 0.754923, 0.540131, -0.054414], rel=1e-4
    )

    a[3] = 3.1415926
    assert euclidean_norm(a) == pytest.approx(54.8293, rel=1e-4)
    assert unit(a).to_list() == pytest.approx(
        [-0.367894, 0.754801, 0.540043, 0.0572977], rel=1e-4
    )
    assert dot(a, b) == pytest.approx(770.24136752)

    b /= 0.45
    assert b.to_list() == pytest.approx(
        [-19.92, 11.5556, 29.3111, -11.5556], rel=1e-4
    )
    assert dot(a, b) == pytest.approx(1711.6474833778)


def test_move_then_reassign_round_trip(a):
    values = a.to_list()
    moved = a.move()
    assert a.dimensions() == 0
    assert EuclideanVector.from_iterable(moved.to_list()).to_list() == values
    a.move_assign(moved)
    assert a.to_list() == values
    assert moved.dimensions() == 0
