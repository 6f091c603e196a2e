import pytest

from loutil.numeric import (
    clamp,
    mean,
    mean_by,
    product,
    product_by,
    range_from,
    range_of,
    range_with_steps,
    sum_by,
    sum_of,
)


def identity(value):
    return value


def test_range_of():
    assert range_of(4) == [0, 1, 2, 3]
    assert range_of(-4) == [0, -1, -2, -3]
    assert range_of(0) == []


def test_range_from():
    assert range_from(1, 5) == [1, 2, 3, 4, 5]
    assert range_from(-1, -5) == [-1, -2, -3, -4, -5]
    assert range_from(10, 0) == []
    assert range_from(2.0, 3) == [2.0, 3.0, 4.0]
    assert range_from(-2.0, -3) == [-2.0, -3.0, -4.0]


def test_range_with_steps():
    assert range_with_steps(0, 20, 6) == [0, 6, 12, 18]
    assert range_with_steps(0, 3, -5) == []
    assert range_with_steps(1, 1, 0) == []
    assert range_with_steps(3, 2, 1) == []
    assert range_with_steps(1.0, 4.0, 2.0) == [1.0, 3.0]
    assert range_with_steps(-1.0, -4.0, -1.0) == [-1.0, -2.0, -3.0]


def test_clamp():
    assert clamp(0, -10, 10) == 0
    assert clamp(-42, -10, 10) == -10
    assert clamp(42, -10, 10) == 10


def test_sum_of():
    assert sum_of([2.3, 3.3, 4, 5.3]) == pytest.approx(14.9)
    assert sum_of([2, 3, 4, 5]) == 14
    assert sum_of([]) == 0
    assert sum_of([44 + 0j, 22 + 0j]) == 66 + 0j


def test_sum_by():
    assert sum_by([2.3, 3.3, 4, 5.3], identity) == pytest.approx(14.9)
    assert sum_by([2, 3, 4, 5], identity) == 14
    assert sum_by([], identity) == 0
    assert sum_by([44 + 0j, 22 + 0j], identity) == 66 + 0j


def test_product():
    assert product([2.3, 3.3, 4, 5.3]) == pytest.approx(160.908)
    assert product([2, 3, 4, 5]) == 120
    assert product([7, 8, 9, 0]) == 0
    assert product([7, -1, 9, 2]) == -126
    assert product([]) == 1
    assert product([44 + 0j, 22 + 0j]) == 968 + 0j
    assert product(None) == 1


def test_product_by():
    assert product_by([2.3, 3.3, 4, 5.3], identity) == pytest.approx(160.908)
    assert product_by([2, 3, 4, 5], identity) == 120
    assert product_by([7, 8, 9, 0], identity) == 0
    assert product_by([7, -1, 9, 2], identity) == -126
    assert product_by([], identity) == 1
    assert product_by([44 + 0j, 22 + 0j], identity) == 968 + 0j
    assert product_by(None, identity) == 1


def test_mean():
    assert mean([2.3, 3.3, 4, 5.3]) == pytest.approx(3.725)
    assert mean([2, 3, 4, 5]) == 3
    assert mean([]) == 0


def test_mean_truncates_toward_zero():
    assert mean([-2, -3, -4, -5]) == -3


def test_mean_by():
    assert mean_by([2.3, 3.3, 4, 5.3], identity) == pytest.approx(3.725)
    assert mean_by([2, 3, 4, 5], identity) == 3
    assert mean_by([], identity) == 0