import numpy as np
import pytest

from three_body_workbench.core.errors import DegenerateVector
from three_body_workbench.core.model import add, dot, magnitude, normalize, scale, subtract, vector, zeros


def test_vector_arithmetic() -> None:
    a = vector([1.0, 2.0, 3.0])
    b = vector([4.0, -1.0, 0.5])

    np.testing.assert_array_equal(add(a, b), np.array([5.0, 1.0, 3.5]))
    np.testing.assert_array_equal(subtract(a, b), np.array([-3.0, 3.0, 2.5]))
    np.testing.assert_array_equal(scale(a, -2.0), np.array([-2.0, -4.0, -6.0]))
    assert dot(a, b) == pytest.approx(3.5)
    assert magnitude(vector([3.0, 4.0])) == pytest.approx(5.0)


def test_vectors_are_read_only_values() -> None:
    a = vector([1.0, 2.0])
    b = add(a, a)
    with pytest.raises(ValueError):
        a[0] = 10.0
    with pytest.raises(ValueError):
        b[1] = 10.0
    np.testing.assert_array_equal(a, np.array([1.0, 2.0]))


def test_vector_shape_checks() -> None:
    with pytest.raises(ValueError):
        vector([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(ValueError):
        vector([1.0, 2.0], dimension=3)
    assert zeros(3).shape == (3,)


def test_normalize() -> None:
    unit = normalize(vector([3.0, 4.0]))
    np.testing.assert_allclose(unit, np.array([0.6, 0.8]))
    assert magnitude(unit) == pytest.approx(1.0)


def test_normalize_zero_vector_is_reported() -> None:
    with pytest.raises(DegenerateVector):
        normalize(zeros(2))
