from __future__ import annotations

from typing import Iterable

import numpy as np

from ..errors import DegenerateVector

Vector = np.ndarray
SUPPORTED_DIMENSIONS = (2, 3)


def _freeze(arr: np.ndarray) -> Vector:
    arr.setflags(write=False)
    return arr


def vector(values: Iterable[float], *, dimension: int | None = None) -> Vector:
    arr = np.array(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if dimension is not None and arr.size != dimension:
        raise ValueError(f"Vector must have length {dimension}")
    return _freeze(arr)


def zeros(dimension: int) -> Vector:
    return _freeze(np.zeros(dimension, dtype=float))


def add(a: Vector, b: Vector) -> Vector:
    return _freeze(np.add(a, b, dtype=float))


def subtract(a: Vector, b: Vector) -> Vector:
    return _freeze(np.subtract(a, b, dtype=float))


def scale(a: Vector, factor: float) -> Vector:
    return _freeze(np.multiply(a, float(factor), dtype=float))


def dot(a: Vector, b: Vector) -> float:
    return float(np.dot(a, b))


def magnitude(a: Vector) -> float:
    return float(np.sqrt(dot(a, a)))


def normalize(a: Vector) -> Vector:
    """Return the unit vector along ``a``.

    Zero-length input raises :class:`DegenerateVector`; there is no fallback
    direction. The force model never normalizes, so hitting this from the
    physics path indicates a programming error.
    """
    norm = magnitude(a)
    if norm == 0.0:
        raise DegenerateVector("Cannot normalize a zero-length vector")
    return scale(a, 1.0 / norm)
