from __future__ import annotations

from collections import deque
from typing import Deque, List

import numpy as np

DEFAULT_TRAIL_LENGTH = 300


class TrailBuffer:
    """Bounded per-body position history for drawing trails.

    Fed from successive simulation snapshots; the simulation itself keeps no
    history.
    """

    def __init__(self, body_count: int = 3, max_length: int = DEFAULT_TRAIL_LENGTH, dimension: int = 2) -> None:
        if body_count < 1:
            raise ValueError("body_count must be positive")
        if max_length < 1:
            raise ValueError("max_length must be positive")
        self._max_length = max_length
        self._dimension = dimension
        self._trails: List[Deque[np.ndarray]] = [deque(maxlen=max_length) for _ in range(body_count)]

    @property
    def body_count(self) -> int:
        return len(self._trails)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def max_length(self) -> int:
        return self._max_length

    def __len__(self) -> int:
        return len(self._trails[0])

    def clear(self) -> None:
        for trail in self._trails:
            trail.clear()

    def append(self, positions: np.ndarray) -> None:
        positions = np.asarray(positions, dtype=float)
        if positions.ndim != 2 or positions.shape[0] != self.body_count:
            raise ValueError(f"Expected {self.body_count} positions, got shape {positions.shape}")
        # An empty buffer adopts the dimension of whatever scenario feeds it next.
        if len(self) == 0:
            self._dimension = positions.shape[1]
        elif positions.shape[1] != self._dimension:
            raise ValueError(f"Expected {self._dimension}D positions, got {positions.shape[1]}D")
        for trail, pos in zip(self._trails, positions):
            trail.append(np.array(pos, dtype=float))

    def points(self, index: int) -> np.ndarray:
        trail = self._trails[index]
        if not trail:
            return np.zeros((0, self._dimension), dtype=float)
        return np.stack(list(trail))
