from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..model import Vector, dot, scale, subtract


@dataclass(frozen=True)
class ForceModel:
    """Softened Newtonian gravity between point masses.

    The acceleration on body i from body j is::

        G * m_j * (r_j - r_i) / (|r_j - r_i|^2 + eps^2)^(3/2)

    ``softening_length`` must be strictly positive so the denominator never
    reaches zero, even for coincident bodies.
    """

    gravitational_constant: float = 1.0
    softening_length: float = 1e-3

    def __post_init__(self) -> None:
        if not math.isfinite(self.gravitational_constant) or self.gravitational_constant <= 0:
            raise ValueError("gravitational_constant must be positive")
        if not math.isfinite(self.softening_length) or self.softening_length <= 0:
            raise ValueError("softening_length must be positive")

    @property
    def softening_squared(self) -> float:
        return self.softening_length * self.softening_length

    def pair_acceleration(self, position_i: Vector, position_j: Vector, mass_j: float) -> Vector:
        delta = subtract(position_j, position_i)
        denom = (dot(delta, delta) + self.softening_squared) ** 1.5
        return scale(delta, self.gravitational_constant * mass_j / denom)

    def accelerations(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        positions = np.asarray(positions, dtype=float)
        masses = np.asarray(masses, dtype=float)
        count = positions.shape[0]
        result = np.zeros_like(positions)
        # Contributions are summed in ascending j for each i; reordering changes
        # the floating-point result and with it the chaotic trajectory.
        for i in range(count):
            total = np.zeros(positions.shape[1], dtype=float)
            for j in range(count):
                if j == i:
                    continue
                total = total + self.pair_acceleration(positions[i], positions[j], masses[j])
            result[i] = total
        return result

    def potential_energy(self, positions: np.ndarray, masses: np.ndarray) -> float:
        positions = np.asarray(positions, dtype=float)
        masses = np.asarray(masses, dtype=float)
        count = positions.shape[0]
        energy = 0.0
        for i in range(count):
            for j in range(i + 1, count):
                delta = subtract(positions[j], positions[i])
                distance = math.sqrt(dot(delta, delta) + self.softening_squared)
                energy -= self.gravitational_constant * masses[i] * masses[j] / distance
        return energy
