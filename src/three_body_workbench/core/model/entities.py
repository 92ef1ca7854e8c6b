from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

import numpy as np

from ..errors import InvalidScenario
from .vector import SUPPORTED_DIMENSIONS, Vector, vector, zeros

BODY_IDS = ("A", "B", "C")


class MassPointLike(Protocol):
    mass: float
    position: Vector
    velocity: Vector


@dataclass(eq=False)
class Body:
    """One point mass.

    ``acceleration`` holds the accelerations evaluated by the last committed
    step and is zero before the first step. Only the simulation driver
    assigns to these fields.
    """

    body_id: str
    mass: float
    position: Vector = field(default_factory=lambda: zeros(2))
    velocity: Vector = field(default_factory=lambda: zeros(2))
    acceleration: Vector | None = None

    def __post_init__(self) -> None:
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise InvalidScenario(f"Body {self.body_id}: mass must be positive, got {self.mass}")
        self.mass = float(self.mass)
        self.position = vector(self.position)
        if self.position.size not in SUPPORTED_DIMENSIONS:
            raise InvalidScenario(f"Body {self.body_id}: position must be 2D or 3D")
        self.velocity = vector(self.velocity, dimension=self.position.size)
        if self.acceleration is None:
            self.acceleration = zeros(self.position.size)
        else:
            self.acceleration = vector(self.acceleration, dimension=self.position.size)

    @property
    def dimension(self) -> int:
        return int(self.position.size)

    @property
    def momentum(self) -> Vector:
        return vector(self.velocity * self.mass)


def stack_positions(bodies: Iterable[MassPointLike]) -> np.ndarray:
    return np.stack([np.asarray(body.position, dtype=float) for body in bodies])


def stack_velocities(bodies: Iterable[MassPointLike]) -> np.ndarray:
    return np.stack([np.asarray(body.velocity, dtype=float) for body in bodies])


def mass_array(bodies: Iterable[MassPointLike]) -> np.ndarray:
    return np.array([body.mass for body in bodies], dtype=float)
