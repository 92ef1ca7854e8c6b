from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence, Tuple

import numpy as np

from ..errors import InvalidScenario
from ..model import BODY_IDS, SUPPORTED_DIMENSIONS, Body, Vector, vector
from ..physics import relative_positions, relative_velocities

BODY_COUNT = 3


def _vectors(values: Iterable[Iterable[float]], label: str) -> Tuple[Vector, ...]:
    try:
        result = tuple(vector(value) for value in values)
    except (TypeError, ValueError) as exc:
        raise InvalidScenario(f"{label}: {exc}") from exc
    if len(result) != BODY_COUNT:
        raise InvalidScenario(f"{label}: expected {BODY_COUNT} entries, got {len(result)}")
    return result


@dataclass(frozen=True, eq=False)
class Scenario:
    """Initial masses, positions and velocities for one three-body run.

    Construction only checks structure (three bodies, one shared dimension,
    finite numbers). Physical validity is checked by :meth:`validate`, which
    the simulation calls when it consumes the scenario.
    """

    masses: Tuple[float, float, float]
    positions: Tuple[Vector, Vector, Vector]
    velocities: Tuple[Vector, Vector, Vector]
    seed: int | None = None
    name: str = "custom"

    def __post_init__(self) -> None:
        try:
            masses = tuple(float(mass) for mass in self.masses)
        except (TypeError, ValueError) as exc:
            raise InvalidScenario(f"masses: {exc}") from exc
        if len(masses) != BODY_COUNT:
            raise InvalidScenario(f"masses: expected {BODY_COUNT} entries, got {len(masses)}")
        positions = _vectors(self.positions, "positions")
        velocities = _vectors(self.velocities, "velocities")
        dimension = positions[0].size
        if dimension not in SUPPORTED_DIMENSIONS:
            raise InvalidScenario(f"Scenario dimension must be one of {SUPPORTED_DIMENSIONS}, got {dimension}")
        for vec in positions + velocities:
            if vec.size != dimension:
                raise InvalidScenario("All positions and velocities must share one dimension")
        values = np.concatenate([np.asarray(masses, dtype=float), *positions, *velocities])
        if not np.all(np.isfinite(values)):
            raise InvalidScenario("Scenario contains non-finite values")
        object.__setattr__(self, "masses", masses)
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "velocities", velocities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return (
            self.masses == other.masses
            and self.seed == other.seed
            and self.name == other.name
            and all(np.array_equal(a, b) for a, b in zip(self.positions, other.positions))
            and all(np.array_equal(a, b) for a, b in zip(self.velocities, other.velocities))
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def dimension(self) -> int:
        return int(self.positions[0].size)

    def validate(self) -> None:
        for body_id, mass in zip(BODY_IDS, self.masses):
            if mass <= 0:
                raise InvalidScenario(f"Body {body_id}: mass must be positive, got {mass}")
        for i in range(BODY_COUNT):
            for j in range(i + 1, BODY_COUNT):
                if np.array_equal(self.positions[i], self.positions[j]):
                    raise InvalidScenario(
                        f"Bodies {BODY_IDS[i]} and {BODY_IDS[j]} share the initial position "
                        f"{self.positions[i].tolist()}"
                    )

    def min_separation(self) -> float:
        return min(
            float(np.linalg.norm(self.positions[i] - self.positions[j]))
            for i in range(BODY_COUNT)
            for j in range(i + 1, BODY_COUNT)
        )

    def to_bodies(self) -> list[Body]:
        self.validate()
        return [
            Body(body_id=body_id, mass=mass, position=position, velocity=velocity)
            for body_id, mass, position, velocity in zip(BODY_IDS, self.masses, self.positions, self.velocities)
        ]

    def centered(self) -> "Scenario":
        """Same scenario in the centre-of-mass frame (zero COM position and momentum)."""
        bodies = self.to_bodies()
        return replace(
            self,
            positions=tuple(relative_positions(bodies)),
            velocities=tuple(relative_velocities(bodies)),
        )

    def with_name(self, name: str) -> "Scenario":
        return replace(self, name=name)


def scenario_from_arrays(
    masses: Sequence[float],
    positions: Sequence[Sequence[float]],
    velocities: Sequence[Sequence[float]],
    *,
    seed: int | None = None,
    name: str = "custom",
) -> Scenario:
    return Scenario(
        masses=tuple(masses),
        positions=tuple(positions),
        velocities=tuple(velocities),
        seed=seed,
        name=name,
    )
