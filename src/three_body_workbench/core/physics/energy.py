from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..model import MassPointLike, Vector, mass_array, stack_positions, stack_velocities
from .com import center_of_mass, center_of_velocity, total_momentum
from .forces import ForceModel

# Floor for the relative-drift denominator when the initial energy is ~0.
_ENERGY_FLOOR = 1e-300


def kinetic_energy(masses: np.ndarray, velocities: np.ndarray) -> float:
    masses = np.asarray(masses, dtype=float)
    velocities = np.asarray(velocities, dtype=float)
    return float(0.5 * np.sum(masses * np.sum(velocities * velocities, axis=1)))


def total_energy(bodies: Sequence[MassPointLike], forces: ForceModel) -> float:
    masses = mass_array(bodies)
    kinetic = kinetic_energy(masses, stack_velocities(bodies))
    return kinetic + forces.potential_energy(stack_positions(bodies), masses)


@dataclass(frozen=True, eq=False)
class DiagnosticsReference:
    """Quantities captured at initialization that later diagnostics are measured against."""

    total_energy: float
    center_of_mass: Vector
    center_of_velocity: Vector

    @classmethod
    def capture(cls, bodies: Sequence[MassPointLike], forces: ForceModel) -> "DiagnosticsReference":
        return cls(
            total_energy=total_energy(bodies, forces),
            center_of_mass=center_of_mass(bodies),
            center_of_velocity=center_of_velocity(bodies),
        )


@dataclass(frozen=True, eq=False)
class Diagnostics:
    kinetic_energy: float
    potential_energy: float
    total_energy: float
    momentum: Vector
    center_of_mass: Vector
    energy_drift: float
    center_of_mass_drift: float


def compute_diagnostics(
    bodies: Sequence[MassPointLike],
    forces: ForceModel,
    reference: DiagnosticsReference,
    elapsed: float,
) -> Diagnostics:
    masses = mass_array(bodies)
    kinetic = kinetic_energy(masses, stack_velocities(bodies))
    potential = forces.potential_energy(stack_positions(bodies), masses)
    energy = kinetic + potential
    com = center_of_mass(bodies)
    # With no external force the centre of mass moves uniformly.
    expected_com = reference.center_of_mass + reference.center_of_velocity * elapsed
    momentum = total_momentum(bodies)
    for arr in (com, momentum):
        arr.setflags(write=False)
    return Diagnostics(
        kinetic_energy=kinetic,
        potential_energy=potential,
        total_energy=energy,
        momentum=momentum,
        center_of_mass=com,
        energy_drift=abs(energy - reference.total_energy) / max(abs(reference.total_energy), _ENERGY_FLOOR),
        center_of_mass_drift=float(np.linalg.norm(com - expected_com)),
    )
