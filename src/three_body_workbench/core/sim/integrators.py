from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

import numpy as np

from ..config import IntegratorKind, check_timestep
from ..physics import ForceModel


@dataclass(frozen=True, eq=False)
class PhaseState:
    positions: np.ndarray
    velocities: np.ndarray

    def __post_init__(self) -> None:
        positions = np.array(self.positions, dtype=float)
        velocities = np.array(self.velocities, dtype=float)
        if positions.ndim != 2 or positions.shape != velocities.shape:
            raise ValueError("positions and velocities must be matching (n, d) arrays")
        positions.setflags(write=False)
        velocities.setflags(write=False)
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "velocities", velocities)


@dataclass(frozen=True, eq=False)
class StepResult:
    state: PhaseState
    accelerations: np.ndarray


class Integrator(Protocol):
    kind: ClassVar[IntegratorKind]
    force_evaluations: ClassVar[int]

    def step(self, state: PhaseState, masses: np.ndarray, dt: float, forces: ForceModel) -> StepResult:
        ...


@dataclass(frozen=True)
class VelocityVerletIntegrator:
    """Kick-drift-kick leapfrog; symplectic, so energy error stays bounded over long runs."""

    kind: ClassVar[IntegratorKind] = IntegratorKind.SYMPLECTIC
    force_evaluations: ClassVar[int] = 2

    def step(self, state: PhaseState, masses: np.ndarray, dt: float, forces: ForceModel) -> StepResult:
        dt = check_timestep(dt)
        half_dt = 0.5 * dt
        acc_start = forces.accelerations(state.positions, masses)
        v_half = state.velocities + acc_start * half_dt
        positions = state.positions + v_half * dt
        acc_end = forces.accelerations(positions, masses)
        velocities = v_half + acc_end * half_dt
        return StepResult(state=PhaseState(positions, velocities), accelerations=acc_end)


@dataclass(frozen=True)
class RK4Integrator:
    """Classical fourth-order Runge-Kutta on (x, v).

    Smaller per-step error than the leapfrog, but not symplectic: energy
    drifts secularly over long runs.
    """

    kind: ClassVar[IntegratorKind] = IntegratorKind.RK4
    force_evaluations: ClassVar[int] = 4

    def step(self, state: PhaseState, masses: np.ndarray, dt: float, forces: ForceModel) -> StepResult:
        dt = check_timestep(dt)
        x0 = state.positions
        v0 = state.velocities

        k1_x = v0
        k1_v = forces.accelerations(x0, masses)

        k2_x = v0 + k1_v * (0.5 * dt)
        k2_v = forces.accelerations(x0 + k1_x * (0.5 * dt), masses)

        k3_x = v0 + k2_v * (0.5 * dt)
        k3_v = forces.accelerations(x0 + k2_x * (0.5 * dt), masses)

        k4_x = v0 + k3_v * dt
        k4_v = forces.accelerations(x0 + k3_x * dt, masses)

        velocity_avg = (k1_x + 2.0 * k2_x + 2.0 * k3_x + k4_x) / 6.0
        acceleration_avg = (k1_v + 2.0 * k2_v + 2.0 * k3_v + k4_v) / 6.0
        positions = x0 + velocity_avg * dt
        velocities = v0 + acceleration_avg * dt
        return StepResult(state=PhaseState(positions, velocities), accelerations=acceleration_avg)


@dataclass(frozen=True)
class SymplecticEulerIntegrator:
    """Semi-implicit Euler: kick with the current forces, then drift with the new velocity."""

    kind: ClassVar[IntegratorKind] = IntegratorKind.EULER
    force_evaluations: ClassVar[int] = 1

    def step(self, state: PhaseState, masses: np.ndarray, dt: float, forces: ForceModel) -> StepResult:
        dt = check_timestep(dt)
        acc = forces.accelerations(state.positions, masses)
        velocities = state.velocities + acc * dt
        positions = state.positions + velocities * dt
        return StepResult(state=PhaseState(positions, velocities), accelerations=acc)


def integrator_for(kind: IntegratorKind | str) -> Integrator:
    kind = IntegratorKind.parse(kind)
    if kind == IntegratorKind.SYMPLECTIC:
        return VelocityVerletIntegrator()
    if kind == IntegratorKind.RK4:
        return RK4Integrator()
    if kind == IntegratorKind.EULER:
        return SymplecticEulerIntegrator()
    raise ValueError(f"Unsupported integrator: {kind}")
