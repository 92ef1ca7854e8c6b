from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np

from ..config import SimulationConfig, check_timestep
from ..model import BODY_IDS, Body, mass_array, stack_positions, stack_velocities, vector
from ..physics import Diagnostics, DiagnosticsReference, ForceModel, compute_diagnostics
from ..scenarios.base import Scenario
from .integrators import Integrator, PhaseState, integrator_for

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SimulationSnapshot:
    """Read-only view of the simulation handed to presentation code."""

    body_ids: Tuple[str, ...]
    masses: Tuple[float, ...]
    positions: np.ndarray
    velocities: np.ndarray
    time: float
    step_count: int
    diagnostics: Diagnostics | None = None

    @property
    def dimension(self) -> int:
        return int(self.positions.shape[1])


@dataclass
class SimulationState:
    bodies: Tuple[Body, Body, Body]
    config: SimulationConfig
    time: float = 0.0
    step_count: int = 0


class Simulation:
    """Owns the three bodies of one run and advances them with a fixed timestep.

    Not safe for concurrent use; callers serialize ``step`` and ``reset``.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self._config = config or SimulationConfig()
        self._forces = self._force_model(self._config)
        self._integrator: Integrator = integrator_for(self._config.integrator)
        self._state: SimulationState | None = None
        self._scenario: Scenario | None = None
        self._reference: DiagnosticsReference | None = None
        self._diagnostics: Diagnostics | None = None
        self._drift_warned = False

    @classmethod
    def from_scenario(cls, scenario: Scenario, config: SimulationConfig | None = None) -> "Simulation":
        sim = cls(config)
        sim.initialize(scenario)
        return sim

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def forces(self) -> ForceModel:
        return self._forces

    @property
    def integrator(self) -> Integrator:
        return self._integrator

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def scenario(self) -> Scenario | None:
        return self._scenario

    @property
    def time(self) -> float:
        return 0.0 if self._state is None else self._state.time

    @property
    def step_count(self) -> int:
        return 0 if self._state is None else self._state.step_count

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Detached copies of the bodies; changing them does not affect the run."""
        return () if self._state is None else tuple(replace(body) for body in self._state.bodies)

    @property
    def diagnostics(self) -> Diagnostics | None:
        return self._diagnostics

    def initialize(self, scenario: Scenario) -> None:
        scenario.validate()
        bodies = tuple(
            Body(
                body_id=body_id,
                mass=mass,
                position=position,
                velocity=velocity,
            )
            for body_id, mass, position, velocity in zip(
                BODY_IDS, scenario.masses, scenario.positions, scenario.velocities
            )
        )
        self._state = SimulationState(bodies=bodies, config=self._config)
        self._scenario = scenario
        self._reference = DiagnosticsReference.capture(bodies, self._forces)
        self._diagnostics = self._compute_diagnostics() if self._config.track_diagnostics else None
        self._drift_warned = False
        _LOG.info(
            "Initialized scenario %r (seed=%s) with %s integrator, dt=%g",
            scenario.name,
            scenario.seed,
            self._config.integrator.value,
            self._config.timestep,
        )

    def reset(self, scenario: Scenario, config: SimulationConfig | None = None) -> None:
        if config is not None:
            # Validate against the old configuration first so a bad scenario
            # leaves the running simulation untouched.
            scenario.validate()
            self._config = config
            self._forces = self._force_model(config)
            self._integrator = integrator_for(config.integrator)
        self.initialize(scenario)

    def step(self, dt: float | None = None) -> None:
        state = self._require_state()
        step_dt = check_timestep(self._config.timestep if dt is None else dt)
        bodies = state.bodies
        masses = mass_array(bodies)
        current = PhaseState(stack_positions(bodies), stack_velocities(bodies))
        result = self._integrator.step(current, masses, step_dt, self._forces)

        # Commit only after the integrator succeeded.
        for index, body in enumerate(bodies):
            body.position = vector(result.state.positions[index])
            body.velocity = vector(result.state.velocities[index])
            body.acceleration = vector(result.accelerations[index])
        state.time += step_dt
        state.step_count += 1

        if self._config.track_diagnostics:
            self._diagnostics = self._compute_diagnostics()
            self._check_drift(self._diagnostics)

    def run(self, steps: int) -> SimulationSnapshot:
        if steps < 0:
            raise ValueError("steps must be non-negative")
        for _ in range(steps):
            self.step()
        return self.current_state()

    def current_state(self) -> SimulationSnapshot:
        state = self._require_state()
        positions = stack_positions(state.bodies)
        velocities = stack_velocities(state.bodies)
        positions.setflags(write=False)
        velocities.setflags(write=False)
        return SimulationSnapshot(
            body_ids=tuple(body.body_id for body in state.bodies),
            masses=tuple(body.mass for body in state.bodies),
            positions=positions,
            velocities=velocities,
            time=state.time,
            step_count=state.step_count,
            diagnostics=self._diagnostics,
        )

    def _require_state(self) -> SimulationState:
        if self._state is None:
            raise RuntimeError("Simulation is not initialized")
        return self._state

    def _compute_diagnostics(self) -> Diagnostics:
        state = self._require_state()
        if self._reference is None:
            raise RuntimeError("Simulation has no diagnostics reference")
        return compute_diagnostics(state.bodies, self._forces, self._reference, state.time)

    def _check_drift(self, diagnostics: Diagnostics) -> None:
        if self._drift_warned or diagnostics.energy_drift <= self._config.energy_drift_warning:
            return
        self._drift_warned = True
        _LOG.warning(
            "Relative energy drift %.3e exceeds %.3e at t=%g (step %d); consider a smaller dt or larger softening",
            diagnostics.energy_drift,
            self._config.energy_drift_warning,
            self.time,
            self.step_count,
        )

    @staticmethod
    def _force_model(config: SimulationConfig) -> ForceModel:
        return ForceModel(
            gravitational_constant=config.gravitational_constant,
            softening_length=config.softening_length,
        )
