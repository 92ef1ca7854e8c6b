import numpy as np
import pytest

from three_body_workbench.core.config import SimulationConfig
from three_body_workbench.core.model import Body
from three_body_workbench.core.physics import (
    DiagnosticsReference,
    ForceModel,
    compute_diagnostics,
    kinetic_energy,
    total_energy,
)
from three_body_workbench.core.scenarios import figure_eight
from three_body_workbench.core.sim import Simulation


def test_kinetic_energy() -> None:
    masses = np.array([2.0, 1.0])
    velocities = np.array([[1.0, 0.0], [0.0, 3.0]])
    assert kinetic_energy(masses, velocities) == pytest.approx(0.5 * (2.0 + 9.0))


def test_total_energy_of_bodies() -> None:
    bodies = [
        Body(body_id="A", mass=1.0, position=np.array([0.0, 0.0]), velocity=np.array([1.0, 0.0])),
        Body(body_id="B", mass=1.0, position=np.array([1.0, 0.0]), velocity=np.array([0.0, 0.0])),
        Body(body_id="C", mass=1.0, position=np.array([0.0, 1.0]), velocity=np.array([0.0, 0.0])),
    ]
    forces = ForceModel(softening_length=1e-9)
    expected = 0.5 - (1.0 + 1.0 + 1.0 / np.sqrt(2.0))
    assert total_energy(bodies, forces) == pytest.approx(expected, rel=1e-9)


def test_center_of_mass_drift_follows_uniform_motion() -> None:
    bodies = [
        Body(body_id="A", mass=1.0, position=np.array([0.0, 0.0]), velocity=np.array([1.0, 0.0])),
        Body(body_id="B", mass=1.0, position=np.array([2.0, 0.0]), velocity=np.array([1.0, 0.0])),
        Body(body_id="C", mass=2.0, position=np.array([0.0, 2.0]), velocity=np.array([1.0, 0.0])),
    ]
    forces = ForceModel()
    reference = DiagnosticsReference.capture(bodies, forces)
    for body in bodies:
        body.position = body.position + np.array([3.0, 0.0])

    diagnostics = compute_diagnostics(bodies, forces, reference, elapsed=3.0)

    assert diagnostics.center_of_mass_drift == pytest.approx(0.0, abs=1e-12)
    np.testing.assert_allclose(diagnostics.momentum, np.array([4.0, 0.0]))


def test_figure_eight_energy_is_conserved_by_symplectic_integrator() -> None:
    config = SimulationConfig(timestep=0.01, integrator="symplectic")
    sim = Simulation.from_scenario(figure_eight(), config)

    drifts = []
    for _ in range(100):
        snapshot = sim.run(100)
        drifts.append(snapshot.diagnostics.energy_drift)

    assert snapshot.time == pytest.approx(100.0)
    # Bounded over the whole run, not just at the end; the drift oscillates rather than growing.
    assert max(drifts) < 1e-3
    assert max(drifts[50:]) < 2.0 * max(drifts[:50])
    np.testing.assert_allclose(snapshot.diagnostics.momentum, np.zeros(2), atol=1e-9)
    assert np.all(np.isfinite(snapshot.positions))
