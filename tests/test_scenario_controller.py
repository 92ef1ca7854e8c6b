from pathlib import Path

import numpy as np
import pytest

from three_body_workbench.app.scenario_controller import ScenarioController
from three_body_workbench.core.config import IntegratorKind, SimulationConfig


def test_load_canonical_applies_suggested_timestep() -> None:
    controller = ScenarioController()
    document = controller.load_canonical("figure_eight", SimulationConfig(softening_length=0.01))

    assert controller.scenario_id == "figure_eight"
    assert document.display_name == "Figure Eight"
    assert document.simulation.timestep == 0.005
    assert document.simulation.softening_length == 0.01
    assert controller.simulation is not None
    assert controller.simulation.is_initialized


def test_load_random_records_seed() -> None:
    controller = ScenarioController()
    document = controller.load_random(seed=11)
    assert document.scenario.seed == 11
    assert controller.scenario_id is None


def test_save_requires_a_path(tmp_path: Path) -> None:
    controller = ScenarioController()
    with pytest.raises(RuntimeError):
        controller.save_scenario(tmp_path / "none.json")

    controller.load_random(seed=3)
    with pytest.raises(RuntimeError):
        controller.save_scenario()

    path = controller.save_scenario(tmp_path / "random.json")
    assert path.exists()
    assert controller.scenario_path == path


def test_saved_scenario_reloads(tmp_path: Path) -> None:
    controller = ScenarioController()
    original = controller.load_random(seed=21, config=SimulationConfig(integrator="rk4"))
    path = controller.save_scenario(tmp_path / "random.json")

    reloaded = ScenarioController().load_scenario(path)

    assert reloaded.scenario.seed == 21
    assert reloaded.simulation.integrator is IntegratorKind.RK4
    for a, b in zip(original.scenario.positions, reloaded.scenario.positions):
        np.testing.assert_array_equal(a, b)


def test_settings_update_restarts_simulation() -> None:
    controller = ScenarioController()
    controller.load_canonical("lagrange_triangle")
    controller.simulation.run(5)

    controller.update_simulation_settings(SimulationConfig(timestep=0.02, integrator="euler"))

    assert controller.simulation.step_count == 0
    assert controller.simulation.config.integrator is IntegratorKind.EULER
    assert controller.document.simulation.timestep == 0.02


def test_reset_simulation() -> None:
    controller = ScenarioController()
    controller.reset_simulation()
    controller.load_canonical("pythagorean")
    controller.simulation.run(3)
    controller.reset_simulation()
    assert controller.simulation.time == 0.0
