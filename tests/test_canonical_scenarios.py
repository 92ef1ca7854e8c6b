import math

import numpy as np
import pytest

from three_body_workbench.core.config import SimulationConfig
from three_body_workbench.core.physics import center_of_mass, total_momentum
from three_body_workbench.core.scenarios import (
    CanonicalScenario,
    ScenarioRegistry,
    figure_eight,
    figure_eight_period,
    lagrange_period,
    lagrange_triangle,
    load_builtin_scenarios,
    pythagorean,
    resting_triangle,
    scenario_registry,
)
from three_body_workbench.core.sim import Simulation


def _run_for(scenario, duration: float, steps: int, **config_kwargs) -> Simulation:
    config = SimulationConfig(timestep=duration / steps, softening_length=1e-6, **config_kwargs)
    sim = Simulation.from_scenario(scenario, config)
    sim.run(steps)
    return sim


def test_figure_eight_has_zero_momentum() -> None:
    scenario = figure_eight()
    np.testing.assert_array_equal(total_momentum(scenario.to_bodies()), np.zeros(2))
    np.testing.assert_array_equal(center_of_mass(scenario.to_bodies()), np.zeros(2))


def test_figure_eight_returns_after_one_period() -> None:
    scenario = figure_eight()
    period = figure_eight_period()
    sim = _run_for(scenario, period, 4000)

    state = sim.current_state()
    assert sim.time == pytest.approx(period)
    for index in range(3):
        assert np.linalg.norm(state.positions[index] - scenario.positions[index]) < 1e-2


def test_figure_eight_stays_bounded() -> None:
    sim = _run_for(figure_eight(), 3 * figure_eight_period(), 3000)
    assert np.max(np.abs(sim.current_state().positions)) < 1.5


def test_figure_eight_scales_with_gravitational_constant() -> None:
    g = 4.0
    scenario = figure_eight(gravitational_constant=g)
    period = figure_eight_period(gravitational_constant=g)
    assert period == pytest.approx(figure_eight_period() / 2.0)

    sim = _run_for(scenario, period, 4000, gravitational_constant=g)
    state = sim.current_state()
    assert np.linalg.norm(state.positions[0] - scenario.positions[0]) < 1e-2


def test_lagrange_triangle_rotates_rigidly() -> None:
    scenario = lagrange_triangle()
    sim = _run_for(scenario, lagrange_period(), 4000, integrator="rk4")

    state = sim.current_state()
    for index in range(3):
        assert np.linalg.norm(state.positions[index] - scenario.positions[index]) < 1e-3
    sides = [np.linalg.norm(state.positions[i] - state.positions[j]) for i, j in ((0, 1), (1, 2), (0, 2))]
    np.testing.assert_allclose(sides, [math.sqrt(3.0)] * 3, rtol=1e-4)


def test_pythagorean_initial_conditions() -> None:
    scenario = pythagorean()
    assert scenario.masses == (3.0, 4.0, 5.0)
    np.testing.assert_array_equal(center_of_mass(scenario.to_bodies()), np.zeros(2))
    assert all(np.all(v == 0.0) for v in scenario.velocities)


def test_pythagorean_stays_finite() -> None:
    config = SimulationConfig(timestep=0.001, softening_length=1e-3)
    sim = Simulation.from_scenario(pythagorean(), config)
    snapshot = sim.run(2000)
    assert np.all(np.isfinite(snapshot.positions))
    assert np.all(np.isfinite(snapshot.velocities))


def test_resting_triangle_is_centred() -> None:
    scenario = resting_triangle()
    np.testing.assert_allclose(center_of_mass(scenario.to_bodies()), np.zeros(2), atol=1e-12)
    sides = sorted(
        np.linalg.norm(scenario.positions[i] - scenario.positions[j]) for i, j in ((0, 1), (1, 2), (0, 2))
    )
    np.testing.assert_allclose(sides, [3.0, 4.0, 5.0])


def test_scenarios_embed_in_three_dimensions() -> None:
    for scenario in (figure_eight(dimension=3), lagrange_triangle(dimension=3), pythagorean(dimension=3)):
        assert scenario.dimension == 3
        assert all(position[2] == 0.0 for position in scenario.positions)
    with pytest.raises(ValueError):
        figure_eight(dimension=4)


def test_builtin_registry_entries() -> None:
    load_builtin_scenarios()
    for scenario_id in ("figure_eight", "lagrange_triangle", "pythagorean", "resting_triangle"):
        assert scenario_id in scenario_registry

    entry = scenario_registry.get("figure_eight")
    assert entry.create_scenario().name == "Figure Eight"
    assert entry.period_for(1.0) == pytest.approx(figure_eight_period())
    assert entry.ui_defaults().timestep == 0.005
    assert scenario_registry.get("pythagorean").period_for() is None


def test_registry_rejects_duplicates_and_unknown_ids() -> None:
    registry = ScenarioRegistry()
    entry = CanonicalScenario(
        scenario_id="eight",
        name="Eight",
        factory=lambda g: figure_eight(gravitational_constant=g),
    )
    registry.register(entry)

    with pytest.raises(ValueError):
        registry.register(entry)
    with pytest.raises(KeyError):
        registry.get("missing")
    assert [item.scenario_id for item in registry.all()] == ["eight"]


def test_scenarios_compare_by_value() -> None:
    assert figure_eight() == figure_eight()
    assert figure_eight() != lagrange_triangle()
    assert figure_eight() != figure_eight(dimension=3)
    assert figure_eight() != figure_eight().with_name("Other")
    with pytest.raises(TypeError):
        hash(figure_eight())
