import numpy as np
import pytest

from three_body_workbench.core.config import ScenarioGeneratorConfig
from three_body_workbench.core.errors import InvalidScenario
from three_body_workbench.core.physics import center_of_mass, total_momentum
from three_body_workbench.core.scenarios import ScenarioGenerator


def _same(a, b) -> bool:
    return (
        a.masses == b.masses
        and all(np.array_equal(x, y) for x, y in zip(a.positions, b.positions))
        and all(np.array_equal(x, y) for x, y in zip(a.velocities, b.velocities))
    )


def test_same_seed_gives_identical_scenarios() -> None:
    generator = ScenarioGenerator()
    first = generator.generate(seed=42)
    second = ScenarioGenerator().generate(seed=42)
    assert first.seed == 42
    assert first.name == "Random #42"
    assert _same(first, second)


def test_different_seeds_differ() -> None:
    generator = ScenarioGenerator()
    assert not _same(generator.generate(seed=1), generator.generate(seed=2))


def test_missing_seed_is_recorded_and_reproducible() -> None:
    generator = ScenarioGenerator()
    scenario = generator.generate()
    assert isinstance(scenario.seed, int)
    assert _same(scenario, generator.generate(seed=scenario.seed))


def test_generated_scenarios_satisfy_constraints() -> None:
    config = ScenarioGeneratorConfig()
    generator = ScenarioGenerator(config)
    scenarios = generator.generate_many(1000, seed=1234)

    assert len(scenarios) == 1000
    assert len({scenario.seed for scenario in scenarios}) == 1000
    for scenario in scenarios:
        assert generator.satisfies_constraints(scenario)
        assert scenario.min_separation() >= config.min_separation
        assert all(config.mass_range[0] <= m <= config.mass_range[1] for m in scenario.masses)
        scenario.validate()


def test_generate_many_is_reproducible() -> None:
    generator = ScenarioGenerator()
    first = generator.generate_many(5, seed=7)
    second = generator.generate_many(5, seed=7)
    assert all(_same(a, b) for a, b in zip(first, second))
    with pytest.raises(ValueError):
        generator.generate_many(-1)


def test_three_dimensional_generation() -> None:
    generator = ScenarioGenerator(ScenarioGeneratorConfig(dimension=3))
    scenario = generator.generate(seed=5)
    assert scenario.dimension == 3
    assert generator.satisfies_constraints(scenario)


def test_center_of_mass_frame() -> None:
    generator = ScenarioGenerator(ScenarioGeneratorConfig(center_of_mass_frame=True))
    for seed in range(20):
        scenario = generator.generate(seed=seed)
        bodies = scenario.to_bodies()
        np.testing.assert_allclose(center_of_mass(bodies), np.zeros(2), atol=1e-12)
        np.testing.assert_allclose(total_momentum(bodies), np.zeros(2), atol=1e-12)
        assert generator.satisfies_constraints(scenario)


def test_zero_velocity_bound_gives_bodies_at_rest() -> None:
    generator = ScenarioGenerator(ScenarioGeneratorConfig(velocity_bound=0.0))
    scenario = generator.generate(seed=3)
    assert all(np.all(v == 0.0) for v in scenario.velocities)


def test_exhausted_attempts_raise_invalid_scenario(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = ScenarioGenerator(ScenarioGeneratorConfig(max_attempts=10))
    monkeypatch.setattr(generator, "_separated", lambda positions: False)
    with pytest.raises(InvalidScenario):
        generator.generate(seed=0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mass_range": (0.0, 1.0)},
        {"mass_range": (2.0, 1.0)},
        {"position_bound": 0.0},
        {"min_separation": -0.1},
        {"min_separation": 5.0},
        {"velocity_bound": -1.0},
        {"dimension": 4},
        {"max_attempts": 0},
        {"position_bound": float("nan")},
        {"velocity_bound": float("inf")},
        {"mass_range": (0.5, float("nan"))},
    ],
)
def test_invalid_generator_config(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ScenarioGeneratorConfig(**kwargs)


def test_generator_config_dict_roundtrip() -> None:
    config = ScenarioGeneratorConfig(mass_range=(1, 3), dimension=3, center_of_mass_frame=True)
    assert ScenarioGeneratorConfig.from_dict(config.to_dict()) == config
    assert config.mass_range == (1.0, 3.0)


def test_generated_scenarios_compare_by_seed() -> None:
    generator = ScenarioGenerator()
    assert generator.generate(seed=8) == generator.generate(seed=8)
    assert generator.generate(seed=8) != generator.generate(seed=9)
