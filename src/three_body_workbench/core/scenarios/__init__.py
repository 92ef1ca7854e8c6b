from .base import BODY_COUNT, Scenario, scenario_from_arrays
from .canonical import (
    figure_eight,
    figure_eight_period,
    lagrange_period,
    lagrange_triangle,
    pythagorean,
    resting_triangle,
)
from .generator import ScenarioGenerator, fresh_seed
from .registry import CanonicalScenario, ScenarioRegistry, ScenarioUIDefaults, scenario_registry


def load_builtin_scenarios() -> None:
    # Import side effects to register built-in scenarios.
    from . import builtin  # noqa: F401


__all__ = [
    "BODY_COUNT",
    "CanonicalScenario",
    "Scenario",
    "ScenarioGenerator",
    "ScenarioRegistry",
    "ScenarioUIDefaults",
    "figure_eight",
    "figure_eight_period",
    "fresh_seed",
    "lagrange_period",
    "lagrange_triangle",
    "load_builtin_scenarios",
    "pythagorean",
    "resting_triangle",
    "scenario_from_arrays",
    "scenario_registry",
]
