from __future__ import annotations

from .canonical import (
    figure_eight,
    figure_eight_period,
    lagrange_period,
    lagrange_triangle,
    pythagorean,
    resting_triangle,
)
from .registry import CanonicalScenario, ScenarioUIDefaults, scenario_registry

scenario_registry.register(
    CanonicalScenario(
        scenario_id="figure_eight",
        name="Figure Eight",
        factory=lambda g: figure_eight(gravitational_constant=g),
        period=lambda g: figure_eight_period(gravitational_constant=g),
        defaults=ScenarioUIDefaults(view_range=(-1.5, 1.5, -1.0, 1.0), timestep=0.005),
    )
)
scenario_registry.register(
    CanonicalScenario(
        scenario_id="lagrange_triangle",
        name="Lagrange Triangle",
        factory=lambda g: lagrange_triangle(gravitational_constant=g),
        period=lambda g: lagrange_period(gravitational_constant=g),
        defaults=ScenarioUIDefaults(view_range=(-1.5, 1.5, -1.5, 1.5), timestep=0.005),
    )
)
scenario_registry.register(
    CanonicalScenario(
        scenario_id="pythagorean",
        name="Pythagorean (Burrau)",
        factory=lambda g: pythagorean(),
        defaults=ScenarioUIDefaults(view_range=(-5.0, 5.0, -5.0, 5.0), timestep=0.001),
    )
)
scenario_registry.register(
    CanonicalScenario(
        scenario_id="resting_triangle",
        name="Resting Triangle",
        factory=lambda g: resting_triangle(),
        defaults=ScenarioUIDefaults(view_range=(-4.0, 4.0, -4.0, 4.0), timestep=0.002),
    )
)
