from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from .base import Scenario


@dataclass(frozen=True)
class ScenarioUIDefaults:
    view_range: tuple[float, float, float, float] | None = None
    timestep: float | None = None


@dataclass(frozen=True)
class CanonicalScenario:
    """A named, reproducible initial condition offered to the host application.

    ``factory`` and ``period`` receive the gravitational constant so the
    configuration keeps its shape when G changes.
    """

    scenario_id: str
    name: str
    factory: Callable[[float], Scenario]
    period: Callable[[float], float] | None = None
    defaults: ScenarioUIDefaults = ScenarioUIDefaults()

    def create_scenario(self, gravitational_constant: float = 1.0) -> Scenario:
        return self.factory(gravitational_constant).with_name(self.name)

    def period_for(self, gravitational_constant: float = 1.0) -> float | None:
        return None if self.period is None else self.period(gravitational_constant)

    def ui_defaults(self) -> ScenarioUIDefaults:
        return self.defaults


class ScenarioRegistry:
    def __init__(self) -> None:
        self._scenarios: Dict[str, CanonicalScenario] = {}

    def register(self, scenario: CanonicalScenario) -> None:
        if scenario.scenario_id in self._scenarios:
            raise ValueError(f"Duplicate scenario id: {scenario.scenario_id}")
        self._scenarios[scenario.scenario_id] = scenario

    def get(self, scenario_id: str) -> CanonicalScenario:
        return self._scenarios[scenario_id]

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._scenarios

    def all(self) -> List[CanonicalScenario]:
        return list(self._scenarios.values())


scenario_registry = ScenarioRegistry()
