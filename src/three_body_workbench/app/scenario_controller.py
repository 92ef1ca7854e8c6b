from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from ..core.config import ScenarioGeneratorConfig, SimulationConfig
from ..core.scenarios import Scenario, ScenarioGenerator, load_builtin_scenarios, scenario_registry
from ..core.sim import Simulation
from ..io.scenario_format import ScenarioDocument, load_document, save_document

_LOG = logging.getLogger(__name__)


@dataclass
class ScenarioContext:
    document: ScenarioDocument
    simulation: Simulation
    scenario_id: str | None = None
    path: Path | None = None


class ScenarioController:
    """Keeps the active scenario document and its running simulation in sync."""

    def __init__(self, generator_config: ScenarioGeneratorConfig | None = None) -> None:
        load_builtin_scenarios()
        self._generator = ScenarioGenerator(generator_config)
        self._context: ScenarioContext | None = None

    @property
    def document(self) -> ScenarioDocument | None:
        return None if self._context is None else self._context.document

    @property
    def simulation(self) -> Simulation | None:
        return None if self._context is None else self._context.simulation

    @property
    def scenario_id(self) -> str | None:
        return None if self._context is None else self._context.scenario_id

    @property
    def scenario_path(self) -> Path | None:
        return None if self._context is None else self._context.path

    def load_canonical(self, scenario_id: str, config: SimulationConfig | None = None) -> ScenarioDocument:
        entry = scenario_registry.get(scenario_id)
        config = config or SimulationConfig()
        suggested_dt = entry.ui_defaults().timestep
        if suggested_dt is not None:
            config = replace(config, timestep=suggested_dt)
        scenario = entry.create_scenario(config.gravitational_constant)
        self._activate(ScenarioDocument(scenario=scenario, simulation=config), scenario_id=scenario_id)
        return self._context.document

    def load_random(self, seed: int | None = None, config: SimulationConfig | None = None) -> ScenarioDocument:
        scenario = self._generator.generate(seed)
        self._activate(ScenarioDocument(scenario=scenario, simulation=config or SimulationConfig()))
        return self._context.document

    def load_scenario(self, path: Path) -> ScenarioDocument:
        document = load_document(path)
        self._activate(document, path=path)
        return document

    def save_scenario(self, path: Path | None = None) -> Path:
        if self._context is None:
            raise RuntimeError("No scenario loaded")
        if path is not None:
            self._context.path = path
        if self._context.path is None:
            raise RuntimeError("Scenario path is not set")
        return save_document(self._context.path, self._context.document)

    def update_simulation_settings(self, config: SimulationConfig) -> None:
        if self._context is None:
            return
        self._context.document.simulation = config
        self._context.simulation.reset(self._context.document.scenario, config)

    def reset_simulation(self) -> None:
        if self._context is None:
            return
        self._context.simulation.reset(self._context.document.scenario)

    def _activate(
        self,
        document: ScenarioDocument,
        scenario_id: str | None = None,
        path: Path | None = None,
    ) -> None:
        scenario: Scenario = document.scenario
        simulation = Simulation.from_scenario(scenario, document.simulation)
        self._context = ScenarioContext(document=document, simulation=simulation, scenario_id=scenario_id, path=path)
        _LOG.debug("Activated scenario %r", document.display_name)
