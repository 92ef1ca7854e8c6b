from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from ..core.config import SimulationConfig
from ..core.errors import InvalidScenario
from ..core.scenarios import BODY_COUNT, Scenario

SCENARIO_SCHEMA_VERSION = 1


@dataclass
class ScenarioDocument:
    scenario: Scenario
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    name: str | None = None
    schema_version: int = SCENARIO_SCHEMA_VERSION

    @property
    def display_name(self) -> str:
        return self.name or self.scenario.name


def document_to_dict(doc: ScenarioDocument) -> Dict[str, Any]:
    scenario = doc.scenario
    return {
        "schema_version": doc.schema_version,
        "name": doc.display_name,
        "simulation": doc.simulation.to_dict(),
        "scenario": {
            "name": scenario.name,
            "seed": scenario.seed,
            "bodies": [
                {
                    "mass": mass,
                    "position": position.tolist(),
                    "velocity": velocity.tolist(),
                }
                for mass, position, velocity in zip(scenario.masses, scenario.positions, scenario.velocities)
            ],
        },
    }


def _scenario_from_dict(payload: Dict[str, Any]) -> Scenario:
    bodies: List[Dict[str, Any]] = payload.get("bodies", [])
    if len(bodies) != BODY_COUNT:
        raise InvalidScenario(f"Scenario file must describe {BODY_COUNT} bodies, found {len(bodies)}")
    try:
        masses = tuple(float(body["mass"]) for body in bodies)
        positions = tuple(np.array(body["position"], dtype=float) for body in bodies)
        velocities = tuple(
            np.array(body.get("velocity", [0.0] * len(body["position"])), dtype=float) for body in bodies
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidScenario(f"Malformed body entry: {exc}") from exc
    seed = payload.get("seed")
    return Scenario(
        masses=masses,
        positions=positions,
        velocities=velocities,
        seed=None if seed is None else int(seed),
        name=str(payload.get("name", "custom")),
    )


def document_from_dict(payload: Dict[str, Any]) -> ScenarioDocument:
    version = int(payload.get("schema_version", 0))
    if version != SCENARIO_SCHEMA_VERSION:
        raise ValueError(f"Unsupported scenario schema version: {version}")
    scenario = _scenario_from_dict(payload.get("scenario", {}))
    return ScenarioDocument(
        scenario=scenario,
        simulation=SimulationConfig.from_dict(payload.get("simulation", {})),
        name=payload.get("name"),
        schema_version=version,
    )


def serialize_document(doc: ScenarioDocument) -> str:
    return json.dumps(document_to_dict(doc), indent=2)


def deserialize_document(payload: str) -> ScenarioDocument:
    return document_from_dict(json.loads(payload))


def save_document(path: Path, doc: ScenarioDocument) -> Path:
    path.write_text(serialize_document(doc), encoding="utf-8")
    return path


def load_document(path: Path) -> ScenarioDocument:
    return deserialize_document(path.read_text(encoding="utf-8"))
