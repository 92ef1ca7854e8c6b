from .config import IntegratorKind, ScenarioGeneratorConfig, SimulationConfig
from .errors import DegenerateVector, InvalidScenario, InvalidTimestep, ThreeBodyError
from .model import Body, Vector
from .physics import Diagnostics, ForceModel, center_of_mass, center_of_velocity, total_mass, total_momentum
from .scenarios import Scenario, ScenarioGenerator, scenario_registry
from .sim import Integrator, Simulation, SimulationSnapshot, integrator_for

__all__ = [
    "Body",
    "center_of_mass",
    "center_of_velocity",
    "DegenerateVector",
    "Diagnostics",
    "ForceModel",
    "Integrator",
    "IntegratorKind",
    "integrator_for",
    "InvalidScenario",
    "InvalidTimestep",
    "Scenario",
    "ScenarioGenerator",
    "ScenarioGeneratorConfig",
    "scenario_registry",
    "Simulation",
    "SimulationConfig",
    "SimulationSnapshot",
    "ThreeBodyError",
    "total_mass",
    "total_momentum",
    "Vector",
]
