from .integrators import (
    Integrator,
    PhaseState,
    RK4Integrator,
    StepResult,
    SymplecticEulerIntegrator,
    VelocityVerletIntegrator,
    integrator_for,
)
from .simulation import Simulation, SimulationSnapshot, SimulationState

__all__ = [
    "Integrator",
    "PhaseState",
    "RK4Integrator",
    "Simulation",
    "SimulationSnapshot",
    "SimulationState",
    "StepResult",
    "SymplecticEulerIntegrator",
    "VelocityVerletIntegrator",
    "integrator_for",
]
