from .com import (
    center_of_mass,
    center_of_velocity,
    relative_positions,
    relative_velocities,
    total_mass,
    total_momentum,
)
from .energy import Diagnostics, DiagnosticsReference, compute_diagnostics, kinetic_energy, total_energy
from .forces import ForceModel
from .frames import FrameChoice, positions_in_frame, to_frame

__all__ = [
    "center_of_mass",
    "center_of_velocity",
    "compute_diagnostics",
    "Diagnostics",
    "DiagnosticsReference",
    "ForceModel",
    "FrameChoice",
    "kinetic_energy",
    "positions_in_frame",
    "relative_positions",
    "relative_velocities",
    "to_frame",
    "total_energy",
    "total_mass",
    "total_momentum",
]
