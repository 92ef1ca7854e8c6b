from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import InvalidTimestep
from .model import SUPPORTED_DIMENSIONS


class IntegratorKind(str, Enum):
    SYMPLECTIC = "symplectic"
    RK4 = "rk4"
    EULER = "euler"

    @classmethod
    def parse(cls, value: "IntegratorKind | str") -> "IntegratorKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown integrator: {value}") from None


def check_timestep(dt: float) -> float:
    dt = float(dt)
    if not math.isfinite(dt) or dt <= 0:
        raise InvalidTimestep(f"dt must be positive and finite, got {dt}")
    return dt


@dataclass(frozen=True)
class SimulationConfig:
    """Physical constants and stepping policy for one simulation run.

    Read-only once a run starts; pass a new instance to
    :meth:`Simulation.reset` to change it.
    """

    gravitational_constant: float = 1.0
    softening_length: float = 1e-3
    timestep: float = 0.01
    integrator: IntegratorKind = IntegratorKind.SYMPLECTIC
    track_diagnostics: bool = True
    energy_drift_warning: float = 1e-2

    def __post_init__(self) -> None:
        if not math.isfinite(self.gravitational_constant) or self.gravitational_constant <= 0:
            raise ValueError("gravitational_constant must be positive")
        if not math.isfinite(self.softening_length) or self.softening_length <= 0:
            raise ValueError("softening_length must be positive")
        check_timestep(self.timestep)
        if not math.isfinite(self.energy_drift_warning) or self.energy_drift_warning <= 0:
            raise ValueError("energy_drift_warning must be positive")
        object.__setattr__(self, "integrator", IntegratorKind.parse(self.integrator))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gravitational_constant": self.gravitational_constant,
            "softening_length": self.softening_length,
            "timestep": self.timestep,
            "integrator": self.integrator.value,
            "track_diagnostics": self.track_diagnostics,
            "energy_drift_warning": self.energy_drift_warning,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SimulationConfig":
        defaults = cls()
        return cls(
            gravitational_constant=float(payload.get("gravitational_constant", defaults.gravitational_constant)),
            softening_length=float(payload.get("softening_length", defaults.softening_length)),
            timestep=float(payload.get("timestep", defaults.timestep)),
            integrator=str(payload.get("integrator", defaults.integrator.value)),
            track_diagnostics=bool(payload.get("track_diagnostics", defaults.track_diagnostics)),
            energy_drift_warning=float(payload.get("energy_drift_warning", defaults.energy_drift_warning)),
        )


@dataclass(frozen=True)
class ScenarioGeneratorConfig:
    mass_range: tuple[float, float] = (0.5, 2.0)
    position_bound: float = 1.0
    min_separation: float = 0.25
    velocity_bound: float = 0.5
    dimension: int = 2
    max_attempts: int = 1000
    center_of_mass_frame: bool = False

    def __post_init__(self) -> None:
        if self.dimension not in SUPPORTED_DIMENSIONS:
            raise ValueError(f"dimension must be one of {SUPPORTED_DIMENSIONS}")
        low, high = (float(value) for value in self.mass_range)
        if not (math.isfinite(low) and math.isfinite(high)) or low <= 0 or high < low:
            raise ValueError("mass_range must satisfy 0 < low <= high")
        object.__setattr__(self, "mass_range", (low, high))
        if not math.isfinite(self.position_bound) or self.position_bound <= 0:
            raise ValueError("position_bound must be positive")
        if not math.isfinite(self.min_separation) or self.min_separation < 0:
            raise ValueError("min_separation must be non-negative")
        # Three points in the cube can always be spread along its diagonal.
        if self.min_separation > self.position_bound * math.sqrt(self.dimension):
            raise ValueError("min_separation cannot be satisfied inside position_bound")
        if not math.isfinite(self.velocity_bound) or self.velocity_bound < 0:
            raise ValueError("velocity_bound must be non-negative")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mass_range": list(self.mass_range),
            "position_bound": self.position_bound,
            "min_separation": self.min_separation,
            "velocity_bound": self.velocity_bound,
            "dimension": self.dimension,
            "max_attempts": self.max_attempts,
            "center_of_mass_frame": self.center_of_mass_frame,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ScenarioGeneratorConfig":
        defaults = cls()
        return cls(
            mass_range=tuple(payload.get("mass_range", defaults.mass_range)),
            position_bound=float(payload.get("position_bound", defaults.position_bound)),
            min_separation=float(payload.get("min_separation", defaults.min_separation)),
            velocity_bound=float(payload.get("velocity_bound", defaults.velocity_bound)),
            dimension=int(payload.get("dimension", defaults.dimension)),
            max_attempts=int(payload.get("max_attempts", defaults.max_attempts)),
            center_of_mass_frame=bool(payload.get("center_of_mass_frame", defaults.center_of_mass_frame)),
        )
