from __future__ import annotations


class ThreeBodyError(Exception):
    """Base class for errors raised by the simulation core."""


class InvalidScenario(ThreeBodyError, ValueError):
    """Initial conditions cannot seed a simulation (bad mass, coincident bodies, malformed data)."""


class InvalidTimestep(ThreeBodyError, ValueError):
    """A step was requested with a non-positive or non-finite dt."""


class DegenerateVector(ThreeBodyError, ArithmeticError):
    """A zero-length vector was passed where a direction is required."""
