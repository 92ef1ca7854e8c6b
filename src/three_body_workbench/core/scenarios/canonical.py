"""Known three-body configurations with documented behaviour.

Positions are in simulation units; velocities are scaled by ``sqrt(G m)`` so
each configuration keeps its shape for any gravitational constant and mass.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .base import Scenario

# Chenciner & Montgomery (2000), G = m = 1.
FIGURE_EIGHT_POSITION = (0.97000436, -0.24308753)
FIGURE_EIGHT_CENTER_VELOCITY = (-0.93240737, -0.86473146)
FIGURE_EIGHT_PERIOD = 6.32591398


def _embed(values: Sequence[float], dimension: int) -> np.ndarray:
    if dimension not in (2, 3):
        raise ValueError("dimension must be 2 or 3")
    out = np.zeros(dimension, dtype=float)
    out[: len(values)] = values
    return out


def figure_eight(mass: float = 1.0, gravitational_constant: float = 1.0, dimension: int = 2) -> Scenario:
    speed_scale = math.sqrt(gravitational_constant * mass)
    x1 = np.array(FIGURE_EIGHT_POSITION, dtype=float)
    v3 = np.array(FIGURE_EIGHT_CENTER_VELOCITY, dtype=float) * speed_scale
    v1 = -0.5 * v3
    return Scenario(
        masses=(mass, mass, mass),
        positions=(_embed(x1, dimension), _embed(-x1, dimension), _embed((0.0, 0.0), dimension)),
        velocities=(_embed(v1, dimension), _embed(v1, dimension), _embed(v3, dimension)),
        name="Figure Eight",
    )


def figure_eight_period(mass: float = 1.0, gravitational_constant: float = 1.0) -> float:
    return FIGURE_EIGHT_PERIOD / math.sqrt(gravitational_constant * mass)


def lagrange_speed(mass: float, radius: float, gravitational_constant: float) -> float:
    return math.sqrt(gravitational_constant * mass / (math.sqrt(3.0) * radius))


def lagrange_triangle(
    mass: float = 1.0,
    radius: float = 1.0,
    gravitational_constant: float = 1.0,
    dimension: int = 2,
) -> Scenario:
    """Equal masses on an equilateral triangle in rigid circular rotation."""
    speed = lagrange_speed(mass, radius, gravitational_constant)
    positions = []
    velocities = []
    for k in range(3):
        angle = math.pi / 2.0 + k * 2.0 * math.pi / 3.0
        positions.append(_embed((radius * math.cos(angle), radius * math.sin(angle)), dimension))
        velocities.append(_embed((-speed * math.sin(angle), speed * math.cos(angle)), dimension))
    return Scenario(
        masses=(mass, mass, mass),
        positions=tuple(positions),
        velocities=tuple(velocities),
        name="Lagrange Triangle",
    )


def lagrange_period(mass: float = 1.0, radius: float = 1.0, gravitational_constant: float = 1.0) -> float:
    return 2.0 * math.pi * radius / lagrange_speed(mass, radius, gravitational_constant)


def pythagorean(dimension: int = 2) -> Scenario:
    """Burrau's problem: masses 3, 4, 5 released from rest on a 3-4-5 triangle."""
    return Scenario(
        masses=(3.0, 4.0, 5.0),
        positions=(_embed((1.0, 3.0), dimension), _embed((-2.0, -1.0), dimension), _embed((1.0, -1.0), dimension)),
        velocities=(_embed((0.0, 0.0), dimension),) * 3,
        name="Pythagorean (Burrau)",
    )


def resting_triangle(mass: float = 1.0, scale: float = 1.0, dimension: int = 2) -> Scenario:
    """Equal masses released from rest on a right triangle with legs 3 and 4, centred on the COM."""
    zero = _embed((0.0, 0.0), dimension)
    scenario = Scenario(
        masses=(mass, mass, mass),
        positions=(zero, _embed((3.0 * scale, 0.0), dimension), _embed((0.0, 4.0 * scale), dimension)),
        velocities=(zero, zero, zero),
        name="Resting Triangle",
    )
    return scenario.centered()
