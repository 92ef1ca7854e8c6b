from __future__ import annotations

from enum import Enum

import numpy as np

from ..model import Vector


class FrameChoice(str, Enum):
    WORLD = "world"
    COM = "com"


def to_frame(point_world: Vector, frame: FrameChoice, r_oc_world: Vector) -> Vector:
    if frame == FrameChoice.WORLD:
        return np.array(point_world, dtype=float)
    if frame == FrameChoice.COM:
        return point_world - r_oc_world
    raise ValueError(f"Unsupported frame: {frame}")


def positions_in_frame(positions: np.ndarray, masses: np.ndarray, frame: FrameChoice) -> np.ndarray:
    """Express an ``(n, d)`` position array in the requested frame."""
    positions = np.asarray(positions, dtype=float)
    masses = np.asarray(masses, dtype=float)
    r_oc_world = np.sum(positions * masses[:, None], axis=0) / np.sum(masses)
    return np.stack([to_frame(pos, frame, r_oc_world) for pos in positions])
