from .entities import BODY_IDS, Body, MassPointLike, mass_array, stack_positions, stack_velocities
from .vector import (
    SUPPORTED_DIMENSIONS,
    Vector,
    add,
    dot,
    magnitude,
    normalize,
    scale,
    subtract,
    vector,
    zeros,
)

__all__ = [
    "BODY_IDS",
    "Body",
    "MassPointLike",
    "SUPPORTED_DIMENSIONS",
    "Vector",
    "add",
    "dot",
    "magnitude",
    "mass_array",
    "normalize",
    "scale",
    "stack_positions",
    "stack_velocities",
    "subtract",
    "vector",
    "zeros",
]
