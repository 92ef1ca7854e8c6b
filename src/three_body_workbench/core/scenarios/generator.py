from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..config import ScenarioGeneratorConfig
from ..errors import DegenerateVector, InvalidScenario
from ..model import normalize, scale, vector
from .base import BODY_COUNT, Scenario

_LOG = logging.getLogger(__name__)


def fresh_seed() -> int:
    """Draw a seed from OS entropy; returned so the caller can record it."""
    return int(np.random.SeedSequence().entropy)


class ScenarioGenerator:
    """Produces random initial conditions that satisfy the configured bounds.

    Draws happen in a fixed order (masses, positions, velocities) from one
    ``numpy.random.Generator``, so a seed fully determines the scenario.
    """

    def __init__(self, config: ScenarioGeneratorConfig | None = None) -> None:
        self._config = config or ScenarioGeneratorConfig()

    @property
    def config(self) -> ScenarioGeneratorConfig:
        return self._config

    def generate(self, seed: int | None = None) -> Scenario:
        if seed is None:
            seed = fresh_seed()
        rng = np.random.default_rng(seed)
        cfg = self._config
        for attempt in range(1, cfg.max_attempts + 1):
            masses = tuple(float(m) for m in rng.uniform(cfg.mass_range[0], cfg.mass_range[1], size=BODY_COUNT))
            positions = rng.uniform(-cfg.position_bound, cfg.position_bound, size=(BODY_COUNT, cfg.dimension))
            if not self._separated(positions):
                continue
            velocities = np.stack([self._sample_velocity(rng) for _ in range(BODY_COUNT)])
            scenario = Scenario(
                masses=masses,
                positions=tuple(positions),
                velocities=tuple(velocities),
                seed=seed,
                name=f"Random #{seed}",
            )
            if cfg.center_of_mass_frame:
                scenario = scenario.centered()
                if not self.satisfies_constraints(scenario):
                    continue
            _LOG.debug("Generated scenario for seed %s after %d attempt(s)", seed, attempt)
            return scenario
        raise InvalidScenario(
            f"Could not place bodies with min_separation={cfg.min_separation} "
            f"within position_bound={cfg.position_bound} after {cfg.max_attempts} attempts"
        )

    def generate_many(self, count: int, seed: int | None = None) -> List[Scenario]:
        """Generate ``count`` scenarios whose seeds derive from one parent seed."""
        if count < 0:
            raise ValueError("count must be non-negative")
        parent = np.random.SeedSequence(fresh_seed() if seed is None else seed)
        return [self.generate(int(child.generate_state(1, dtype=np.uint64)[0])) for child in parent.spawn(count)]

    def satisfies_constraints(self, scenario: Scenario) -> bool:
        cfg = self._config
        if scenario.dimension != cfg.dimension:
            return False
        low, high = cfg.mass_range
        if any(mass < low or mass > high for mass in scenario.masses):
            return False
        positions = np.stack(scenario.positions)
        if np.any(np.abs(positions) > cfg.position_bound):
            return False
        if not self._separated(positions):
            return False
        # Relative slack for the rounding of a normalized direction times a speed.
        limit = cfg.velocity_bound * (1.0 + 1e-12)
        return all(float(np.linalg.norm(v)) <= limit for v in scenario.velocities)

    def _separated(self, positions: np.ndarray) -> bool:
        for i in range(BODY_COUNT):
            for j in range(i + 1, BODY_COUNT):
                if float(np.linalg.norm(positions[i] - positions[j])) < self._config.min_separation:
                    return False
        return True

    def _sample_velocity(self, rng: np.random.Generator) -> np.ndarray:
        while True:
            try:
                direction = normalize(vector(rng.standard_normal(self._config.dimension)))
            except DegenerateVector:
                continue
            speed = rng.uniform(0.0, self._config.velocity_bound)
            return np.asarray(scale(direction, speed), dtype=float)
