"""Orbital starbases."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import ChannelLogger
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import STARBASE_COLOUR, MineralRichness
from cosmogen.world.orbit import OrbitState
from cosmogen.world.palette import rgb_to_hex
from cosmogen.world.planet import TerrainSurface
from cosmogen.world.terrain import TerrainGrid

STARBASE_BODY_TYPE = "Starbase"


@dataclass
class Starbase:
    name: str
    orbit: OrbitState
    rng: SeededRandom
    surface: TerrainSurface
    body_type: str = STARBASE_BODY_TYPE
    mineral_richness: MineralRichness = MineralRichness.NONE

    @property
    def position(self) -> Vector2:
        return self.orbit.position

    @property
    def orbit_distance(self) -> float:
        return self.orbit.distance

    @property
    def surface_ready(self) -> bool:
        return True

    def ensure_surface_ready(self, config: UniverseConfig, logger: Optional[ChannelLogger] = None) -> None:
        """Docking surfaces are built with the starbase; nothing to do."""

    def surface_centre(self, config: UniverseConfig) -> Tuple[int, int]:
        return 0, 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.body_type,
            "orbitDistance": round(self.orbit.distance, 1),
            "orbitAngle": round(self.orbit.angle, 4),
        }


def create_starbase(
    system_name: str,
    system_rng: SeededRandom,
    config: UniverseConfig,
    logger: Optional[ChannelLogger] = None,
) -> Starbase:
    rng = system_rng.derive_child(f"starbase_{system_name}")
    distance = config.starbase_orbit_distance * rng.uniform(0.9, 1.1)
    angle = rng.uniform(0.0, 2.0 * math.pi)
    surface = TerrainSurface(
        grid=TerrainGrid(heights=[[0]], levels=config.planet_height_levels),
        colour_ramp=[rgb_to_hex(*STARBASE_COLOUR)],
    )
    starbase = Starbase(
        name=f"{system_name} Starbase Delta",
        orbit=OrbitState(distance=distance, angle=angle),
        rng=rng,
        surface=surface,
    )
    if logger:
        logger.debug("Starbase %s at orbit %.0f", starbase.name, distance)
    return starbase


__all__ = ["STARBASE_BODY_TYPE", "Starbase", "create_starbase"]
