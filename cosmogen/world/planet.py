"""Planets and their lazily built surfaces."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import ChannelLogger
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import (
    EXOTIC_RESOURCES,
    PLANET_TYPES,
    PRIMARY_RESOURCES,
    MineralRichness,
    PlanetType,
)
from cosmogen.world.characteristics import Atmosphere, generate_characteristics
from cosmogen.world.errors import GenerationFailure
from cosmogen.world.orbit import OrbitState
from cosmogen.world.palette import RGB, build_colour_ramp, hex_to_rgb
from cosmogen.world.terrain import TerrainGrid, TerrainSynthesizer, add_craters


@dataclass(frozen=True)
class UninitializedSurface:
    """Surface not built yet."""


@dataclass
class TerrainSurface:
    grid: TerrainGrid
    colour_ramp: List[str]


@dataclass
class GasPalette:
    colours: List[RGB]


Surface = Union[UninitializedSurface, TerrainSurface, GasPalette]

UNINITIALIZED = UninitializedSurface()


def _type_palette(planet_type: PlanetType) -> List[RGB]:
    info = PLANET_TYPES.get(planet_type)
    if info is None or not info.colours:
        raise GenerationFailure(f"no colour palette for planet type {planet_type}")
    try:
        return [hex_to_rgb(colour) for colour in info.colours]
    except ValueError as exc:
        raise GenerationFailure(f"bad colour palette for {planet_type.value}: {exc}") from exc


@dataclass
class Planet:
    name: str
    planet_type: PlanetType
    orbit: OrbitState
    rng: SeededRandom
    system_name: str
    spectral_class: str
    diameter: int
    gravity: float
    atmosphere: Atmosphere
    surface_temp: int
    hydrosphere: str
    lithosphere: str
    mineral_richness: MineralRichness
    base_minerals: int
    map_seed: str
    scanned: bool = False
    primary_resource: Optional[str] = None
    surface: Surface = field(default=UNINITIALIZED)

    @property
    def position(self) -> Vector2:
        return self.orbit.position

    @property
    def orbit_distance(self) -> float:
        return self.orbit.distance

    @property
    def orbit_angle(self) -> float:
        return self.orbit.angle

    @property
    def is_giant(self) -> bool:
        return self.planet_type.is_giant

    @property
    def surface_ready(self) -> bool:
        return not isinstance(self.surface, UninitializedSurface)

    @property
    def terrain(self) -> Optional[TerrainGrid]:
        if isinstance(self.surface, TerrainSurface):
            return self.surface.grid
        return None

    @property
    def needs_craters(self) -> bool:
        if self.planet_type is PlanetType.LUNAR:
            return True
        return self.planet_type is PlanetType.ROCK and self.atmosphere.is_vacuum

    def ensure_surface_ready(self, config: UniverseConfig, logger: Optional[ChannelLogger] = None) -> None:
        """Build the surface on first call; later calls are no-ops.

        Raises ``GenerationFailure`` when the heightmap or palette cannot be
        produced, leaving the surface uninitialized.
        """

        if self.surface_ready:
            return
        palette = _type_palette(self.planet_type)
        if self.is_giant:
            self.surface = GasPalette(colours=palette)
            if logger:
                logger.info("Prepared %d-colour gas palette for %s", len(palette), self.name)
            return

        try:
            synthesizer = TerrainSynthesizer(
                config.planet_map_base_size,
                config.planet_surface_roughness,
                self.map_seed,
                config.planet_height_levels,
                logger=logger,
            )
            grid = synthesizer.generate(config.terrain_initial_range)
            if self.needs_craters:
                add_craters(grid, self.rng.derive_child("craters"), config.planet_height_levels, logger=logger)
        except GenerationFailure:
            raise
        except Exception as exc:
            raise GenerationFailure(f"terrain synthesis failed for {self.name}: {exc}") from exc
        if not grid.is_valid():
            raise GenerationFailure(f"terrain synthesis produced an invalid grid for {self.name}")
        ramp = build_colour_ramp(palette, config.planet_height_levels)
        self.surface = TerrainSurface(grid=grid, colour_ramp=ramp)
        if logger:
            logger.info("Surface ready for %s (%dx%d)", self.name, grid.size, grid.size)

    def scan(self) -> str:
        """Mark the planet scanned and settle its primary resource."""

        self.scanned = True
        if self.primary_resource is not None:
            return self.primary_resource
        if self.mineral_richness is MineralRichness.NONE:
            self.primary_resource = "None Detected"
            return self.primary_resource
        resource_rng = self.rng.derive_child("resource")
        options = PRIMARY_RESOURCES.get(self.planet_type)
        resource = resource_rng.choice(options) if options else "Unknown"
        if self.mineral_richness is MineralRichness.EXCEPTIONAL and resource_rng.next() < 0.5:
            resource = resource_rng.choice(EXOTIC_RESOURCES)
        self.primary_resource = resource
        return resource

    def surface_centre(self, config: UniverseConfig) -> Tuple[int, int]:
        grid = self.terrain
        if grid is not None:
            centre = grid.size // 2
        else:
            centre = config.planet_map_base_size // 2
        return centre, centre

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.planet_type.value,
            "orbitDistance": round(self.orbit.distance, 1),
            "orbitAngle": round(self.orbit.angle, 4),
            "diameter": self.diameter,
            "gravity": round(self.gravity, 2),
            "atmosphere": {
                "density": self.atmosphere.density,
                "pressure": round(self.atmosphere.pressure, 3),
                "composition": dict(self.atmosphere.composition),
            },
            "surfaceTemp": self.surface_temp,
            "hydrosphere": self.hydrosphere,
            "lithosphere": self.lithosphere,
            "mineralRichness": self.mineral_richness.value,
            "baseMinerals": self.base_minerals,
            "scanned": self.scanned,
            "primaryResource": self.primary_resource,
            "surfaceReady": self.surface_ready,
        }


def create_planet(
    name: str,
    planet_type: PlanetType,
    orbit_distance: float,
    angle: float,
    system_rng: SeededRandom,
    system_name: str,
    spectral_class: str,
    logger: Optional[ChannelLogger] = None,
) -> Planet:
    rng = system_rng.derive_child(f"planet_{name}")
    traits = generate_characteristics(rng, planet_type, orbit_distance, spectral_class, logger=logger)
    return Planet(
        name=name,
        planet_type=planet_type,
        orbit=OrbitState(distance=orbit_distance, angle=angle),
        rng=rng,
        system_name=system_name,
        spectral_class=spectral_class,
        diameter=traits.diameter,
        gravity=traits.gravity,
        atmosphere=traits.atmosphere,
        surface_temp=traits.surface_temp,
        hydrosphere=traits.hydrosphere,
        lithosphere=traits.lithosphere,
        mineral_richness=traits.mineral_richness,
        base_minerals=traits.base_minerals,
        map_seed=f"{rng.seed}_map",
    )


__all__ = [
    "GasPalette",
    "Planet",
    "Surface",
    "TerrainSurface",
    "UNINITIALIZED",
    "UninitializedSurface",
    "create_planet",
]
