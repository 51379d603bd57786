"""Deterministic star system generation."""
from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import ChannelLogger
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import (
    SPECTRAL_DISTRIBUTION,
    SYSTEM_NAME_PREFIXES,
    ZONE_CANDIDATES,
    PlanetType,
    SOLAR_CLASS,
    star_temperature,
)
from cosmogen.world.errors import GenerationFailure
from cosmogen.world.orbit import advance_orbit
from cosmogen.world.planet import Planet, create_planet
from cosmogen.world.starbase import Starbase, create_starbase

Body = Union[Planet, Starbase]

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def roman_numeral(number: int) -> str:
    if number < 1:
        return str(number)
    parts: List[str] = []
    for value, symbol in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def effective_temperature(spectral_class: str, orbit_distance: float, config: UniverseConfig) -> float:
    """Blackbody-style temperature estimate at ``orbit_distance`` from the star."""

    luminosity = (star_temperature(spectral_class) / star_temperature(SOLAR_CLASS)) ** 4
    scaled = orbit_distance / config.reference_orbit_distance
    return (luminosity / scaled**2) ** 0.25 * config.reference_temp


def temperature_zone(temperature: float, config: UniverseConfig) -> str:
    if temperature > config.hot_zone_temp:
        return "scorching"
    if temperature > config.outer_habitable_temp:
        return "hot"
    if temperature > config.inner_habitable_temp:
        return "habitable"
    if temperature > config.frost_line_temp:
        return "cold"
    return "very_cold"


@dataclass
class SolarSystem:
    star_x: int
    star_y: int
    rng: SeededRandom
    spectral_class: str
    name: str
    planets: List[Optional[Planet]]
    starbase: Optional[Starbase]
    edge_radius: float
    config: UniverseConfig = field(repr=False)

    def bodies(self) -> Iterator[Body]:
        """Populated planets in slot order, then the starbase."""

        for planet in self.planets:
            if planet is not None:
                yield planet
        if self.starbase is not None:
            yield self.starbase

    def object_near(self, position: Vector2, radius: Optional[float] = None) -> Optional[Body]:
        limit = self.config.landing_radius if radius is None else radius
        limit_sq = limit * limit
        for body in self.bodies():
            if (body.position - position).length_squared() < limit_sq:
                return body
        return None

    def is_at_edge(self, position: Vector2) -> bool:
        """True once ``position`` lies beyond the fraction of the edge radius that allows a jump out."""

        threshold = self.edge_radius * self.config.edge_leave_fraction
        return position.length_squared() > threshold * threshold

    def update_orbits(self, dt: float) -> None:
        for body in self.bodies():
            advance_orbit(body.orbit, dt, self.config)

    def outermost_orbit(self) -> float:
        return max((body.orbit_distance for body in self.bodies()), default=0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "star": [self.star_x, self.star_y],
            "spectralClass": self.spectral_class,
            "edgeRadius": round(self.edge_radius, 1),
            "planets": [planet.to_dict() if planet is not None else None for planet in self.planets],
            "starbase": self.starbase.to_dict() if self.starbase is not None else None,
        }


class SystemGenerator:
    """Builds a ``SolarSystem`` for a hyperspace cell.

    Every draw happens on a source derived from the root seed and the star
    coordinates, in a fixed order, so the same cell always yields the same
    system.
    """

    INITIAL_ORBIT_RANGE = (5000.0, 20000.0)
    ORBIT_FACTOR_RANGE = (1.4, 1.9)
    ORBIT_FACTOR_JITTER = 0.1
    ORBIT_INCREMENT_RANGE = (1000.0, 5000.0)
    BASE_FORMATION_CHANCE = 0.9
    FORMATION_FALLOFF = 0.03

    def __init__(self, config: UniverseConfig, logger: Optional[ChannelLogger] = None) -> None:
        self.config = config
        self._logger = logger

    def generate(self, star_x: int, star_y: int, root_rng: SeededRandom) -> SolarSystem:
        try:
            return self._build(int(star_x), int(star_y), root_rng)
        except GenerationFailure:
            raise
        except Exception as exc:
            if self._logger:
                self._logger.error("System generation failed at (%s, %s): %s", star_x, star_y, exc)
            raise GenerationFailure(f"could not generate system at ({star_x}, {star_y}): {exc}") from exc

    def _build(self, star_x: int, star_y: int, root_rng: SeededRandom) -> SolarSystem:
        config = self.config
        rng = root_rng.derive_child(f"star_{star_x},{star_y}")
        spectral_class = rng.choice(SPECTRAL_DISTRIBUTION)
        name = self._system_name(rng)

        starbase: Optional[Starbase] = None
        if rng.next() < config.starbase_probability:
            starbase = create_starbase(name, rng, config, logger=self._logger)

        planets = self._place_planets(rng, name, spectral_class, starbase)
        system = SolarSystem(
            star_x=star_x,
            star_y=star_y,
            rng=rng,
            spectral_class=spectral_class,
            name=name,
            planets=planets,
            starbase=starbase,
            edge_radius=0.0,
            config=config,
        )
        system.edge_radius = max(
            config.min_edge_radius,
            system.outermost_orbit() * config.system_edge_radius_factor,
        )
        if self._logger:
            self._logger.info(
                "Generated %s (%s class) at (%d, %d): %d planets%s",
                name,
                spectral_class,
                star_x,
                star_y,
                sum(1 for planet in planets if planet is not None),
                ", starbase" if starbase else "",
            )
        return system

    def _system_name(self, rng: SeededRandom) -> str:
        prefix = rng.choice(SYSTEM_NAME_PREFIXES)
        number = rng.uniform_int(1, 999)
        letter = rng.choice(string.ascii_uppercase)
        return f"{prefix}-{number}{letter}"

    def _place_planets(
        self,
        rng: SeededRandom,
        system_name: str,
        spectral_class: str,
        starbase: Optional[Starbase],
    ) -> List[Optional[Planet]]:
        config = self.config
        separation = config.min_orbit_separation
        planets: List[Optional[Planet]] = [None] * config.max_planets_per_system
        last = rng.uniform(*self.INITIAL_ORBIT_RANGE)
        factor_base = rng.uniform(*self.ORBIT_FACTOR_RANGE)

        for index in range(config.max_planets_per_system):
            factor = factor_base + rng.uniform(-self.ORBIT_FACTOR_JITTER, self.ORBIT_FACTOR_JITTER)
            candidate = last * factor + rng.uniform(*self.ORBIT_INCREMENT_RANGE) * (index + 1)
            candidate = max(last + separation, candidate)
            if starbase is not None:
                candidate = self._clear_starbase(candidate, last, starbase.orbit_distance)

            chance = self.BASE_FORMATION_CHANCE - index * self.FORMATION_FALLOFF
            if rng.next() < chance:
                planet_type = self._classify(rng, spectral_class, candidate)
                angle = rng.uniform(0.0, 2.0 * math.pi)
                planets[index] = create_planet(
                    f"{system_name} {roman_numeral(index + 1)}",
                    planet_type,
                    candidate,
                    angle,
                    rng,
                    system_name,
                    spectral_class,
                    logger=self._logger,
                )
            last = candidate
        return planets

    def _clear_starbase(self, candidate: float, last: float, starbase_orbit: float) -> float:
        separation = self.config.min_orbit_separation
        if abs(candidate - starbase_orbit) >= separation:
            return candidate
        direction = 1.0 if candidate > starbase_orbit else -1.0
        pushed = max(last + separation, starbase_orbit + separation * direction)
        if abs(pushed - starbase_orbit) < separation:
            pushed = starbase_orbit + separation
        if self._logger:
            self._logger.debug("Orbit %.0f moved to %.0f to clear starbase at %.0f", candidate, pushed, starbase_orbit)
        return pushed

    def _classify(self, rng: SeededRandom, spectral_class: str, orbit_distance: float) -> PlanetType:
        type_rng = rng.derive_child(f"type_{orbit_distance}")
        temperature = effective_temperature(spectral_class, orbit_distance, self.config)
        return type_rng.choice(ZONE_CANDIDATES[temperature_zone(temperature, self.config)])


__all__ = [
    "Body",
    "SolarSystem",
    "SystemGenerator",
    "effective_temperature",
    "roman_numeral",
    "temperature_zone",
]
