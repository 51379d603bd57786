"""Immutable tunables for universe generation and exploration."""
from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from cosmogen.engine.settings import load_settings

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


@dataclass(frozen=True)
class UniverseConfig:
    """Named constants read by every generator, factory and the state machine."""

    seed: str = "haunting beauty"

    # Hyperspace
    star_density: float = 0.008
    star_check_hash_scale: int = 10000

    # Star systems
    system_edge_radius_factor: float = 1.5
    min_edge_radius: float = 50000.0
    max_planets_per_system: int = 9
    starbase_probability: float = 0.2
    starbase_orbit_distance: float = 75000.0
    min_orbit_separation: float = 5000.0

    # Temperature zones (kelvin), calibrated by eye
    hot_zone_temp: float = 800.0
    outer_habitable_temp: float = 390.0
    inner_habitable_temp: float = 260.0
    frost_line_temp: float = 150.0
    reference_orbit_distance: float = 50000.0
    reference_temp: float = 280.0

    # Orbits
    orbit_speed_factor: float = 0.01
    orbit_reference_distance: float = 50000.0

    # Transitions
    landing_radius: float = 3500.0
    liftoff_offset: float = 3000.0
    edge_leave_fraction: float = 0.8
    edge_entry_fraction: float = 0.85

    # Player movement
    system_move_increment: float = 5000.0
    fine_control_factor: float = 0.1
    boost_factor: float = 5.0

    # Planet surfaces
    planet_map_base_size: int = 256
    planet_surface_roughness: float = 0.7
    planet_height_levels: int = 256
    terrain_initial_range: float = 128.0

    def __post_init__(self) -> None:
        if self.star_check_hash_scale <= 0:
            raise ValueError("star_check_hash_scale must be positive")
        if not 0.0 <= self.star_density <= 1.0:
            raise ValueError("star_density must be within [0, 1]")
        if not 0.0 <= self.starbase_probability <= 1.0:
            raise ValueError("starbase_probability must be within [0, 1]")
        if self.max_planets_per_system <= 0:
            raise ValueError("max_planets_per_system must be positive")
        if self.planet_height_levels < 2:
            raise ValueError("planet_height_levels must be at least 2")
        if self.min_orbit_separation <= 0.0:
            raise ValueError("min_orbit_separation must be positive")

    @property
    def star_threshold(self) -> int:
        return int(self.star_density * self.star_check_hash_scale)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UniverseConfig":
        """Build a config from camelCase or snake_case keys, ignoring unknown ones."""

        known = {f.name: f for f in fields(cls)}
        defaults = cls()
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            name = _snake_case(str(key))
            if name not in known:
                continue
            default = getattr(defaults, name)
            if isinstance(default, str):
                values[name] = str(raw)
            elif isinstance(default, int):
                values[name] = int(raw)
            else:
                values[name] = float(raw)
        return replace(defaults, **values)

    @classmethod
    def from_settings(cls, settings_path: Path) -> "UniverseConfig":
        data = load_settings(settings_path)
        block = data.get("universe", {})
        if not isinstance(block, dict):
            return cls()
        try:
            return cls.from_dict(block)
        except (TypeError, ValueError):
            return cls()


__all__ = ["UniverseConfig"]
