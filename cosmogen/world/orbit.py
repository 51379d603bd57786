"""Circular orbit state shared by planets and starbases."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.math.numeric import safe_finite

TAU = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 2π)``; non-finite input becomes 0."""

    wrapped = safe_finite(math.fmod(angle, TAU) if math.isfinite(angle) else angle, 0.0)
    if wrapped < 0.0:
        wrapped += TAU
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped


@dataclass
class OrbitState:
    distance: float
    angle: float
    position: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        self.angle = normalize_angle(self.angle)
        self.sync_position()

    def sync_position(self) -> None:
        self.position = Vector2(
            safe_finite(math.cos(self.angle) * self.distance, 0.0),
            safe_finite(math.sin(self.angle) * self.distance, 0.0),
        )


def advance_orbit(orbit: OrbitState, dt: float, config: UniverseConfig) -> None:
    """Advance ``orbit`` by ``dt`` seconds; inner orbits sweep faster."""

    scale = safe_finite(max(1000.0, orbit.distance) / config.orbit_reference_distance, 1.0)
    if scale <= 0.0:
        scale = 1.0
    speed = safe_finite(config.orbit_speed_factor / math.sqrt(scale) * dt, 0.0)
    orbit.angle = normalize_angle(orbit.angle + speed)
    orbit.sync_position()


__all__ = ["OrbitState", "TAU", "advance_orbit", "normalize_angle"]
