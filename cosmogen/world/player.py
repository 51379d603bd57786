"""Player location in each of the three coordinate frames."""
from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig


@dataclass
class Player:
    world_x: int = 0
    world_y: int = 0
    system_position: Vector2 = field(default_factory=Vector2)
    surface_x: int = 0
    surface_y: int = 0

    def move_in_hyperspace(self, dx: int, dy: int) -> None:
        self.world_x += int(dx)
        self.world_y += int(dy)

    def move_in_system(
        self,
        dx: float,
        dy: float,
        config: UniverseConfig,
        fine: bool = False,
        boost: bool = False,
    ) -> None:
        step = config.system_move_increment
        if fine:
            step *= config.fine_control_factor
        if boost:
            step *= config.boost_factor
        self.system_position = Vector2(
            self.system_position.x + dx * step,
            self.system_position.y + dy * step,
        )

    def move_on_surface(self, dx: int, dy: int, map_size: int) -> None:
        """Step across a surface that wraps at ``map_size`` on both axes."""

        if map_size <= 0:
            return
        self.surface_x = (self.surface_x + int(dx)) % map_size
        self.surface_y = (self.surface_y + int(dy)) % map_size


__all__ = ["Player"]
