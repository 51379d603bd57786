"""Exploration state machine: hyperspace, system flight, landing and docking."""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import ChannelLogger, GameLogger
from cosmogen.math.coordinate_hash import is_star_present
from cosmogen.math.prng import SeededRandom
from cosmogen.world.errors import InconsistentStateFailure
from cosmogen.world.planet import Planet
from cosmogen.world.player import Player
from cosmogen.world.solar_system import Body, SolarSystem, SystemGenerator
from cosmogen.world.starbase import Starbase


class ExplorationState(enum.Enum):
    HYPERSPACE = "hyperspace"
    IN_SYSTEM = "system"
    ON_PLANET = "planet"
    ON_STARBASE = "starbase"

    @property
    def is_landed(self) -> bool:
        return self in (ExplorationState.ON_PLANET, ExplorationState.ON_STARBASE)


@dataclass(frozen=True)
class _Snapshot:
    state: ExplorationState
    system: Optional[SolarSystem] = None
    planet: Optional[Planet] = None
    starbase: Optional[Starbase] = None


_HYPERSPACE = _Snapshot(ExplorationState.HYPERSPACE)


class ExplorationStateMachine:
    """Owns the player's location and the single live system, if any.

    Transitions return ``(success, message)``; landing returns the body or
    ``None`` in place of the flag. Nothing raises past this class: generation
    failures leave the previous state untouched and inconsistent states are
    recovered by dropping back to hyperspace.
    """

    def __init__(
        self,
        config: UniverseConfig,
        root_rng: SeededRandom,
        player: Optional[Player] = None,
        logger: Optional[GameLogger] = None,
        generator: Optional[SystemGenerator] = None,
    ) -> None:
        self.config = config
        self.root_rng = root_rng
        self.player = player or Player()
        self.logger = logger
        generation_log = logger.channel("generation") if logger else None
        self.generator = generator or SystemGenerator(config, logger=generation_log)
        self._snapshot = _HYPERSPACE
        self.status_message = ""

    @property
    def state(self) -> ExplorationState:
        return self._snapshot.state

    @property
    def current_system(self) -> Optional[SolarSystem]:
        return self._snapshot.system

    @property
    def current_planet(self) -> Optional[Planet]:
        return self._snapshot.planet

    @property
    def current_starbase(self) -> Optional[Starbase]:
        return self._snapshot.starbase

    def _channel(self, name: str) -> Optional[ChannelLogger]:
        return self.logger.channel(name) if self.logger else None

    def _commit(self, snapshot: _Snapshot) -> None:
        previous = self._snapshot.state
        self._snapshot = snapshot
        state_log = self._channel("state")
        if state_log and previous is not snapshot.state:
            state_log.info("State %s -> %s", previous.value, snapshot.state.value)

    def _report(self, message: str) -> str:
        self.status_message = message
        return message

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------
    def check_consistency(self) -> None:
        """Raise ``InconsistentStateFailure`` if the references contradict the state."""

        snap = self._snapshot
        if snap.state is ExplorationState.HYPERSPACE:
            if snap.system or snap.planet or snap.starbase:
                raise InconsistentStateFailure("hyperspace still holds system references")
            return
        if snap.system is None:
            raise InconsistentStateFailure(f"{snap.state.value} state without a current system")
        if snap.state is ExplorationState.IN_SYSTEM:
            if snap.planet or snap.starbase:
                raise InconsistentStateFailure("in-system state still holds a landed body")
            return
        if snap.state is ExplorationState.ON_PLANET and (snap.planet is None or snap.starbase is not None):
            raise InconsistentStateFailure("planet state must reference exactly one planet")
        if snap.state is ExplorationState.ON_STARBASE and (snap.starbase is None or snap.planet is not None):
            raise InconsistentStateFailure("starbase state must reference exactly one starbase")

    def _recover_if_inconsistent(self) -> Optional[str]:
        try:
            self.check_consistency()
        except InconsistentStateFailure as exc:
            state_log = self._channel("state")
            if state_log:
                state_log.error("Inconsistent state (%s); returning to hyperspace", exc)
            self._commit(_HYPERSPACE)
            return self._report(f"Navigation fault: {exc}. Returned to hyperspace.")
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def star_present(self, world_x: int, world_y: int) -> bool:
        return is_star_present(world_x, world_y, self.root_rng.seed_int, self.config)

    def peek_at_system(self, world_x: int, world_y: int) -> Optional[SolarSystem]:
        """Build a throwaway system for a cell without touching the live state."""

        if not self.star_present(world_x, world_y):
            return None
        try:
            return self.generator.generate(world_x, world_y, self.root_rng)
        except Exception as exc:
            generation_log = self._channel("generation")
            if generation_log:
                generation_log.warning("Peek at (%d, %d) failed: %s", world_x, world_y, exc)
            return None

    def nearby_object(self) -> Optional[Body]:
        if self.state is not ExplorationState.IN_SYSTEM or self.current_system is None:
            return None
        return self.current_system.object_near(self.player.system_position)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def enter_system(self) -> Tuple[bool, str]:
        recovered = self._recover_if_inconsistent()
        if recovered:
            return False, recovered
        if self.state is not ExplorationState.HYPERSPACE:
            return False, self._report("Already inside a system")
        world_x, world_y = self.player.world_x, self.player.world_y
        if not self.star_present(world_x, world_y):
            return False, self._report("No star system here")
        try:
            system = self.generator.generate(world_x, world_y, self.root_rng)
        except Exception as exc:
            state_log = self._channel("state")
            if state_log:
                state_log.error("Could not enter system at (%d, %d): %s", world_x, world_y, exc)
            return False, self._report(f"System generation failed: {exc}")

        angle = math.atan2(world_y, world_x)
        distance = system.edge_radius * self.config.edge_entry_fraction
        entry = Vector2(math.cos(angle) * distance, math.sin(angle) * distance)
        self._commit(_Snapshot(ExplorationState.IN_SYSTEM, system=system))
        self.player.system_position = entry
        return True, self._report(f"Entered {system.name}")

    def leave_system(self) -> Tuple[bool, str]:
        recovered = self._recover_if_inconsistent()
        if recovered:
            return False, recovered
        system = self.current_system
        if self.state is not ExplorationState.IN_SYSTEM or system is None:
            return False, self._report("Not flying within a system")
        if not system.is_at_edge(self.player.system_position):
            return False, self._report("Too close to the star to jump out")
        self._commit(_HYPERSPACE)
        self.player.world_x = system.star_x
        self.player.world_y = system.star_y
        return True, self._report(f"Left {system.name}")

    def land_on_nearby_object(self) -> Tuple[Optional[Body], str]:
        recovered = self._recover_if_inconsistent()
        if recovered:
            return None, recovered
        system = self.current_system
        if self.state is not ExplorationState.IN_SYSTEM or system is None:
            return None, self._report("Nothing to land on from here")
        body = system.object_near(self.player.system_position)
        if body is None:
            return None, self._report("No body within landing range")
        try:
            body.ensure_surface_ready(self.config, logger=self._channel("terrain"))
        except Exception as exc:
            state_log = self._channel("state")
            if state_log:
                state_log.error("Landing on %s aborted: %s", body.name, exc)
            return None, self._report(f"Landing error on {body.name}: {exc}")

        surface_x, surface_y = body.surface_centre(self.config)
        if isinstance(body, Planet):
            snapshot = _Snapshot(ExplorationState.ON_PLANET, system=system, planet=body)
            message = f"Landed on {body.name}"
        else:
            snapshot = _Snapshot(ExplorationState.ON_STARBASE, system=system, starbase=body)
            message = f"Docked at {body.name}"
        self._commit(snapshot)
        self.player.surface_x = surface_x
        self.player.surface_y = surface_y
        return body, self._report(message)

    def lift_off(self) -> Tuple[bool, str]:
        recovered = self._recover_if_inconsistent()
        if recovered:
            return False, recovered
        if not self.state.is_landed:
            return False, self._report("Not landed or docked")
        system = self.current_system
        body: Optional[Body] = self.current_planet or self.current_starbase
        position = Vector2(body.position.x, body.position.y - self.config.liftoff_offset)
        self._commit(_Snapshot(ExplorationState.IN_SYSTEM, system=system))
        self.player.system_position = position
        return True, self._report(f"Lifted off from {body.name}")

    # ------------------------------------------------------------------
    # Per-frame driving
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        self._recover_if_inconsistent()
        if self.state is ExplorationState.IN_SYSTEM and self.current_system is not None:
            self.current_system.update_orbits(dt)

    def move(self, dx: float, dy: float, fine: bool = False, boost: bool = False) -> None:
        state = self.state
        if state is ExplorationState.HYPERSPACE:
            self.player.move_in_hyperspace(int(dx), int(dy))
        elif state is ExplorationState.IN_SYSTEM:
            self.player.move_in_system(dx, dy, self.config, fine=fine, boost=boost)
        elif state is ExplorationState.ON_PLANET and self.current_planet is not None:
            grid = self.current_planet.terrain
            size = grid.size if grid is not None else self.config.planet_map_base_size
            self.player.move_on_surface(int(dx), int(dy), size)

    def scan_current_planet(self) -> Tuple[bool, str]:
        if self.state is not ExplorationState.ON_PLANET or self.current_planet is None:
            return False, self._report("Scanning requires being on a planet")
        planet = self.current_planet
        resource = planet.scan()
        return True, self._report(
            f"Scan of {planet.name}: richness {planet.mineral_richness.value}, primary resource {resource}"
        )


__all__ = ["ExplorationState", "ExplorationStateMachine"]
