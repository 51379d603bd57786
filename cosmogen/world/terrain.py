"""Diamond-square heightmap synthesis and crater stamping."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from cosmogen.engine.logger import ChannelLogger
from cosmogen.math.numeric import finite_average
from cosmogen.math.prng import SeededRandom


@dataclass
class TerrainGrid:
    """Square grid of integer heights in ``[0, levels - 1]``."""

    heights: List[List[int]]
    levels: int

    @property
    def size(self) -> int:
        return len(self.heights)

    def height_at(self, x: int, y: int) -> int:
        """Height at ``(x, y)`` with wrap-around on both axes."""

        size = self.size
        return self.heights[y % size][x % size]

    def is_valid(self) -> bool:
        size = self.size
        if size < 1:
            return False
        for row in self.heights:
            if len(row) != size:
                return False
            for value in row:
                if not 0 <= value <= self.levels - 1:
                    return False
        return True

    def minimum(self) -> int:
        return min(min(row) for row in self.heights)

    def maximum(self) -> int:
        return max(max(row) for row in self.heights)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def grid_size_for(target_size: int) -> int:
    """Smallest ``2**k + 1`` that is at least ``target_size`` (never below 3)."""

    power = 0
    while (1 << power) + 1 < target_size:
        power += 1
    return max(3, (1 << power) + 1)


class TerrainSynthesizer:
    """Fractal heightmap generator seeded by a planet's map seed."""

    def __init__(
        self,
        target_size: int,
        roughness: float,
        seed: str,
        levels: int,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.size = grid_size_for(int(target_size))
        self.max_index = self.size - 1
        self.roughness = max(0.0, min(1.0, float(roughness)))
        self.levels = int(levels)
        self.rng = SeededRandom(f"{seed}_heightmap")
        self._logger = logger
        self._map: List[List[float]] = [[0.0] * self.size for _ in range(self.size)]
        if self._logger:
            self._logger.debug(
                "Terrain synthesizer size=%d (target %s) roughness=%.2f seed=%s",
                self.size,
                target_size,
                self.roughness,
                self.rng.seed,
            )

    def generate(self, initial_range: float = 128.0) -> TerrainGrid:
        top = self.max_index
        for x, y in ((0, 0), (top, 0), (0, top), (top, top)):
            self._map[y][x] = self.rng.uniform(1.0, initial_range)

        step = top
        spread = float(initial_range)
        while step // 2 >= 1:
            half = step // 2
            self._diamond_pass(step, half, spread)
            self._square_pass(step, half, spread)
            spread = max(1.0, spread * self.roughness)
            step = half

        heights = self._normalize()
        if self._logger:
            self._logger.info("Generated %dx%d terrain grid", self.size, self.size)
        return TerrainGrid(heights=heights, levels=self.levels)

    def _get(self, x: int, y: int) -> float:
        return self._map[y % self.size][x % self.size]

    def _diamond_pass(self, step: int, half: int, spread: float) -> None:
        for y in range(half, self.max_index, step):
            for x in range(half, self.max_index, step):
                offset = self.rng.uniform(-spread, spread)
                average = finite_average(
                    (
                        self._get(x - half, y - half),
                        self._get(x + half, y - half),
                        self._get(x - half, y + half),
                        self._get(x + half, y + half),
                    )
                )
                self._map[y][x] = average + offset

    def _square_pass(self, step: int, half: int, spread: float) -> None:
        for y in range(0, self.max_index + 1, half):
            for x in range((y + half) % step, self.max_index + 1, step):
                offset = self.rng.uniform(-spread, spread)
                average = finite_average(
                    (
                        self._get(x, y - half),
                        self._get(x + half, y),
                        self._get(x, y + half),
                        self._get(x - half, y),
                    )
                )
                self._map[y][x] = average + offset

    def _normalize(self) -> List[List[int]]:
        target_max = self.levels - 1
        low = min(min(row) for row in self._map)
        high = max(max(row) for row in self._map)
        span = high - low
        if span == 0 or not math.isfinite(span):
            midpoint = _round_half_up(target_max / 2)
            if self._logger:
                self._logger.warning("Flat or invalid terrain range (%s); using midpoint %d", span, midpoint)
            return [[midpoint] * self.size for _ in range(self.size)]
        return [
            [max(0, min(target_max, _round_half_up((value - low) / span * target_max))) for value in row]
            for row in self._map
        ]


def add_craters(
    grid: TerrainGrid,
    rng: SeededRandom,
    levels: int,
    logger: Optional[ChannelLogger] = None,
) -> TerrainGrid:
    """Stamp impact craters into ``grid`` in place and return it.

    Each crater is a cosine depression with a raised rim; every touched cell
    is clamped to ``[0, levels - 1]``.
    """

    size = grid.size
    if size <= 0:
        return grid
    top = levels - 1
    count = rng.uniform_int(size // 15, size // 5)
    for _ in range(count):
        radius = rng.uniform_int(3, max(5, size // 10))
        cx = rng.uniform_int(0, size - 1)
        cy = rng.uniform_int(0, size - 1)
        depth = radius * rng.uniform(0.5, 2.0)
        rim_height = depth * rng.uniform(0.1, 0.3)
        rim_peak = radius * 0.85
        rim_width = radius * 0.3
        for y in range(max(0, cy - radius - 2), min(size - 1, cy + radius + 2) + 1):
            row = grid.heights[y]
            for x in range(max(0, cx - radius - 2), min(size - 1, cx + radius + 2) + 1):
                dist_sq = (x - cx) ** 2 + (y - cy) ** 2
                if dist_sq > (radius + 1) ** 2:
                    continue
                dist = math.sqrt(dist_sq)
                delta = 0.0
                if dist < radius:
                    delta -= depth * (math.cos(dist / radius * math.pi) + 1.0) / 2.0
                if rim_peak - rim_width < dist < rim_peak + rim_width:
                    delta += rim_height * (math.cos((dist - rim_peak) / rim_width * math.pi) + 1.0) / 2.0
                row[x] = max(0, min(top, _round_half_up(row[x] + delta)))
    if logger:
        logger.debug("Stamped %d craters", count)
    return grid


__all__ = ["TerrainGrid", "TerrainSynthesizer", "add_craters", "grid_size_for"]
