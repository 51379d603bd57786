"""Fast integer hash for hyperspace cells."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - only used for typing
    from cosmogen.engine.config import UniverseConfig

_MASK = 0xFFFFFFFF
_C1 = 0xCC9E2D51
_C2 = 0x1B873593


def _mix(h: int, value: int) -> int:
    h = ((h ^ (value & _MASK)) * _C1) & _MASK
    h = ((h << 15) | (h >> 17)) & _MASK
    return (h * _C2) & _MASK


def coordinate_hash(x: int, y: int, seed: int) -> int:
    """Hash a cell and seed to an unsigned 32-bit integer with full avalanche."""

    h = _mix(seed & _MASK, int(x))
    h = _mix(h, int(y))
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK
    h ^= h >> 16
    return h


def is_star_present(x: int, y: int, seed: int, config: "UniverseConfig") -> bool:
    return coordinate_hash(x, y, seed) % config.star_check_hash_scale < config.star_threshold


__all__ = ["coordinate_hash", "is_star_present"]
