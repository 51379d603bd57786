"""Colour conversion and height-ramp helpers for planet surfaces."""
from __future__ import annotations

import re
from typing import List, Sequence, Tuple

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#RRGGBB`` (hash optional). Raises ``ValueError`` on anything else."""

    match = _HEX_PATTERN.match(value or "")
    if match is None:
        raise ValueError(f"invalid hex colour {value!r}")
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02X}{:02X}{:02X}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def lerp_colour(start: RGB, end: RGB, factor: float) -> Tuple[float, float, float]:
    t = max(0.0, min(1.0, factor))
    return (
        start[0] + (end[0] - start[0]) * t,
        start[1] + (end[1] - start[1]) * t,
        start[2] + (end[2] - start[2]) * t,
    )


def build_colour_ramp(palette: Sequence[RGB], levels: int) -> List[str]:
    """Spread ``palette`` across ``levels`` height values as hex strings.

    Height 0 maps to the first palette entry and ``levels - 1`` to the last;
    intermediate heights interpolate between the two nearest entries.
    """

    if not palette:
        raise ValueError("palette must contain at least one colour")
    if levels < 1:
        raise ValueError("levels must be positive")
    count = len(palette)
    if count == 1 or levels == 1:
        return [rgb_to_hex(*palette[0])] * levels
    ramp: List[str] = []
    for height in range(levels):
        position = height / (levels - 1) * (count - 1)
        index = min(count - 1, int(position))
        upper = min(count - 1, index + 1)
        factor = position - index
        if index == upper or factor == 0.0:
            ramp.append(rgb_to_hex(*palette[index]))
        else:
            ramp.append(rgb_to_hex(*lerp_colour(palette[index], palette[upper], factor)))
    return ramp


__all__ = ["RGB", "build_colour_ramp", "hex_to_rgb", "lerp_colour", "rgb_to_hex"]
