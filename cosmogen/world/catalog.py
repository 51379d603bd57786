"""Static tables for stars, planets, atmospheres and minerals."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class SpectralClassInfo:
    temperature: float
    colour: str
    brightness: float


SPECTRAL_CLASSES: Dict[str, SpectralClassInfo] = {
    "O": SpectralClassInfo(temperature=40000.0, colour="#6A8DFF", brightness=1.5),
    "B": SpectralClassInfo(temperature=20000.0, colour="#8FABFF", brightness=1.3),
    "A": SpectralClassInfo(temperature=8500.0, colour="#DDE5FF", brightness=1.1),
    "F": SpectralClassInfo(temperature=6500.0, colour="#FFFFFF", brightness=1.0),
    "G": SpectralClassInfo(temperature=5500.0, colour="#FFFACD", brightness=0.9),
    "K": SpectralClassInfo(temperature=4500.0, colour="#FFC864", brightness=0.7),
    "M": SpectralClassInfo(temperature=3000.0, colour="#FF9A5A", brightness=0.5),
}

# Repeats weight the draw: red dwarfs dominate, O stars are rare.
SPECTRAL_DISTRIBUTION: Tuple[str, ...] = (
    "M", "M", "M", "M", "M", "M", "M", "M",
    "K", "K", "K",
    "G", "G",
    "F", "A", "B", "O",
)

SOLAR_CLASS = "G"


def star_temperature(spectral_class: str) -> float:
    info = SPECTRAL_CLASSES.get(spectral_class, SPECTRAL_CLASSES[SOLAR_CLASS])
    return info.temperature


class PlanetType(enum.Enum):
    """Planet classifications."""

    MOLTEN = "Molten"
    ROCK = "Rock"
    OCEANIC = "Oceanic"
    LUNAR = "Lunar"
    GAS_GIANT = "GasGiant"
    ICE_GIANT = "IceGiant"
    FROZEN = "Frozen"

    @property
    def is_giant(self) -> bool:
        return self in (PlanetType.GAS_GIANT, PlanetType.ICE_GIANT)


@dataclass(frozen=True)
class PlanetTypeInfo:
    colours: Tuple[str, ...]
    base_temp: float
    albedo: float


PLANET_TYPES: Dict[PlanetType, PlanetTypeInfo] = {
    PlanetType.MOLTEN: PlanetTypeInfo(
        colours=("#200000", "#401000", "#662000", "#993000", "#CC5000", "#FF8010", "#FFB030", "#FFE060", "#FFFF99"),
        base_temp=1500.0,
        albedo=0.08,
    ),
    PlanetType.ROCK: PlanetTypeInfo(
        colours=("#2B2B2B", "#404040", "#555555", "#6F6F6F", "#8A8A8A", "#A5A5A5", "#C0C0C0", "#DBDBDB", "#F6F6F6"),
        base_temp=300.0,
        albedo=0.25,
    ),
    PlanetType.OCEANIC: PlanetTypeInfo(
        colours=("#000020", "#001040", "#002060", "#003399", "#0050B2", "#3380CC", "#66B0FF", "#99D0FF", "#CCF0FF"),
        base_temp=280.0,
        albedo=0.15,
    ),
    PlanetType.LUNAR: PlanetTypeInfo(
        colours=("#303030", "#404040", "#505050", "#656565", "#7F7F7F", "#9A9A9A", "#B5B5B5", "#D0D0D0", "#EBEBEB"),
        base_temp=250.0,
        albedo=0.12,
    ),
    PlanetType.GAS_GIANT: PlanetTypeInfo(
        colours=("#6F3F1F", "#8B4513", "#A0522D", "#B86B42", "#CD853F", "#D2B48C", "#E8D8B8", "#F5EDE0", "#FFFFF0"),
        base_temp=150.0,
        albedo=0.35,
    ),
    PlanetType.ICE_GIANT: PlanetTypeInfo(
        colours=("#003060", "#004080", "#0050A0", "#0060C0", "#3377D0", "#6699E0", "#99BBF0", "#CCE6FF", "#E6F2FF"),
        base_temp=100.0,
        albedo=0.30,
    ),
    PlanetType.FROZEN: PlanetTypeInfo(
        colours=("#A0C0C0", "#C0D0D0", "#E0E8E8", "#F0F4F4", "#FFFFFF", "#F8F8F8", "#E8E8E8", "#D8D8D8", "#C8C8C8"),
        base_temp=50.0,
        albedo=0.70,
    ),
}

# Candidate types per temperature zone, hottest first.
ZONE_CANDIDATES: Dict[str, Tuple[PlanetType, ...]] = {
    "scorching": (PlanetType.MOLTEN, PlanetType.MOLTEN, PlanetType.ROCK),
    "hot": (PlanetType.ROCK, PlanetType.ROCK, PlanetType.LUNAR, PlanetType.MOLTEN),
    "habitable": (PlanetType.ROCK, PlanetType.OCEANIC, PlanetType.OCEANIC, PlanetType.ROCK, PlanetType.LUNAR),
    "cold": (PlanetType.ROCK, PlanetType.FROZEN, PlanetType.GAS_GIANT, PlanetType.ICE_GIANT, PlanetType.LUNAR),
    "very_cold": (PlanetType.GAS_GIANT, PlanetType.ICE_GIANT, PlanetType.FROZEN, PlanetType.FROZEN, PlanetType.LUNAR),
}


class MineralRichness(enum.Enum):
    NONE = "None"
    POOR = "Poor"
    AVERAGE = "Average"
    RICH = "Rich"
    EXCEPTIONAL = "Exceptional"


MINERAL_FACTORS: Dict[MineralRichness, int] = {
    MineralRichness.NONE: 0,
    MineralRichness.POOR: 1,
    MineralRichness.AVERAGE: 2,
    MineralRichness.RICH: 5,
    MineralRichness.EXCEPTIONAL: 10,
}

# Chance that a world of the given type carries any minerals at all.
MINERAL_PRESENCE: Dict[PlanetType, float] = {
    PlanetType.MOLTEN: 0.6,
    PlanetType.ROCK: 0.8,
    PlanetType.LUNAR: 0.7,
    PlanetType.FROZEN: 0.4,
    PlanetType.OCEANIC: 0.2,
    PlanetType.GAS_GIANT: 0.0,
    PlanetType.ICE_GIANT: 0.0,
}

PRIMARY_RESOURCES: Dict[PlanetType, Tuple[str, ...]] = {
    PlanetType.ROCK: ("Common Metals", "Silicates", "Rare Elements", "Precious Metals"),
    PlanetType.LUNAR: ("Common Metals", "Silicates", "Rare Elements", "Precious Metals"),
    PlanetType.MOLTEN: ("Heavy Metals", "Exotic Isotopes", "Silicates"),
    PlanetType.FROZEN: ("Water Ice", "Methane Ice", "Ammonia Ice", "Frozen Gases"),
    PlanetType.OCEANIC: ("Water", "Dissolved Minerals", "Exotic Lifeforms"),
}

EXOTIC_RESOURCES: Tuple[str, ...] = ("Exotic Matter", "Artifact Shards", "Precious Gems")

ATMOSPHERE_DENSITIES: Tuple[str, ...] = ("None", "Thin", "Earth-like", "Thick")

ATMOSPHERE_GASES: Tuple[str, ...] = (
    "Hydrogen", "Helium", "Nitrogen", "Oxygen", "Carbon Dioxide", "Argon",
    "Water Vapor", "Methane", "Ammonia", "Neon", "Xenon", "Carbon Monoxide",
    "Ethane", "Chlorine", "Fluorine", "Sulfur Dioxide",
)

SYSTEM_NAME_PREFIXES: Tuple[str, ...] = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta", "Iota",
    "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho", "Sigma", "Tau",
    "Upsilon", "Phi", "Chi", "Psi", "Omega", "Proxima", "Cygnus", "Kepler",
    "Gliese", "HD", "Trappist", "Luyten", "Wolf", "Ross", "Barnard",
)

STARBASE_COLOUR: Tuple[int, int, int] = (0, 255, 255)


__all__ = [
    "ATMOSPHERE_DENSITIES",
    "ATMOSPHERE_GASES",
    "EXOTIC_RESOURCES",
    "MINERAL_FACTORS",
    "MINERAL_PRESENCE",
    "MineralRichness",
    "PLANET_TYPES",
    "PRIMARY_RESOURCES",
    "PlanetType",
    "PlanetTypeInfo",
    "SOLAR_CLASS",
    "SPECTRAL_CLASSES",
    "SPECTRAL_DISTRIBUTION",
    "STARBASE_COLOUR",
    "SYSTEM_NAME_PREFIXES",
    "SpectralClassInfo",
    "ZONE_CANDIDATES",
    "star_temperature",
]
