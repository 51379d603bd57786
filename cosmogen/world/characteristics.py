"""Physical characteristics rolled for each planet at creation time."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from cosmogen.engine.logger import ChannelLogger
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import (
    ATMOSPHERE_DENSITIES,
    ATMOSPHERE_GASES,
    MINERAL_FACTORS,
    MINERAL_PRESENCE,
    PLANET_TYPES,
    SOLAR_CLASS,
    MineralRichness,
    PlanetType,
    star_temperature,
)

NO_ATMOSPHERE = "None"


@dataclass
class Atmosphere:
    density: str
    pressure: float
    composition: Dict[str, float] = field(default_factory=dict)

    @property
    def is_vacuum(self) -> bool:
        return self.density == NO_ATMOSPHERE


@dataclass
class PlanetCharacteristics:
    diameter: int
    gravity: float
    atmosphere: Atmosphere
    surface_temp: int
    hydrosphere: str
    lithosphere: str
    mineral_richness: MineralRichness
    base_minerals: int


def _approximate_temperature(
    rng: SeededRandom, planet_type: PlanetType, spectral_class: str, orbit_distance: float
) -> float:
    base = PLANET_TYPES[planet_type].base_temp
    luminosity = (star_temperature(spectral_class) / star_temperature(SOLAR_CLASS)) ** 0.25
    distance = (50000.0 / max(1000.0, orbit_distance)) ** 0.5
    return base * luminosity * distance + rng.uniform(-50.0, 50.0)


def _primary_gas(rng: SeededRandom, planet_type: PlanetType, approx_temp: float) -> str:
    if planet_type.is_giant:
        return rng.choice(("Hydrogen", "Helium"))
    if approx_temp < 150.0:
        return rng.choice(("Nitrogen", "Nitrogen", "Methane", "Carbon Dioxide", "Argon"))
    if approx_temp > 500.0:
        return rng.choice(("Carbon Dioxide", "Carbon Dioxide", "Nitrogen", "Sulfur Dioxide", "Water Vapor"))
    return rng.choice(("Nitrogen", "Nitrogen", "Nitrogen", "Carbon Dioxide", "Argon", "Water Vapor"))


def _normalize_composition(raw: Dict[str, float], primary: str) -> Dict[str, float]:
    total = sum(raw.values())
    if total <= 0.0:
        return {primary: 100.0}
    scale = 100.0 / total
    final = {gas: round(percent * scale, 1) for gas, percent in raw.items()}
    final = {gas: percent for gas, percent in final.items() if percent > 0.0}
    if not final:
        return {primary: 100.0}
    anchor = primary if primary in final else max(final, key=final.get)
    drift = 100.0 - sum(final.values())
    if drift:
        final[anchor] = round(max(0.0, final[anchor] + drift), 1)
    return final


def generate_composition(
    rng: SeededRandom,
    density: str,
    planet_type: PlanetType,
    spectral_class: str,
    orbit_distance: float,
) -> Dict[str, float]:
    """Gas percentages for an atmosphere; always sums to 100."""

    if density == NO_ATMOSPHERE:
        return {NO_ATMOSPHERE: 100.0}
    gas_count = rng.uniform_int(2, 6)
    approx_temp = _approximate_temperature(rng, planet_type, spectral_class, orbit_distance)
    primary = _primary_gas(rng, planet_type, approx_temp)
    primary_percent = rng.uniform(50.0, 95.0)
    raw: Dict[str, float] = {primary: primary_percent}
    remaining = 100.0 - primary_percent

    available: List[str] = [gas for gas in ATMOSPHERE_GASES if gas != primary]
    index = 1
    while index < gas_count and remaining > 0.1 and available:
        gas = available.pop(rng.uniform_int(0, len(available) - 1))
        if index == gas_count - 1 or not available:
            percent = remaining
        else:
            percent = rng.uniform(0.1, remaining / 1.5)
        if percent > 0.05:
            raw[gas] = percent
            remaining -= percent
        index += 1
    return _normalize_composition(raw, primary)


def generate_atmosphere(
    rng: SeededRandom,
    planet_type: PlanetType,
    gravity: float,
    spectral_class: str,
    orbit_distance: float,
) -> Atmosphere:
    roll = rng.next()
    if roll < 0.2:
        index = 0
    elif roll < 0.5:
        index = 1
    elif roll < 0.85:
        index = 2
    else:
        index = 3

    if planet_type.is_giant:
        index = 3
    elif planet_type in (PlanetType.LUNAR, PlanetType.MOLTEN):
        index = rng.choice((0, 0, 1))
    elif gravity < 0.3 and index > 1:
        index = 1

    density = ATMOSPHERE_DENSITIES[index]
    pressure = 0.0 if index == 0 else max(0.01, rng.uniform(0.01, 5.0) * index)
    composition = generate_composition(rng, density, planet_type, spectral_class, orbit_distance)
    return Atmosphere(density=density, pressure=pressure, composition=composition)


def surface_temperature(
    planet_type: PlanetType,
    orbit_distance: float,
    spectral_class: str,
    atmosphere: Atmosphere,
) -> int:
    luminosity = (star_temperature(spectral_class) / star_temperature(SOLAR_CLASS)) ** 4
    distance_factor = (50000.0 / max(1000.0, orbit_distance)) ** 2
    temp = PLANET_TYPES[planet_type].base_temp * (luminosity * distance_factor) ** 0.25

    greenhouse = 1.0
    if atmosphere.density == "Earth-like":
        greenhouse = 1.15
    elif atmosphere.density == "Thick":
        greenhouse = 1.6
    co2 = atmosphere.composition.get("Carbon Dioxide", 0.0)
    methane = atmosphere.composition.get("Methane", 0.0)
    if co2 > 50.0 or methane > 20.0:
        greenhouse *= 1.3
    temp *= greenhouse

    if planet_type in (PlanetType.FROZEN, PlanetType.ICE_GIANT):
        temp *= 0.8
    if planet_type in (PlanetType.MOLTEN, PlanetType.LUNAR):
        temp *= 1.05
    return max(2, int(round(temp)))


def describe_hydrosphere(rng: SeededRandom, planet_type: PlanetType, surface_temp: float, atmosphere: Atmosphere) -> str:
    if planet_type is PlanetType.OCEANIC:
        return "Global Saline Ocean"
    if planet_type is PlanetType.FROZEN:
        return "Global Ice Sheet, Subsurface Ocean Possible"
    if planet_type in (PlanetType.MOLTEN, PlanetType.LUNAR):
        return "None"
    if planet_type.is_giant:
        return "N/A (Gaseous/Fluid Interior)"

    pressure = atmosphere.pressure
    boiling_point = 373.15 + (pressure - 1.0) * 35.0
    if surface_temp < 273.15:
        if pressure > 0.006:
            return rng.choice(("Polar Ice Caps, Surface Ice Deposits", "Scattered Subsurface Ice Pockets"))
        return "Trace Ice Sublimating"
    if surface_temp < boiling_point:
        if pressure > 0.01:
            return rng.choice(
                ("Arid, Trace Liquid Water Possible", "Lakes, Rivers, Small Seas", "Significant Oceans and Seas")
            )
        return "Atmospheric Water Vapor (Low Pressure)"
    if pressure > 0.01:
        if pressure > 5.0 and rng.next() < 0.3:
            return "Atmospheric Water Vapor, Potential Supercritical Fluid"
        return "Trace Water Vapor"
    return "None (Too Hot, Low Pressure)"


def describe_lithosphere(rng: SeededRandom, planet_type: PlanetType) -> str:
    if planet_type is PlanetType.MOLTEN:
        return "Silicate Lava Flows, Rapidly Cooling Crust"
    if planet_type is PlanetType.ROCK:
        return rng.choice(
            (
                "Silicate Rock (Granite/Basalt), Tectonically Active?",
                "Carbonaceous Rock, Sedimentary Layers, Fossil Potential?",
                "Iron-Rich Crust, Evidence of Metallic Core",
            )
        )
    if planet_type is PlanetType.OCEANIC:
        return "Submerged Silicate Crust, Probable Hydrothermal Vents"
    if planet_type is PlanetType.LUNAR:
        return "Impact-Pulverized Regolith, Basaltic Maria, Scarce Volatiles"
    if planet_type is PlanetType.GAS_GIANT:
        return "No Solid Surface Defined"
    if planet_type is PlanetType.ICE_GIANT:
        return "No Solid Surface Defined, Deep Icy/Fluid Mantle"
    return rng.choice(
        (
            "Water Ice Dominant, Ammonia/Methane Ices Present",
            "Nitrogen/CO2 Ice Glaciers, Possible Cryovolcanism",
            "Mixed Ice/Rock Surface, Sublimation Features",
        )
    )


def determine_mineral_richness(rng: SeededRandom, planet_type: PlanetType) -> MineralRichness:
    """Roll richness on the planet's ``minerals`` child source."""

    presence = MINERAL_PRESENCE.get(planet_type, 0.5)
    if presence <= 0.0:
        return MineralRichness.NONE
    minerals = rng.derive_child("minerals")
    if minerals.next() > presence:
        return MineralRichness.NONE
    roll = minerals.next()
    if roll < 0.40:
        return MineralRichness.POOR
    if roll < 0.75:
        return MineralRichness.AVERAGE
    if roll < 0.95:
        return MineralRichness.RICH
    return MineralRichness.EXCEPTIONAL


def base_minerals_for(rng: SeededRandom, richness: MineralRichness) -> int:
    factor = MINERAL_FACTORS[richness]
    if factor == 0:
        return 0
    return int(round(factor * 1000 * rng.uniform(0.8, 1.2)))


def generate_characteristics(
    rng: SeededRandom,
    planet_type: PlanetType,
    orbit_distance: float,
    spectral_class: str,
    logger: Optional[ChannelLogger] = None,
) -> PlanetCharacteristics:
    """Roll every physical property in a fixed order on ``rng``."""

    diameter = max(1000, rng.uniform_int(2000, 20000))
    gravity = max(0.01, rng.uniform(0.1, 2.5))
    atmosphere = generate_atmosphere(rng, planet_type, gravity, spectral_class, orbit_distance)
    surface_temp = surface_temperature(planet_type, orbit_distance, spectral_class, atmosphere)
    hydrosphere = describe_hydrosphere(rng, planet_type, surface_temp, atmosphere)
    lithosphere = describe_lithosphere(rng, planet_type)
    richness = determine_mineral_richness(rng, planet_type)
    base_minerals = base_minerals_for(rng, richness)
    if logger:
        logger.debug(
            "%s world: %dkm %.2fG atmosphere=%s %dK richness=%s",
            planet_type.value,
            diameter,
            gravity,
            atmosphere.density,
            surface_temp,
            richness.value,
        )
    return PlanetCharacteristics(
        diameter=diameter,
        gravity=gravity,
        atmosphere=atmosphere,
        surface_temp=surface_temp,
        hydrosphere=hydrosphere,
        lithosphere=lithosphere,
        mineral_richness=richness,
        base_minerals=base_minerals,
    )


__all__ = [
    "Atmosphere",
    "NO_ATMOSPHERE",
    "PlanetCharacteristics",
    "base_minerals_for",
    "describe_hydrosphere",
    "describe_lithosphere",
    "determine_mineral_richness",
    "generate_atmosphere",
    "generate_characteristics",
    "generate_composition",
    "surface_temperature",
]
