import math

import pytest

from cosmogen.engine.config import UniverseConfig
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import MineralRichness, PlanetType, EXOTIC_RESOURCES, PRIMARY_RESOURCES
from cosmogen.world.errors import GenerationFailure
from cosmogen.world.planet import GasPalette, TerrainSurface, UninitializedSurface, create_planet
from cosmogen.world.terrain import TerrainSynthesizer


def _config() -> UniverseConfig:
    return UniverseConfig(planet_map_base_size=33, planet_height_levels=64)


def _planet(planet_type=PlanetType.ROCK, name="Test I", distance=60000.0, seed="system"):
    return create_planet(name, planet_type, distance, 1.0, SeededRandom(seed), "Test", "G")


def test_planet_creation_is_deterministic():
    assert _planet().to_dict() == _planet().to_dict()
    assert _planet(seed="other").to_dict() != _planet().to_dict()


def test_planet_seed_chain():
    planet = _planet()
    assert planet.rng.seed == "system:planet_Test I"
    assert planet.map_seed == "system:planet_Test I_map"


@pytest.mark.parametrize("planet_type", list(PlanetType))
def test_characteristics_are_sane(planet_type):
    for index in range(15):
        planet = _planet(planet_type, name=f"Test {index}", distance=10000.0 + index * 20000.0)
        composition = planet.atmosphere.composition
        assert sum(composition.values()) == pytest.approx(100.0, abs=0.2)
        assert 1000 <= planet.diameter <= 20000
        assert planet.gravity >= 0.01
        assert planet.surface_temp >= 2
        if planet.atmosphere.density == "None":
            assert planet.atmosphere.pressure == 0.0
            assert composition == {"None": 100.0}
        else:
            assert planet.atmosphere.pressure >= 0.01
        if planet_type.is_giant:
            assert planet.atmosphere.density == "Thick"
            assert planet.mineral_richness is MineralRichness.NONE
            assert planet.base_minerals == 0
        elif planet_type in (PlanetType.LUNAR, PlanetType.MOLTEN):
            assert planet.atmosphere.density in ("None", "Thin")


def test_orbit_angle_is_normalized():
    planet = create_planet("Wrap I", PlanetType.ROCK, 50000.0, 7.5, SeededRandom("s"), "Wrap", "G")
    assert 0.0 <= planet.orbit_angle < 2.0 * math.pi
    assert planet.position.length() == pytest.approx(50000.0)


def test_solid_surface_is_built_once():
    config = _config()
    planet = _planet(PlanetType.OCEANIC)
    assert isinstance(planet.surface, UninitializedSurface)
    planet.ensure_surface_ready(config)
    surface = planet.surface
    assert isinstance(surface, TerrainSurface)
    assert surface.grid.size == 33
    assert len(surface.colour_ramp) == 64
    planet.ensure_surface_ready(config)
    assert planet.surface is surface


def test_giant_gets_palette_not_terrain():
    planet = _planet(PlanetType.GAS_GIANT)
    planet.ensure_surface_ready(_config())
    assert isinstance(planet.surface, GasPalette)
    assert len(planet.surface.colours) == 9
    assert planet.terrain is None


def test_lunar_surface_is_cratered():
    config = _config()
    planet = _planet(PlanetType.LUNAR)
    planet.ensure_surface_ready(config)
    plain = TerrainSynthesizer(33, config.planet_surface_roughness, planet.map_seed, 64).generate()
    assert planet.terrain.heights != plain.heights
    assert planet.terrain.is_valid()


@pytest.mark.parametrize("error", [ValueError, RuntimeError, AttributeError])
def test_surface_failure_leaves_planet_uninitialized(monkeypatch, error):
    def explode(self, initial_range=128.0):
        raise error("boom")

    monkeypatch.setattr(TerrainSynthesizer, "generate", explode)
    planet = _planet(PlanetType.ROCK)
    with pytest.raises(GenerationFailure):
        planet.ensure_surface_ready(_config())
    assert isinstance(planet.surface, UninitializedSurface)


def test_scan_without_minerals():
    planet = _planet(PlanetType.GAS_GIANT)
    assert planet.scan() == "None Detected"
    assert planet.scanned


def test_scan_is_idempotent_and_uses_type_table():
    planet = _planet(PlanetType.ROCK)
    planet.mineral_richness = MineralRichness.AVERAGE
    first = planet.scan()
    assert first in PRIMARY_RESOURCES[PlanetType.ROCK]
    assert planet.scan() == first


def test_exceptional_scan_can_upgrade():
    labels = set()
    for index in range(40):
        planet = _planet(PlanetType.FROZEN, name=f"Ice {index}")
        planet.mineral_richness = MineralRichness.EXCEPTIONAL
        labels.add(planet.scan())
    assert labels <= set(PRIMARY_RESOURCES[PlanetType.FROZEN]) | set(EXOTIC_RESOURCES)
    assert labels & set(EXOTIC_RESOURCES)


def test_surface_centre_uses_grid_or_map_size():
    config = _config()
    rock = _planet(PlanetType.ROCK)
    rock.ensure_surface_ready(config)
    assert rock.surface_centre(config) == (16, 16)
    giant = _planet(PlanetType.ICE_GIANT)
    giant.ensure_surface_ready(config)
    assert giant.surface_centre(config) == (16, 16)
