import math

import pytest
from pygame.math import Vector2

from cosmogen.engine.config import UniverseConfig
from cosmogen.math.prng import SeededRandom
from cosmogen.world.catalog import SPECTRAL_CLASSES, PlanetType
from cosmogen.world.errors import GenerationFailure
from cosmogen.world.orbit import OrbitState, advance_orbit
from cosmogen.world.solar_system import (
    SystemGenerator,
    effective_temperature,
    roman_numeral,
    temperature_zone,
)

EPSILON = 1e-6


def _generate(x, y, seed="haunting beauty", **overrides):
    config = UniverseConfig(**overrides)
    return SystemGenerator(config).generate(x, y, SeededRandom(seed))


def test_same_inputs_give_same_system():
    first = _generate(12, -7)
    second = _generate(12, -7)
    assert first.to_dict() == second.to_dict()
    assert _generate(13, -7).to_dict() != first.to_dict()


def test_system_shape():
    system = _generate(3, 4)
    assert system.spectral_class in SPECTRAL_CLASSES
    assert len(system.planets) == 9
    assert system.rng.seed == "haunting beauty:star_3,4"
    prefix, _, rest = system.name.partition("-")
    assert prefix and rest[:-1].isdigit() and rest[-1].isupper()
    assert 1 <= int(rest[:-1]) <= 999


def test_planet_names_use_roman_numerals():
    system = _generate(5, 5)
    for index, planet in enumerate(system.planets):
        if planet is not None:
            assert planet.name == f"{system.name} {roman_numeral(index + 1)}"


def test_roman_numerals():
    assert [roman_numeral(n) for n in (1, 4, 9, 14, 40, 1994)] == ["I", "IV", "IX", "XIV", "XL", "MCMXCIV"]


@pytest.mark.parametrize("x", range(-20, 20, 3))
def test_orbit_separation_and_edge_radius(x):
    system = _generate(x, 2 * x + 1, starbase_probability=1.0)
    separation = system.config.min_orbit_separation
    orbits = [planet.orbit_distance for planet in system.planets if planet is not None]
    for inner, outer in zip(orbits, orbits[1:]):
        assert outer - inner >= separation - EPSILON
    assert system.starbase is not None
    for orbit in orbits:
        assert abs(orbit - system.starbase.orbit_distance) >= separation - EPSILON
    assert system.edge_radius >= max(50000.0, system.outermost_orbit()) - EPSILON


def test_no_starbase_when_probability_zero():
    system = _generate(1, 1, starbase_probability=0.0)
    assert system.starbase is None


def test_starbase_details():
    system = _generate(8, 9, starbase_probability=1.0)
    starbase = system.starbase
    assert starbase.name == f"{system.name} Starbase Delta"
    assert starbase.body_type == "Starbase"
    assert 75000.0 * 0.9 <= starbase.orbit_distance <= 75000.0 * 1.1
    assert starbase.surface.grid.heights == [[0]]
    assert starbase.surface.colour_ramp == ["#00FFFF"]
    assert list(system.bodies())[-1] is starbase


def test_temperature_zones():
    config = UniverseConfig()
    assert effective_temperature("G", 50000.0, config) == pytest.approx(280.0)
    assert temperature_zone(900.0, config) == "scorching"
    assert temperature_zone(500.0, config) == "hot"
    assert temperature_zone(300.0, config) == "habitable"
    assert temperature_zone(200.0, config) == "cold"
    assert temperature_zone(100.0, config) == "very_cold"


def test_far_planets_around_dim_stars_are_cold_types():
    cold = {PlanetType.GAS_GIANT, PlanetType.ICE_GIANT, PlanetType.FROZEN, PlanetType.LUNAR, PlanetType.ROCK}
    for x in range(10):
        system = _generate(x, 100)
        for planet in system.planets[6:]:
            if planet is None:
                continue
            temp = effective_temperature(system.spectral_class, planet.orbit_distance, system.config)
            if temp <= system.config.inner_habitable_temp:
                assert planet.planet_type in cold


@pytest.mark.parametrize("error", [ZeroDivisionError, AttributeError, RuntimeError])
def test_generation_errors_become_generation_failure(monkeypatch, error):
    generator = SystemGenerator(UniverseConfig())

    def broken(*args, **kwargs):
        raise error("bad orbit")

    monkeypatch.setattr("cosmogen.world.solar_system.create_planet", broken)
    with pytest.raises(GenerationFailure):
        generator.generate(0, 0, SeededRandom("abc"))


def test_object_near_and_edge():
    system = _generate(2, 3)
    body = next(system.bodies())
    assert system.object_near(Vector2(body.position)) is body
    assert system.object_near(Vector2(1e12, 1e12)) is None
    leave_fraction = system.config.edge_leave_fraction
    assert system.is_at_edge(Vector2(system.edge_radius * (leave_fraction + 0.01), 0.0))
    assert not system.is_at_edge(Vector2(0.0, system.edge_radius * (leave_fraction - 0.01)))


def test_update_orbits_moves_bodies_and_keeps_angle_range():
    system = _generate(4, 4)
    body = next(system.bodies())
    before = Vector2(body.position)
    for _ in range(100):
        system.update_orbits(50.0)
    assert body.position != before
    assert 0.0 <= body.orbit.angle < 2.0 * math.pi
    assert body.position.length() == pytest.approx(body.orbit_distance, rel=1e-6)


def test_inner_orbits_sweep_faster():
    config = UniverseConfig()
    inner = OrbitState(distance=20000.0, angle=0.0)
    outer = OrbitState(distance=200000.0, angle=0.0)
    advance_orbit(inner, 1.0, config)
    advance_orbit(outer, 1.0, config)
    assert inner.angle > outer.angle > 0.0


@pytest.mark.parametrize("distance, dt", [(float("nan"), 1.0), (float("inf"), 1.0), (50000.0, float("nan")), (50000.0, float("inf"))])
def test_orbit_positions_stay_finite(distance, dt):
    orbit = OrbitState(distance=distance, angle=0.5)
    advance_orbit(orbit, dt, UniverseConfig())
    assert math.isfinite(orbit.position.x)
    assert math.isfinite(orbit.position.y)
    assert 0.0 <= orbit.angle < 2.0 * math.pi
