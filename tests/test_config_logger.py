import json
import logging

import pytest

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import DEFAULT_CHANNELS, GameLogger, LoggerConfig, init_logger
from cosmogen.engine.settings import load_settings


def test_defaults():
    config = UniverseConfig()
    assert config.seed == "haunting beauty"
    assert config.star_threshold == 80
    assert config.max_planets_per_system == 9
    assert config.landing_radius == 3500.0


def test_from_dict_accepts_camel_case_and_ignores_unknown():
    config = UniverseConfig.from_dict(
        {"starDensity": "0.5", "max_planets_per_system": 4, "seed": 12, "somethingElse": True}
    )
    assert config.star_density == 0.5
    assert config.max_planets_per_system == 4
    assert config.seed == "12"


@pytest.mark.parametrize(
    "overrides",
    [
        {"starCheckHashScale": 0},
        {"maxPlanetsPerSystem": 0},
        {"planetHeightLevels": 1},
        {"starDensity": 1.5},
        {"starbaseProbability": -0.1},
    ],
)
def test_from_dict_rejects_invalid_values(overrides):
    with pytest.raises(ValueError):
        UniverseConfig.from_dict(overrides)


def test_config_is_immutable():
    config = UniverseConfig()
    with pytest.raises(Exception):
        config.seed = "changed"


def test_from_settings_reads_universe_block(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"universe": {"seed": "abc", "starbaseProbability": 1.0}}))
    config = UniverseConfig.from_settings(path)
    assert config.seed == "abc"
    assert config.starbase_probability == 1.0


def test_from_settings_falls_back_to_defaults(tmp_path):
    missing = tmp_path / "missing.json"
    assert UniverseConfig.from_settings(missing) == UniverseConfig()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert UniverseConfig.from_settings(broken) == UniverseConfig()
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"universe": {"starDensity": 7}}))
    assert UniverseConfig.from_settings(invalid) == UniverseConfig()


def test_load_settings_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    assert load_settings(path) == {}


def test_logger_config_from_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logLevel": "debug", "logChannels": {"terrain": True, "state": False}}))
    config = LoggerConfig.from_settings(path)
    assert config.level == logging.DEBUG
    assert config.channels["terrain"] is True
    assert config.channels["state"] is False
    assert config.channels["generation"] is DEFAULT_CHANNELS["generation"]


def test_logger_config_ignores_unknown_level(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logLevel": "LOUD"}))
    assert LoggerConfig.from_settings(path).level == logging.INFO


def test_channels_respect_toggles(caplog):
    logger = GameLogger(LoggerConfig(level=logging.DEBUG, channels={"state": True, "terrain": False}))
    with caplog.at_level(logging.DEBUG, logger="cosmogen"):
        logger.channel("state").info("visible %d", 1)
        logger.channel("terrain").info("hidden")
        logger.channel("unknown").info("also hidden")
        logger.set_enabled("terrain", True)
        logger.channel("terrain").info("now visible")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["visible 1", "now visible"]
    assert "unknown" in logger.channels()


def test_init_logger_uses_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logChannels": {"generation": False}}))
    logger = init_logger(path)
    assert logger.channel("generation").enabled is False
