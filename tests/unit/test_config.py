"""Config loading and boundary validation."""

import json
from pathlib import Path

import pytest

from boilerstats import canon, exceptions
from boilerstats.config import Config, load_config

BASE = {
    "paths": {"data": "./data.csv", "stats": "./stats.txt"},
    "estimations": {"pellet_kg_power": 4.5, "pellet_kg_cost": 0.34, "last_fuel_level": 238.4},
    "operating_hours": [{"start": 3, "end": 13}, {"start": 15, "end": 20}],
    "timezone": "Europe/Bucharest",
}


def _write(tmp_path, payload):
    p = tmp_path / "config.json"
    p.write_text(json.dumps(payload), encoding="utf-8")
    return p


def test_load_config_resolves_paths(tmp_path):
    cfg = load_config(_write(tmp_path, BASE))
    assert Path(cfg.paths.data) == tmp_path / "data.csv"
    assert Path(cfg.paths.stats) == tmp_path / "stats.txt"
    assert cfg.estimations.pellet_kg_power == 4.5
    assert cfg.timezone == "Europe/Bucharest"


def test_analytics_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, BASE))
    assert cfg.analytics.short_window_minutes == canon.SHORT_WINDOW_MIN == 42
    assert cfg.analytics.day_window_hours == 24
    assert cfg.analytics.smoothing_neighbours == 3
    assert cfg.analytics.min_samples == 15
    assert (cfg.analytics.power_min, cfg.analytics.power_max) == (0.0, 15.0)


def test_legacy_keys_are_ignored(tmp_path):
    payload = dict(BASE, live_stream_urls={"video": "http://example.com"}, crops={"time": {}})
    cfg = load_config(_write(tmp_path, payload))
    assert not hasattr(cfg, "crops")


@pytest.mark.parametrize(
    "estimations",
    [
        {"pellet_kg_power": 0, "pellet_kg_cost": 0.34, "last_fuel_level": 10},
        {"pellet_kg_power": 4.5, "pellet_kg_cost": -1, "last_fuel_level": 10},
        {"pellet_kg_power": 4.5, "pellet_kg_cost": 0.34},
    ],
)
def test_bad_estimations_rejected(tmp_path, estimations):
    with pytest.raises(exceptions.ConfigError):
        load_config(_write(tmp_path, dict(BASE, estimations=estimations)))


def test_unknown_timezone_rejected(tmp_path):
    with pytest.raises(exceptions.ConfigError):
        load_config(_write(tmp_path, dict(BASE, timezone="Mars/Olympus")))


def test_unreadable_config(tmp_path):
    with pytest.raises(exceptions.ConfigError):
        load_config(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(exceptions.ConfigError):
        load_config(bad)


def test_in_operation_windows():
    cfg = Config.model_validate(BASE)
    assert cfg.in_operation(3)
    assert cfg.in_operation(12)
    assert not cfg.in_operation(13)
    assert not cfg.in_operation(14)
    assert cfg.in_operation(19)
    assert not cfg.in_operation(20)
