import json

import pytest

from app import config as config_mod
from app.config import EngineConfig, load_config
from app.errors import ConfigError


def _write(tmp_path, payload):
    path = tmp_path / "speedtype.config.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.json")
    assert cfg == EngineConfig()
    assert cfg.base_duration == 60
    assert cfg.word_bonus == 5
    assert cfg.word_penalty == 10
    assert cfg.tick_ms == 1000


def test_values_are_read(tmp_path):
    path = _write(tmp_path, {"base_duration": 30, "word_bonus": 2, "theme": "Nord"})
    cfg = load_config(path)
    assert cfg.base_duration == 30
    assert cfg.word_bonus == 2
    assert cfg.word_penalty == 10
    assert cfg.theme == "Nord"


def test_unknown_keys_are_ignored(tmp_path):
    path = _write(tmp_path, {"base_duration": 45, "sound": True})
    assert load_config(path).base_duration == 45


@pytest.mark.parametrize(
    "payload",
    [
        {"base_duration": 0},
        {"base_duration": -5},
        {"word_penalty": -1},
        {"tick_ms": 0},
        {"base_duration": "sixty"},
        {"word_bonus": True},
        "[1, 2, 3]",
        "{not json",
    ],
)
def test_invalid_config_raises(tmp_path, payload):
    path = _write(tmp_path, payload)
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


def test_env_var_selects_path(tmp_path, monkeypatch):
    path = _write(tmp_path, {"tick_ms": 500})
    monkeypatch.setenv(config_mod.ENV_VAR, str(path))
    assert config_mod.config_path() == path
    assert load_config().tick_ms == 500


def test_default_path_without_env(monkeypatch):
    monkeypatch.delenv(config_mod.ENV_VAR, raising=False)
    assert config_mod.config_path().name == "speedtype.config.json"
