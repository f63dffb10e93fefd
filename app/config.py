# app/config.py
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os

from app.errors import ConfigError

log = logging.getLogger(__name__)

_DEFAULT_FILE = Path("speedtype.config.json")
ENV_VAR = "SPEEDTYPE_CONFIG"


@dataclass
class EngineConfig:
    base_duration: float = 60
    word_bonus: float = 5
    word_penalty: float = 10
    tick_ms: int = 1000
    paragraph_file: Optional[str] = None
    theme: str = "Midnight"


_FIELDS = {f.name for f in fields(EngineConfig)}


def _number(d: Dict[str, Any], key: str, default):
    if key not in d:
        return default
    v = d[key]
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ConfigError(f"{key} must be a number, got {v!r}")
    return v


def config_from_dict(d: Dict[str, Any]) -> EngineConfig:
    unknown = set(d) - _FIELDS
    if unknown:
        log.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    defaults = EngineConfig()
    cfg = EngineConfig(
        base_duration=_number(d, "base_duration", defaults.base_duration),
        word_bonus=_number(d, "word_bonus", defaults.word_bonus),
        word_penalty=_number(d, "word_penalty", defaults.word_penalty),
        tick_ms=int(_number(d, "tick_ms", defaults.tick_ms)),
        paragraph_file=d.get("paragraph_file") or None,
        theme=str(d.get("theme", defaults.theme)),
    )
    if cfg.base_duration <= 0:
        raise ConfigError("base_duration must be positive")
    if cfg.word_bonus < 0 or cfg.word_penalty < 0:
        raise ConfigError("word_bonus and word_penalty must not be negative")
    if cfg.tick_ms <= 0:
        raise ConfigError("tick_ms must be positive")
    return cfg


def config_path() -> Path:
    env = os.environ.get(ENV_VAR)
    return Path(env) if env else _DEFAULT_FILE


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """Read JSON settings; a missing file means defaults."""
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        log.info("No config at %s, using defaults", path)
        return EngineConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    cfg = config_from_dict(data)
    log.info("Loaded config from %s", path)
    return cfg
