"""Configuration loading utilities for tokenaisu."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from tokenaisu.languages import resolve_language

_INT_KEYS = {"api_port", "workers"}
_ALLOWED_KEYS = {"log_level", "api_host", "api_port", "workers", "language"}


@dataclass(frozen=True)
class AppConfig:
    """Runtime settings: profile TOML first, then TOKENAISU_* environment overrides.

    ``workers`` of 0 means one pool process per CPU; ``language`` is always a
    canonical code accepted by ``resolve_language``.
    """

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    language: str


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("TOKENAISU_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 0,
        "language": "en",
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("TOKENAISU_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("TOKENAISU_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int("TOKENAISU_API_PORT", os.getenv("TOKENAISU_API_PORT"), defaults["api_port"])
    workers = _parse_int("TOKENAISU_WORKERS", os.getenv("TOKENAISU_WORKERS"), defaults["workers"])
    language = os.getenv("TOKENAISU_LANGUAGE", str(defaults["language"]))
    if workers < 0:
        raise ValueError(f"TOKENAISU_WORKERS must be >= 0, got {workers}")
    level = log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"TOKENAISU_LOG_LEVEL must be a logging level name, got {log_level!r}")

    return AppConfig(
        env=env,
        log_level=level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        language=resolve_language(language).value,
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int] = {}
    for key, raw in payload.items():
        if key not in _ALLOWED_KEYS:
            continue
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        else:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: str | int) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
