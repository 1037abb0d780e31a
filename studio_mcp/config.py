"""Configuration loading for studio-mcp (.studio-mcp.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .constants import CONFIG_FILENAME, ENV_CONFIG, ENV_DEBUG, ENV_TIMEOUT, SERVER_NAME


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExecutionConfig:
    """Settings applied to every spawned command."""

    timeout: Optional[float] = None
    cwd: Optional[Path] = None
    env: Dict[str, str] = field(default_factory=dict)


@dataclass
class StudioConfig:
    """Represents the settings defined in .studio-mcp.yml plus env overrides."""

    root: Optional[Path] = None
    debug: bool = False
    log_file: Optional[Path] = None
    server_name: str = SERVER_NAME
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> StudioConfig:
    """Load configuration from disk, then apply environment overrides."""
    env = os.environ if environ is None else environ
    if config_path is None and env.get(ENV_CONFIG):
        config_path = Path(env[ENV_CONFIG])

    config = StudioConfig()
    if config_path is not None:
        config_file = _resolve_config_path(config_path)
        if config_file.exists():
            config = _build_config(_read_config(config_file), config_file.parent)
        else:
            config.root = config_file.parent

    return _apply_env_overrides(config, env)


def _build_config(data: Dict[str, Any], root: Path) -> StudioConfig:
    server_data = _as_dict(data.get("server"))
    execution_data = _as_dict(data.get("execution"))

    log_file_str = _as_str(data.get("log_file"))
    cwd_str = _as_str(execution_data.get("cwd"))

    timeout = _as_float(execution_data.get("timeout"))
    if timeout is not None and timeout <= 0:
        raise ConfigError("execution.timeout must be a positive number of seconds")

    execution = ExecutionConfig(
        timeout=timeout,
        cwd=(root / cwd_str).resolve() if cwd_str else None,
        env=_as_str_dict(execution_data.get("env")),
    )
    return StudioConfig(
        root=root,
        debug=_as_bool(data.get("debug")) or False,
        log_file=root / log_file_str if log_file_str else None,
        server_name=_as_str(server_data.get("name")) or SERVER_NAME,
        execution=execution,
    )


def _apply_env_overrides(config: StudioConfig, env: Mapping[str, str]) -> StudioConfig:
    debug = _as_bool(env.get(ENV_DEBUG))
    if debug is not None:
        config.debug = debug

    raw_timeout = env.get(ENV_TIMEOUT)
    if raw_timeout:
        timeout = _as_float(raw_timeout)
        if timeout is None or timeout <= 0:
            raise ConfigError(f"{ENV_TIMEOUT} must be a positive number of seconds")
        config.execution.timeout = timeout
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_dict(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(key): str(item)
        for key, item in value.items()
        if isinstance(item, (str, int, float, bool))
    }


__all__ = ["ConfigError", "ExecutionConfig", "StudioConfig", "load_config"]
