from __future__ import annotations

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from mirai_protocol.constants import DEFAULT_BASE_URL, DEFAULT_FETCH_COUNT

DEFAULT_CONFIG: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "auth_key": "",
    "qq": 0,
    "request_timeout": 10.0,
    "fetch_count": DEFAULT_FETCH_COUNT,
    "log_level": "INFO",
    "user_agent": "mirai-client/0.1.0",
}

CLIENT_CONFIG: Dict[str, Any] = DEFAULT_CONFIG.copy()


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


def load_config(env_path: str = ".env") -> Dict[str, Any]:
    """Load client configuration from env file/environment variables."""
    if os.path.exists(env_path):
        load_dotenv(env_path)

    for key, default_value in DEFAULT_CONFIG.items():
        env_key = f"MIRAI_{key.upper()}"
        value = os.getenv(env_key, default_value)
        CLIENT_CONFIG[key] = _coerce_type(value, type(default_value))

    _validate_config(CLIENT_CONFIG)
    logging.getLogger().setLevel(CLIENT_CONFIG["log_level"])
    return CLIENT_CONFIG


def _coerce_type(value: Any, target_type: type) -> Any:
    if isinstance(value, target_type):
        return value
    try:
        if target_type is bool:
            return str(value).lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value} to {target_type}") from exc


def _validate_config(config: Dict[str, Any]) -> None:
    if not str(config["base_url"]).startswith(("http://", "https://")):
        raise ConfigError("base_url must start with http:// or https://")
    if config["qq"] < 0:
        raise ConfigError("qq must not be negative")
    if config["request_timeout"] <= 0:
        raise ConfigError("request_timeout must be positive")
    if config["fetch_count"] <= 0:
        raise ConfigError("fetch_count must be positive")
    if str(config["log_level"]).upper() not in logging.getLevelNamesMapping():
        raise ConfigError(f"Unknown log_level {config['log_level']}")
    config["log_level"] = str(config["log_level"]).upper()


def get(key: str, default: Any = None) -> Any:
    return CLIENT_CONFIG.get(key, default)


__all__ = ["CLIENT_CONFIG", "DEFAULT_CONFIG", "ConfigError", "get", "load_config"]
