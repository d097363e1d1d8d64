"""Configuration loading and validation for burnttoast."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from burnttoast.errors import ConfigError

ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_CONFIG: dict[str, Any] = {
    "powershell": {
        "executable": "powershell",
        "verbose": False,
    },
    "toast": {
        "app_logo": None,
        "sound": "Default",
    },
    "alert": {
        "style_name": "burnt-toast",
        "remove_enabled": False,
    },
    "logging": {
        "level": "INFO",
        "console": True,
        "file": "",
    },
}


@dataclass(frozen=True)
class ToastSettings:
    """Explicit settings handed to the notification facade and alert style."""

    powershell: str = "powershell"
    app_logo: str | None = None
    verbose: bool = False
    remove_enabled: bool = False
    default_sound: str = "Default"
    style_name: str = "burnt-toast"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ToastSettings":
        powershell = _require_dict(config, "powershell")
        toast = _require_dict(config, "toast")
        alert = _require_dict(config, "alert")
        return cls(
            powershell=powershell["executable"],
            app_logo=toast.get("app_logo") or None,
            verbose=powershell["verbose"],
            remove_enabled=alert["remove_enabled"],
            default_sound=toast["sound"],
            style_name=alert["style_name"],
        )


def load_config(path: str) -> dict[str, Any]:
    """Load and validate the config file at the provided path."""
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw_config = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {config_path}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigError("Config file must contain a JSON object at the top level.")

    merged = _merge_dicts(DEFAULT_CONFIG, raw_config)
    _validate_config(merged)
    return merged


def apply_overrides(
    config: dict[str, Any], overrides: dict[str, Any] | None
) -> dict[str, Any]:
    """Merge CLI overrides into an existing config dictionary."""
    if overrides is None:
        return copy.deepcopy(config)
    if not isinstance(overrides, dict):
        raise ConfigError("Overrides must be provided as a dictionary.")
    merged = _merge_dicts(config, overrides)
    _validate_config(merged)
    return merged


def _merge_dicts(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_config(config: dict[str, Any]) -> None:
    powershell = _require_dict(config, "powershell")
    _validate_str(powershell, "executable")
    _validate_bool(powershell, "verbose")

    toast = _require_dict(config, "toast")
    _validate_optional_str(toast, "app_logo")
    _validate_str(toast, "sound")

    alert = _require_dict(config, "alert")
    _validate_str(alert, "style_name")
    _validate_bool(alert, "remove_enabled")

    logging_config = _require_dict(config, "logging")
    _validate_str(logging_config, "level", allowed=ALLOWED_LOG_LEVELS)
    _validate_bool(logging_config, "console")
    _validate_optional_str(logging_config, "file")


def _require_dict(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key)
    if not isinstance(value, dict):
        raise ConfigError(f"Config key '{key}' must be an object.")
    return value


def _validate_str(
    parent: dict[str, Any],
    key: str,
    *,
    allowed: set[str] | None = None,
) -> None:
    value = parent.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Config key '{key}' must be a non-empty string.")
    if allowed is not None and value not in allowed:
        allowed_list = ", ".join(sorted(allowed))
        raise ConfigError(f"Config key '{key}' must be one of: {allowed_list}.")


def _validate_optional_str(parent: dict[str, Any], key: str) -> None:
    value = parent.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        raise ConfigError(f"Config key '{key}' must be a string.")


def _validate_bool(parent: dict[str, Any], key: str) -> None:
    value = parent.get(key)
    if not isinstance(value, bool):
        raise ConfigError(f"Config key '{key}' must be a boolean.")


__all__ = ["DEFAULT_CONFIG", "ToastSettings", "apply_overrides", "load_config"]
