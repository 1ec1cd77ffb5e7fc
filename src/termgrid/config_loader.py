"""Configuration loader that parses and validates user-provided TOML."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .datatypes import AppConfig, OutputConfig, PanelConfig, RuleConfig, TableConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERMGRID_CONFIG"
CONFIG_FILENAME = "termgrid.toml"

_SECTIONS: Dict[str, type] = {
    "output": OutputConfig,
    "table": TableConfig,
    "panel": PanelConfig,
    "rule": RuleConfig,
}


class TermgridError(RuntimeError):
    """Base class for errors raised by termgrid."""


class ConfigError(TermgridError, ValueError):
    """Raised when the configuration file is malformed or fails validation."""


def _coerce_bool(value: Any, dotted_key: str) -> bool:
    """Return a bool, coercing simple 0/1 representations when necessary."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"0", "1"}:
            return normalized == "1"
        if normalized in {"true", "false"}:
            return normalized == "true"
    raise ConfigError(f"{dotted_key} must be a boolean (use true/false).")


def _coerce_enum(value: Any, dotted_key: str, enum_type: type[Enum]) -> Enum:
    """Return an enum member, coercing string values case-insensitively."""

    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_type:
            if normalized == str(member.value).lower():
                return member
    raise ConfigError(
        f"{dotted_key} must be one of: {', '.join(str(member.value) for member in enum_type)}"
    )


def _coerce_int(value: Any, dotted_key: str, *, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{dotted_key} must be an integer")
    if value < minimum:
        raise ConfigError(f"{dotted_key} must be >= {minimum}")
    return value


def _coerce_str(value: Any, dotted_key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{dotted_key} must be a string")
    return value.strip()


def _sanitize_section(raw: Any, name: str, cls: type) -> Any:
    """
    Coerce a raw TOML table into an instance of ``cls``.

    Parameters:
        raw (Any): Raw TOML section data.
        name (str): Section name used when reporting validation errors.
        cls: Dataclass type used to construct the section object.

    Returns:
        Any: Instantiated dataclass populated with values from ``raw``.

    Raises:
        ConfigError: If the section is not a table or contains unknown keys or invalid values.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    cls_fields = {field.name: field for field in fields(cls)}
    unknown = sorted(set(raw) - set(cls_fields))
    if unknown:
        raise ConfigError(f"Unknown keys in [{name}]: {', '.join(unknown)}")

    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        field_type = cls_fields[key].type
        dotted_key = f"{name}.{key}"
        if field_type is bool:
            cleaned[key] = _coerce_bool(value, dotted_key)
        elif isinstance(field_type, type) and issubclass(field_type, Enum):
            cleaned[key] = _coerce_enum(value, dotted_key, field_type)
        elif field_type is int:
            cleaned[key] = _coerce_int(value, dotted_key)
        else:
            cleaned[key] = _coerce_str(value, dotted_key)
    return cls(**cleaned)


def parse_config(raw: Mapping[str, Any]) -> AppConfig:
    """Validate an already-decoded TOML mapping and build an :class:`AppConfig`."""

    unknown = sorted(set(raw) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"Unknown config sections: {', '.join(unknown)}")
    sections = {
        name: _sanitize_section(raw.get(name, {}), name, cls)
        for name, cls in _SECTIONS.items()
    }
    return AppConfig(**sections)


def resolve_config_path(explicit: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Locate the configuration file to load.

    Checks, in order, the explicit path, the ``TERMGRID_CONFIG`` environment
    variable, and ``$XDG_CONFIG_HOME/termgrid/termgrid.toml``. Only the last
    location is optional; the first two are returned even when missing so the
    caller reports the problem.
    """
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    candidate = config_home / "termgrid" / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load and validate the rendering configuration from a TOML file.

    Reads the file at ``path`` as UTF-8 TOML (a BOM is accepted). When ``path``
    is ``None`` the built-in defaults are returned.

    Returns:
        AppConfig: The validated configuration.

    Raises:
        ConfigError: If the file is missing, not UTF-8, not valid TOML, or fails validation.
    """
    if path is None:
        return AppConfig()
    config_path = Path(path)
    try:
        raw_bytes = config_path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {config_path}: {exc}") from exc
    if raw_bytes.startswith(b"\xef\xbb\xbf"):
        raw_bytes = raw_bytes[3:]
    try:
        raw = tomllib.loads(raw_bytes.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError("Configuration file must be UTF-8 encoded") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML: {exc}") from exc
    config = parse_config(raw)
    logger.debug("Loaded configuration from %s", config_path)
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "TermgridError",
    "load_config",
    "parse_config",
    "resolve_config_path",
]
