"""Config loading entry points for podlocate."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import LocatorSettings

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "podlocate.default.yaml"
PLATFORM_ENV_VAR = "PODLOCATE_PLATFORM"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    platform: str | None = None,
) -> LocatorSettings:
    """Load locator settings applying optional overrides.

    Precedence, lowest first: packaged defaults, ``path``, ``overrides``,
    ``$PODLOCATE_PLATFORM``, then the explicit ``platform`` argument.
    """

    default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        config_data = _expect_mapping(_read_structured_file(path), path)
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    selected = platform or os.getenv(PLATFORM_ENV_VAR, "").strip()
    if selected:
        merged["platform"] = selected

    try:
        return LocatorSettings.model_validate(merged)
    except ValidationError as exc:
        source = path or DEFAULT_CONFIG_PATH
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the packaged default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported; use a YAML or JSON destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    merged = _read_structured_file(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() == ".json":
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(merged, sort_keys=False),
        encoding="utf-8",
    )


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if isinstance(payload, Mapping):
        return dict(payload)
    raise ConfigError(f"{source} must hold a table of settings, not {type(payload).__name__}.")


_PARSERS = {
    ".yaml": lambda text: yaml.safe_load(text) or {},
    ".yml": lambda text: yaml.safe_load(text) or {},
    ".toml": tomllib.loads,
    ".json": json.loads,
}


def _read_structured_file(path: Path) -> Any:
    """Parse a settings file, choosing the parser from its suffix."""

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigError(f"Unsupported config format for {path}; use .yaml, .toml or .json.")
    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    try:
        return parser(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Layer ``extra`` over ``base``; nested tables merge, everything else replaces."""

    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``{"runtime.log_level": "DEBUG"}`` into nested tables."""

    expanded: dict[str, Any] = {}
    for key, value in overrides.items():
        segments = key.split(".") if isinstance(key, str) else [key]
        for segment in reversed(segments):
            value = {segment: value}
        expanded = _deep_merge(expanded, value)
    return expanded


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "PLATFORM_ENV_VAR",
    "dump_example_config",
    "load_config",
]
