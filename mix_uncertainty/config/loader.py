"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from mix_uncertainty.exceptions import ConfigValidationError
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="config_loader")


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        import yaml  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependency guard
        raise ConfigValidationError("pyyaml is required to load YAML config files") from exc
    content = yaml.safe_load(path.read_text())
    return content or {}


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML or JSON mapping from disk."""
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        content = _load_yaml(path)
    elif suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        raise ConfigValidationError(f"Unsupported config format: {path.suffix}")
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file must contain a mapping: {path}")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Callable[[Any], Any]]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc


def load_config_with_precedence(
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Callable[[Any], Any]]] = None,
) -> Dict[str, Any]:
    """Merge configuration sources; CLI beats ENV beats file beats defaults.

    Only keys present in ``defaults`` are considered. ``None`` CLI values are
    treated as unset.
    """
    casters = casters or {}
    file_values = load_config_file(Path(config_path)) if config_path else {}

    merged: Dict[str, Any] = {}
    sources: Dict[str, str] = {}
    for key, default in defaults.items():
        env_key = f"{env_prefix}{key.upper()}"
        if cli_values.get(key) is not None:
            merged[key], sources[key] = _cast(key, cli_values[key], casters), "cli"
        elif env_key in os.environ:
            merged[key], sources[key] = _cast(key, os.environ[env_key], casters), "env"
        elif key in file_values:
            merged[key], sources[key] = _cast(key, file_values[key], casters), "file"
        else:
            merged[key], sources[key] = default, "default"

    log.debug("Configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["load_config_file", "load_config_with_precedence"]
