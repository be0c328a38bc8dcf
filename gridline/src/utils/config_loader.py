"""Loads YAML/JSON configuration files and the packaged line defaults."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gridline.src.core.errors import ConfigError

OUTPUT_FORMATS = ("text", "json")

_KNOWN_KEYS = {"inclusive", "output_format", "log_level", "log_file"}


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ConfigError(f"Unsupported config format: {path_p.suffix or path_p.name}")


def validate_line_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``config`` after checking keys and value types."""
    if not isinstance(config, dict):
        raise ConfigError("configuration must be a mapping")
    unknown = set(config) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    if not isinstance(config.get("inclusive", True), bool):
        raise ConfigError("inclusive must be true or false")
    if config.get("output_format", "text") not in OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
    level = config.get("log_level", "WARNING")
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigError(f"Unknown log level: {level!r}")
    log_file = config.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError("log_file must be a path string")
    return config


def load_line_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return packaged defaults merged with the overrides found at ``path``."""
    default_path = Path(__file__).resolve().parents[2] / "configs" / "line_config.yaml"
    config: Dict[str, Any] = {}
    if default_path.exists():
        config.update(load_config(str(default_path)))
    if path is not None:
        config.update(load_config(str(path)))
    return validate_line_config(config)


LINE_CONFIG: Dict[str, Any] = load_line_config()
DEFAULT_INCLUSIVE: bool = bool(LINE_CONFIG.get("inclusive", True))
DEFAULT_OUTPUT_FORMAT: str = str(LINE_CONFIG.get("output_format", "text"))


def set_default_inclusive(value: bool) -> None:
    """Override whether walks include their end point by default."""
    global DEFAULT_INCLUSIVE
    DEFAULT_INCLUSIVE = value
    LINE_CONFIG["inclusive"] = value


def set_output_format(value: str) -> None:
    """Override the default command line output format."""
    global DEFAULT_OUTPUT_FORMAT
    if value not in OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
    DEFAULT_OUTPUT_FORMAT = value
    LINE_CONFIG["output_format"] = value


def print_runtime_config(config: Optional[Dict[str, Any]] = None) -> None:
    """Print a summary of the current runtime configuration."""
    config = LINE_CONFIG if config is None else config
    info = {
        "inclusive": config.get("inclusive", DEFAULT_INCLUSIVE),
        "output_format": config.get("output_format", DEFAULT_OUTPUT_FORMAT),
        "log_level": config.get("log_level", "WARNING"),
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
