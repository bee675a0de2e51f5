# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration model and loader for argbind parsers.

`BindConfig` controls help rendering and the two binding policies that callers may
tighten: rejecting unrecognized tokens, and committing bound values only when the
whole parse succeeds. `load_config()` reads the same settings from a TOML or YAML
file, taking the `argbind` table/key when present:

    # argbind.toml
    [argbind]
    optional_prefix = "[opt] "
    reject_unknown = true
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field

from argbind.logger import logger

CONFIG_SECTION = "argbind"


class BindConfig(BaseModel):
    """Settings shared by `SchemaParser`, the help formatter and the module-level API."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    optional_prefix: str = "(Optional) "
    default_description: str = "Options:"
    gutter: int = Field(default=4, ge=1)
    indent: int = Field(default=2, ge=0)
    reject_unknown: bool = False
    atomic: bool = False


DEFAULT_CONFIG = BindConfig()


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix == ".toml":
            return toml.load(config_file)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
    raise ValueError(f"Unsupported config file type: {path.suffix}")


def load_config(path: str | Path) -> BindConfig:
    """
    Load a `BindConfig` from a TOML or YAML file.

    Args:
        path (str | Path): Path to a `.toml`, `.yaml` or `.yml` file.

    Returns:
        BindConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is unsupported or its content is not a mapping.
        pydantic.ValidationError: If a setting has an invalid value.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = _read_raw(path) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    settings = raw.get(CONFIG_SECTION, raw)
    if not isinstance(settings, dict):
        raise ValueError(f"'{CONFIG_SECTION}' section of {path} must be a mapping")

    logger.debug("Loaded argbind config from %s: %s", path, settings)
    return BindConfig.model_validate(settings)
