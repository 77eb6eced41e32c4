"""Triage configuration loading and merging.

PATTERN: Configuration management with YAML/JSON support
CRITICAL: Overrides are merged over defaults one section at a time
GOTCHA: Malformed configuration must fail before any analysis runs
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, Union

import yaml
from pydantic import BaseModel, ValidationError

from .exceptions import ConfigurationError
from .models.triage_models import (
    SecurityConfig,
    SemanticConfig,
    StyleConfig,
    TriageConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = TriageConfig()

CONFIG_SECTIONS: Dict[str, Type[BaseModel]] = {
    "semantic": SemanticConfig,
    "security": SecurityConfig,
    "style": StyleConfig,
}

# Looked up in the repository root when no explicit path is given
CONFIG_FILENAMES = (".triage-gate.yaml", ".triage-gate.yml", ".triage-gate.json")


def merge_config(
    overrides: Optional[Union[Mapping[str, Any], TriageConfig]] = None,
    defaults: TriageConfig = DEFAULT_CONFIG,
) -> TriageConfig:
    """
    Merge a partial configuration over the defaults.

    Each top-level section is merged shallowly: keys present in the override
    replace the default, everything else is inherited. Keys may be camelCase
    (as in configuration files) or snake_case. Unknown keys are ignored.

    Args:
        overrides: Partial configuration mapping, or a complete TriageConfig
        defaults: Configuration to merge over

    Returns:
        New immutable configuration

    Raises:
        ConfigurationError: If a section or value is malformed
    """
    if overrides is None:
        return defaults
    if isinstance(overrides, TriageConfig):
        return overrides
    if not isinstance(overrides, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(overrides).__name__}"
        )

    merged: Dict[str, Dict[str, Any]] = {}
    for section_name, model in CONFIG_SECTIONS.items():
        base = getattr(defaults, section_name).model_dump(by_alias=True)
        section = overrides.get(section_name)

        if section is None:
            merged[section_name] = base
            continue
        if not isinstance(section, Mapping):
            raise ConfigurationError(
                f"Configuration section '{section_name}' must be a mapping, "
                f"got {type(section).__name__}"
            )

        merged[section_name] = {**base, **_normalize_keys(section, model)}

    ignored = set(overrides) - set(CONFIG_SECTIONS)
    if ignored:
        logger.debug(f"Ignoring unknown configuration keys: {sorted(ignored)}")

    try:
        return TriageConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid triage configuration: {e}") from e


def _normalize_keys(section: Mapping[str, Any], model: Type[BaseModel]) -> Dict[str, Any]:
    """Map field names and aliases onto aliases, dropping unknown keys."""
    aliases = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        aliases[name] = alias
        aliases[alias] = alias

    normalized = {}
    for key, value in section.items():
        if key in aliases:
            normalized[aliases[key]] = value
        else:
            logger.debug(f"Ignoring unknown configuration key '{key}'")
    return normalized


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML or JSON configuration document.

    Args:
        path: Configuration file path

    Returns:
        Parsed configuration mapping (empty for an empty document)

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    try:
        if path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            data = yaml.safe_load(content) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Malformed configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping at the top level"
        )

    logger.debug(f"Loaded configuration from {path}")
    return data


def find_config_file(root: Union[str, Path] = ".") -> Optional[Path]:
    """Return the first conventional configuration file in ``root``, if any."""
    root = Path(root)
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    root: Union[str, Path] = ".",
) -> Dict[str, Any]:
    """
    Resolve the configuration document for a run.

    An explicit path must exist. Without one, the conventional file names
    are looked up in the repository root; finding none yields an empty
    override so every default applies.

    Returns:
        Partial configuration mapping to pass to merge_config
    """
    if config_path is not None:
        return load_config_file(config_path)

    found = find_config_file(root)
    if found is None:
        logger.debug("No configuration file found, using defaults")
        return {}
    return load_config_file(found)
