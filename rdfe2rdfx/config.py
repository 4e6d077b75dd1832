"""
Configuration management for rdfe2rdfx.
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from rdfe2rdfx.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

INPUT_EXTENSION = ".rdfe"
OUTPUT_EXTENSION = ".rdfx"

DEFAULT_CONFIG = {
    "conversion": {
        "input_extension": INPUT_EXTENSION,
        "output_extension": OUTPUT_EXTENSION,
        "continue_on_error": False,
    },
    "logging": {
        "level": "WARNING",
    },
}

_EXTENSION = {"type": "string", "pattern": r"^\.[^./\\]+$"}

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "rdfe2rdfx configuration",
    "type": "object",
    "properties": {
        "conversion": {
            "type": "object",
            "properties": {
                "input_extension": _EXTENSION,
                "output_extension": _EXTENSION,
                "continue_on_error": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for a conversion run."""

    input_extension: str = INPUT_EXTENSION
    output_extension: str = OUTPUT_EXTENSION
    continue_on_error: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ConverterConfig":
        """
        Build settings from a (validated) configuration mapping.

        Missing sections and keys fall back to DEFAULT_CONFIG.
        """
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in config.items():
            merged[section].update(values or {})

        conversion = merged["conversion"]
        if conversion["input_extension"] == conversion["output_extension"]:
            raise InvalidConfigError(
                "input_extension and output_extension must differ "
                f"(both are {conversion['input_extension']})"
            )

        return cls(
            input_extension=conversion["input_extension"],
            output_extension=conversion["output_extension"],
            continue_on_error=conversion["continue_on_error"],
            log_level=merged["logging"]["level"],
        )


def validate_config(config: dict[str, Any], config_path: str | None = None) -> None:
    """Validate a configuration mapping against CONFIG_SCHEMA."""
    try:
        validate(instance=config, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        raise InvalidConfigError(
            f"{e.message} (at {'.'.join(str(p) for p in e.absolute_path) or 'top level'})",
            config_path,
        ) from e


def load_config(path: str | Path | None = None) -> ConverterConfig:
    """
    Load converter settings from a YAML file.

    Args:
        path: Path to the YAML configuration file, or None for defaults

    Returns:
        ConverterConfig with file values applied over the defaults

    Raises:
        InvalidConfigError: If the file is missing, unparsable or invalid
    """
    if path is None:
        return ConverterConfig()

    config_file = Path(path)
    if not config_file.is_file():
        raise InvalidConfigError("file not found", str(config_file))

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"invalid YAML: {e}", str(config_file)) from e

    if config is None:
        logger.warning(f"Config file is empty, using defaults: {config_file}")
        return ConverterConfig()

    if not isinstance(config, dict):
        raise InvalidConfigError(
            f"expected a mapping, got {type(config).__name__}", str(config_file)
        )

    validate_config(config, str(config_file))
    return ConverterConfig.from_dict(config)
