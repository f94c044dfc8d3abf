"""Configuration management for GridGrep."""

from __future__ import annotations

import json
from argparse import ArgumentParser, Namespace

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from gridgrep.utils import Constants, expand_file_path


class Config(BaseModel):
    """Settings for a single grid search run."""

    grid: str | None = Field(None, description="Grid file, one row per line (stdin if unset)")
    words: str | None = Field(None, description="Word file (stdin if unset)")
    dump: str | None = Field(None, description="CSV file receiving every ranked substring")
    end_marker: str = Field(
        Constants.DEFAULT_END_MARKER,
        min_length=1,
        description="Line that ends interactive grid entry",
    )
    verbose: bool = False
    debug: bool = False

    @field_validator("grid", "words", "dump", mode="before")
    @classmethod
    def expand_path(cls, v):
        """Expand ~ in file paths; treat empty strings as unset."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return expand_file_path(v)
        return v

    @field_validator("end_marker", mode="before")
    @classmethod
    def strip_end_marker(cls, v):
        """Drop surrounding whitespace from the end marker."""
        if isinstance(v, str):
            return v.strip()
        return v


def _read_json_config(json_path: str) -> dict:
    """Read a JSON config file, logging a hint before re-raising failures."""
    json_path = expand_file_path(json_path) or json_path
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"✗ Config file not found: {json_path}")
        logger.error("  Please check the file path and try again")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
        logger.error("  Please validate your JSON syntax")
        raise ValueError(f"Invalid JSON configuration: {e}") from e
    except PermissionError:
        logger.error(f"✗ Permission denied reading config file: {json_path}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if not isinstance(data, dict):
        logger.error(f"✗ Config file {json_path} must contain a JSON object")
        raise ValueError("Invalid JSON configuration: top level must be an object")
    return data


def load_config(json_path: str | None, cli_args: Namespace, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # CLI wins only when the user explicitly set it
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = _read_json_config(json_path) if json_path else {}

    config_dict = {
        "grid": get_value("grid", None),
        "words": get_value("words", None),
        "dump": get_value("dump", None),
        "end_marker": get_value("end_marker", Constants.DEFAULT_END_MARKER),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
