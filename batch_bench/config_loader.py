"""Loading of benchmark configs from JSON or YAML documents."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from batch_bench.errors import ConfigError
from batch_bench.models.definition import BenchmarkConfig

log = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


async def load_benchmark_config(path: Path) -> BenchmarkConfig:
    """Load and validate a benchmark config document.

    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML, anything else
    as JSON.

    Args:
        path: Path to the config document

    Returns:
        Validated benchmark config

    Raises:
        ConfigError: If the file does not exist, cannot be read, or is not a
            valid config

    """
    try:
        content = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"The '{path}' does not exist. Please add it.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(
            f"The configuration file '{path}' could not be read."
        ) from exc

    log.debug("Parsing benchmark config %s", path)
    data = parse_document(content, yaml_format=path.suffix.lower() in YAML_SUFFIXES)

    try:
        return BenchmarkConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"The configuration file '{path}' is incorrect.") from exc


def parse_document(content: str, *, yaml_format: bool) -> Any:
    """Parse raw config text into plain Python data."""
    try:
        if yaml_format:
            return yaml.safe_load(content)
        return json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"The configuration file could not be parsed: {exc}") from exc
