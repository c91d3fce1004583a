"""Load, validate, and select methodology configs from JSON files."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from aisg.errors import ConfigurationError
from aisg.methodology.schema import MethodologyConfig

logger = logging.getLogger(__name__)

# Default directory for methodology config files
_CONFIG_DIR = Path(__file__).parent / "configs"

DEFAULT_CONFIG_FILE = "pilar18_v1.json"


def load_methodology(file_path: Path | None = None) -> MethodologyConfig:
    """Load and validate a methodology config from a JSON file.

    If no path is provided, loads the default 18 Pilar V1 config. Any
    missing file or invalid content is a ConfigurationError.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / DEFAULT_CONFIG_FILE

    if not file_path.exists():
        raise ConfigurationError(f"Methodology config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Methodology config {file_path} is not valid JSON: {e}") from e

    try:
        config = MethodologyConfig.model_validate(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Methodology config {file_path} is invalid: {e}") from e

    logger.debug("Loaded methodology %s v%s from %s", config.id, config.version, file_path)
    return config


@lru_cache(maxsize=1)
def get_default_methodology() -> MethodologyConfig:
    """Load the default 18 Pilar V1 methodology (cached, read-only)."""
    return load_methodology()
