"""
Normalizer configuration: default.yaml loading.

Only the `normalization:` section is read; other sections belong to
the harness and are ignored here.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from slt_results.domain.constants import (
    CONFIG_SECTION,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ROUND_DIGITS,
)
from slt_results.domain.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizerConfig:
    """Options for converting query results to canonical rows."""
    round_digits: int = DEFAULT_ROUND_DIGITS
    expand_multiline: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NormalizerConfig":
        """
        Build a config from the `normalization:` mapping.

        Raises:
            ConfigError: invalid value type or range
        """
        round_digits = data.get("round_digits", DEFAULT_ROUND_DIGITS)
        # bool is an int subclass
        if isinstance(round_digits, bool) or not isinstance(round_digits, int):
            raise ConfigError("round_digits", round_digits, "must be an integer")
        if round_digits < 0:
            raise ConfigError("round_digits", round_digits, "must be >= 0")

        expand_multiline = data.get("expand_multiline", True)
        if not isinstance(expand_multiline, bool):
            raise ConfigError("expand_multiline", expand_multiline, "must be a boolean")

        return cls(round_digits=round_digits, expand_multiline=expand_multiline)


def default_config_path() -> Path:
    """default.yaml shipped inside the package."""
    return Path(__file__).parent.parent / DEFAULT_CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> NormalizerConfig:
    """
    Load normalizer settings from a YAML file.

    Args:
        config_path: YAML file path (None = packaged default.yaml)

    Returns:
        NormalizerConfig (defaults when the file or section is missing)

    Raises:
        ConfigError: malformed section or values
    """
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        logger.debug(f"Config file not found, using defaults: {config_path}")
        return NormalizerConfig()

    with open(config_path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        return NormalizerConfig()
    if not isinstance(data, dict):
        raise ConfigError(str(config_path), data, "top level must be a mapping")

    section = data.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigError(CONFIG_SECTION, section, "must be a mapping")

    return NormalizerConfig.from_dict(section)
