"""Configuration loading for control plane reconciliation."""

from pathlib import Path
from typing import Any, Literal, overload

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.controlplane.config.config_data import ConfigData
from src.controlplane.config.config_utils import substitute_env_vars

CONFIG_PATH = Path("config.yaml")


@overload
def load_config(
    file_path: Path = ..., *, processed: Literal[False]
) -> dict[str, Any]: ...


@overload
def load_config(
    file_path: Path = ..., processed: Literal[True] = ...
) -> ConfigData: ...


def load_config(
    file_path: Path = CONFIG_PATH, processed: bool = True
) -> ConfigData | dict[str, Any]:
    """
    Load a YAML config file with environment variable substitution.

    Args:
        file_path: Path to the YAML file (default: config.yaml)
        processed: Whether to substitute environment variables and validate.
                  - True (default): substitute env vars and validate as ConfigData
                  - False: return raw dict without validation or substitution

    Returns:
        ConfigData if processed is True, raw dict if processed is False

    Raises:
        ValueError: If required environment variables are missing, validation fails,
                   or YAML structure is invalid (missing 'config' key)
        FileNotFoundError: If the YAML file doesn't exist

    Relative ``chart_root`` and ``image_vector`` paths are resolved against
    the directory of the config file.
    """
    with open(file_path) as f:
        content = f.read()

    if processed:
        logger.info(f"Loading configuration from {file_path}")
        content = substitute_env_vars(content)

    try:
        loaded: dict[str, Any] = yaml.safe_load(content)
        if not processed:
            return loaded
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if "config" not in loaded:
        raise ValueError("Invalid YAML structure: missing 'config' key")

    try:
        config = ConfigData(**loaded["config"])
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    base_dir = Path(file_path).resolve().parent
    if not config.chart_root.is_absolute():
        config.chart_root = base_dir / config.chart_root
    if not config.image_vector.is_absolute():
        config.image_vector = base_dir / config.image_vector

    logger.debug(
        f"Shoot {config.shoot.kubernetes_version} with {config.shoot.node_count} nodes "
        f"in seed namespace {config.namespace}"
    )
    return config


def load_mapping_file(file_path: Path | None) -> dict[str, Any]:
    """Load a flat YAML mapping (checksums or secret data).

    A missing path yields an empty mapping.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    if file_path is None:
        return {}
    with open(file_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML in {file_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must contain a mapping")
    return data
