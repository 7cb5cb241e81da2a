"""Configuration loading and schema."""

from .config_data import ConfigData
from .config_loader import load_config, load_mapping_file

__all__ = ["ConfigData", "load_config", "load_mapping_file"]
