"""
Configuration management for crossVal.

This module contains configuration loading and management utilities.
"""

from typing import Any, Dict, Union
import yaml
import json
from pathlib import Path
from dataclasses import asdict, fields

from ..core.base import CVConfig
from .logger import get_logger


class ConfigManager:
    """Configuration manager for crossVal."""

    def __init__(self):
        self.logger = get_logger("ConfigManager")
        self.config = CVConfig()

    def load_from_file(self, config_path: Union[str, Path]) -> 'ConfigManager':
        """
        Load configuration from a file.

        Args:
            config_path: Path to configuration file (.yaml, .yml or .json)

        Returns:
            Self for method chaining
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.logger.info(f"Loading configuration from {config_path}")

        suffix = config_path.suffix.lower()
        if suffix in ('.yaml', '.yml'):
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        # a full DEFAULT_CONFIG-style document keeps the CV settings under "cv"
        if isinstance(config_data.get('cv'), dict):
            config_data = config_data['cv']

        self._update_config(config_data)
        self.logger.info("Configuration loaded successfully")
        return self

    def _update_config(self, config_data: Dict[str, Any]) -> None:
        """Update configuration with loaded data."""
        known = {f.name for f in fields(self.config)}
        for key, value in config_data.items():
            if key in known:
                setattr(self.config, key, value)
            else:
                self.logger.warning(f"Unknown configuration key: {key}")

    def save_to_file(self, config_path: Union[str, Path]) -> None:
        """
        Save configuration to a file.

        Args:
            config_path: Path to save configuration file
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        self.logger.info(f"Saving configuration to {config_path}")

        config_data = asdict(self.config)

        suffix = config_path.suffix.lower()
        if suffix in ('.yaml', '.yml'):
            with open(config_path, 'w') as f:
                yaml.safe_dump(config_data, f, default_flow_style=False, indent=2)
        elif suffix == '.json':
            with open(config_path, 'w') as f:
                json.dump(config_data, f, indent=2)
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        self.logger.info("Configuration saved successfully")

    def get_config(self) -> CVConfig:
        """Get the current configuration, validated."""
        return self.config.validate()

    def update_config(self, **kwargs) -> 'ConfigManager':
        """
        Update configuration with new values.

        Args:
            **kwargs: Configuration parameters to update

        Returns:
            Self for method chaining
        """
        self._update_config(kwargs)
        return self
