"""Configuration loader for docs2questions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from .logging import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for docs2questions."""

    def __init__(self, config_dict: Dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Configuration dictionary. If None, uses defaults.
        """
        self._config = config_dict or self._get_default_config()

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "logging": {
                "level": "INFO",
                "file": {
                    "path": "./logs/docs2questions.log",
                    "max_bytes": 10485760,
                    "backup_count": 5,
                },
                "third_party": {
                    "level": "WARNING",
                    "loggers": ["pdfminer", "pdfplumber", "PIL"],
                },
            },
            "loader": {
                "max_workers": 4,
                "x_tolerance": 3,
                "y_tolerance": 3,
                "min_text_threshold": 10,
            },
            "selection": {
                "min_length": 20,
                "min_words": 4,
                "max_candidates": 5,
            },
            "generation": {
                "seed": None,
                "strategies": {
                    "template": True,
                    "contextual": True,
                    "generative": True,
                },
            },
            "export": {
                "filename": "generated-questions.txt",
            },
        }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> Config:
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Example:
            >>> config = Config.from_yaml("config.yml")
            >>> print(config.get("selection.max_candidates"))
        """
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        logger.info(f"Loading config from {yaml_path}")

        with open(yaml_path, "r") as f:
            config_dict = yaml.safe_load(f)

        # Merge with defaults
        default_config = cls._get_default_config()
        merged_config = cls._merge_configs(default_config, config_dict or {})

        return cls(merged_config)

    @staticmethod
    def _merge_configs(
        base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Supports dot notation for nested keys.

        Args:
            key: Configuration key (e.g., "loader.max_workers")
            default: Default value if key not found

        Returns:
            Configuration value

        Example:
            >>> config.get("selection.min_length")
            20
            >>> config.get("generation.strategies.template")
            True
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by key.

        Supports dot notation for nested keys.

        Args:
            key: Configuration key (e.g., "generation.seed")
            value: Value to set
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def __repr__(self) -> str:
        """String representation."""
        return f"Config({self._config})"


CONFIG_ENV_VAR = "DOCS2QUESTIONS_CONFIG"
DEFAULT_CONFIG_PATH = Path("./config.yml")

# Global config instance
_global_config: Config | None = None


def resolve_config_path(config_path: str | Path | None = None) -> Path | None:
    """Resolve which YAML file (if any) should back the configuration.

    Precedence: explicit path, then ``$DOCS2QUESTIONS_CONFIG``, then
    ``./config.yml`` when it exists.
    """
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def get_config() -> Config:
    """Get global configuration instance.

    Loads from the resolved config file on first call and falls back to the
    built-in defaults when no file is available or it cannot be parsed.

    Returns:
        Global Config instance
    """
    global _global_config
    if _global_config is None:
        path = resolve_config_path()
        _global_config = Config()
        if path:
            try:
                _global_config = Config.from_yaml(path)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Could not load config from {path}, using defaults: {e}")
    return _global_config


def set_config(config: Config) -> None:
    """Set global configuration instance.

    Args:
        config: Config instance to set as global
    """
    global _global_config
    _global_config = config


def load_config(yaml_path: str | Path) -> Config:
    """Load configuration from YAML and set as global.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        Loaded Config instance
    """
    config = Config.from_yaml(yaml_path)
    set_config(config)
    return config
