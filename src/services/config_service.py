"""
Configuration Service Module

Reads and writes generator configuration (YAML).
"""

from typing import Any, Dict, Optional
from pathlib import Path
import copy
import os
import sys
import yaml
import threading
import logging

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Configuration Service - Singleton Pattern

    Built-in defaults, deep-merged with the repository template and then
    the user file (or with one custom file only, for tests and the CLI).

    Usage Example:
        config = ConfigService("config/default_config.yaml")

        prefix = config.get("generator.collection_prefix", "SCS")

        config.set("generator.contrast_threshold", 7.0)
        config.save()
    """

    _instance: Optional['ConfigService'] = None
    _lock = threading.Lock()

    def __new__(cls, config_path: str = None) -> 'ConfigService':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: str = None):
        if self._initialized:
            return

        self._default_config_path = "config/default_config.yaml"
        default_path = Path(self._default_config_path)
        provided_path = Path(config_path) if config_path else None

        # Passing the template path still means "default mode": saves go to the
        # user directory so the repository template is never overwritten.
        self._use_custom_path = provided_path is not None and provided_path != default_path

        if self._use_custom_path:
            self._user_config_path = provided_path
        else:
            self._user_config_path = self._get_user_config_path()

        self._config: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._initialized = True

        self._load()

    @staticmethod
    def _get_user_config_path() -> Path:
        """Platform-specific user configuration file"""
        if sys.platform == "win32":
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        elif sys.platform == "darwin":
            base = Path.home() / "Library" / "Application Support"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
        return base / "token-synth" / "config.yaml"

    @property
    def path(self) -> Path:
        return self._user_config_path

    def _load(self) -> None:
        config = self._get_default_config()

        if self._use_custom_path:
            # Custom file only, the repository template is not merged
            self._merge_file(config, self._user_config_path, "custom")
        else:
            self._merge_file(config, Path(self._default_config_path), "default")
            self._merge_file(config, self._user_config_path, "user")

        with self._lock:
            self._config = config

    def _merge_file(self, config: Dict[str, Any], path: Path, label: str) -> None:
        if not path.exists():
            return
        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load %s configuration: %s", label, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("Ignoring %s configuration: top level is not a mapping", label)
            return
        self._deep_merge(config, loaded)

    def _deep_merge(self, base: Dict, override: Dict) -> None:
        """Deep merge dictionaries, override overwrites base"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_default_config(self) -> Dict[str, Any]:
        return {
            'generator': {
                'collection_prefix': 'SCS',
                'contrast_threshold': 4.5,
                'max_modes_per_collection': None,
            },
            'scale': {
                'light': {
                    'gray': '#CCCCCC',
                    'background': '#FFFFFF',
                },
                'dark': {
                    'gray': '#555555',
                    'background': '#1C1C1C',
                },
            },
            'defaults': {
                'hex_color': '#3B82F6',
                'neutral': '#6B7280',
                'success': '#10B981',
                'error': '#EF4444',
                'appearance': 'both',
                'include_primitives': True,
                'export_documentation': False,
                'font_family': 'none',
            },
            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Supports dot-separated nested keys, e.g., "scale.dark.background".

        Args:
            key: Configuration key
            default: Default value

        Returns:
            Configuration value or the default value.
        """
        with self._lock:
            keys = key.split('.')
            value = self._config

            try:
                for k in keys:
                    value = value[k]
                return value
            except (KeyError, TypeError):
                return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (dot-separated)
            value: Configuration value
        """
        with self._lock:
            keys = key.split('.')
            config = self._config

            for k in keys[:-1]:
                if not isinstance(config.get(k), dict):
                    config[k] = {}
                config = config[k]

            config[keys[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._config)

    def save(self) -> bool:
        """
        Save configuration to the user configuration file.

        Returns:
            bool: True if saving was successful.
        """
        try:
            self._user_config_path.parent.mkdir(parents=True, exist_ok=True)

            with self._lock:
                with open(self._user_config_path, 'w', encoding='utf-8') as f:
                    yaml.safe_dump(self._config, f, allow_unicode=True, default_flow_style=False)
            logger.debug("Configuration saved to: %s", self._user_config_path)
            return True
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to save configuration: %s", e)
            return False

    def reload(self) -> bool:
        """Reload configuration from disk"""
        try:
            self._load()
            return True
        except Exception as e:
            logger.error("Failed to reload configuration: %s", e)
            return False

    def reset(self) -> None:
        """Reset to default configuration."""
        with self._lock:
            self._config = self._get_default_config()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing only)."""
        with cls._lock:
            cls._instance = None
