"""
Configuration Management System for Jump

This module provides a centralized configuration system that supports a 4-tier
precedence hierarchy: environment → project → user → system defaults.
"""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"
DEFAULT_DB_PATH = "~/.local/share/jump/jump.duckdb"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class StorageConfig(BaseModel):
    """Local key/value storage configuration"""
    model_config = ConfigDict(extra='forbid')

    db_path: str = Field(default=DEFAULT_DB_PATH, description="DuckDB file holding the key/value table (':memory:' allowed)")
    table_name: str = Field(default="kv_store", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$", description="Key/value table name")
    items_key: str = Field(default="items", min_length=1, description="Key the item list is stored under")


class EditorConfig(BaseModel):
    """Item editor configuration"""
    model_config = ConfigDict(extra='forbid')

    default_icon: str = Field(default="cloud-16", min_length=1, description="Icon preselected when creating an item")


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Enable web mode")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")
    theme_mode: str = Field(default="dark", description="UI theme mode")
    window_title: str = Field(default="Jump", description="Window title")
    toast_duration_ms: int = Field(default=2500, ge=500, le=30000, description="How long a toast stays visible")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    storage: StorageConfig = Field(default_factory=StorageConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    ENV_MAP = {
        'JUMP_DB_PATH': ('storage', 'db_path'),
        'JUMP_ITEMS_KEY': ('storage', 'items_key'),
        'JUMP_DEFAULT_ICON': ('editor', 'default_icon'),
        'FLET_WEB_MODE': ('ui', 'flet_web_mode'),
        'FLET_PORT': ('ui', 'flet_port'),
    }

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_SETTINGS_DIR
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        """Save configuration to YAML file"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")

        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")

        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()

        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())

        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key) in self.ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            if config_key == 'flet_port':
                try:
                    value = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-numeric {env_key}={value!r}")
                    continue
            elif config_key == 'flet_web_mode':
                value = value.lower() in ('true', '1', 'yes', 'on')

            overrides.setdefault(section, {})[config_key] = value

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def save_project_config(self, config_updates: Dict[str, Any]) -> bool:
        """Save project-specific configuration updates"""
        project_path = self.config_dir / "project.yaml"

        existing_config = self._load_yaml_file(project_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(project_path, existing_config)
        if success:
            # Clear cached project config to force reload
            self._project_config = None

        return success

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._system_config = None
        self._user_config = None
        self._project_config = None


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)


def resolve_db_path(storage: StorageConfig) -> str:
    """Expand ``~`` and environment variables in the configured database path."""
    if storage.db_path == ":memory:":
        return storage.db_path
    return os.path.expandvars(os.path.expanduser(storage.db_path))
