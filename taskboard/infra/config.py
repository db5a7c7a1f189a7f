"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic_settings import BaseSettings, SettingsConfigDict
from taskboard.domain.models import UserPreferences


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file
    3. Environment variables (highest priority)

    Settings are read-only; the application never writes them back.
    """
    model_config = SettingsConfigDict(
        env_prefix='TASKBOARD_',
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__'
    )

    # Application paths
    app_name: str = "Taskboard"
    config_dir: Optional[Path] = None

    # User preferences
    preferences: UserPreferences = UserPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Initialize default paths based on OS"""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA', Path.home()))
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

    def _load_yaml_config(self):
        """Load preferences from YAML file, keeping values set through the environment"""
        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"

        if config_file.exists():
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
                if config_data:
                    explicit = self.preferences.model_dump(exclude_unset=True)
                    self.preferences = UserPreferences(**{**config_data, **explicit})


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
