"""
Configuration management for media-organizer.

Settings come from a YAML file (default ``~/.media-organizer/config.yml``)
and from the command line, which takes precedence key by key::

    media_src: /home/me/Camera
    photos_dst: /home/me/Pictures
    videos_dst: /home/me/Videos
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

from .constants import PROGRAM

CONFIG_KEYS = ('media_src', 'photos_dst', 'videos_dst')


class ConfigError(Exception):
    """Raised for missing, unreadable, or invalid configuration."""


def default_config_path() -> Path:
    return Path.home() / f".{PROGRAM}" / "config.yml"


class Config:
    """Values loaded from a YAML configuration file."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.data = self._load_config()

    def _load_config(self) -> Dict:
        """Load configuration from YAML file; a missing file is empty config."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"failed to load config file '{self.config_path}': {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"failed to load config file '{self.config_path}': "
                              f"expected a mapping at the top level")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self.data.get(key)
        return str(value) if value not in (None, "") else None


@dataclass
class Settings:
    """Resolved settings for one run."""
    media_src: Path
    photos_dst: Optional[Path] = None
    videos_dst: Optional[Path] = None

    def validate(self) -> None:
        """Check that the configured directories exist and one destination is set."""
        if not self.media_src.is_dir():
            raise ConfigError("media source dir doesn't exist")
        if self.photos_dst is None and self.videos_dst is None:
            raise ConfigError("at least one of photos_dst or videos_dst shouldn't be empty")
        if self.photos_dst is not None and not self.photos_dst.is_dir():
            raise ConfigError("photos destination dir doesn't exist")
        if self.videos_dst is not None and not self.videos_dst.is_dir():
            raise ConfigError("videos destination dir doesn't exist")


def _to_path(value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    return Path(value).expanduser().resolve()


def load_settings(overrides: Dict[str, Optional[str]], config_file: Optional[Path] = None,
                  load_default: bool = True) -> Settings:
    """Merge command-line overrides over the config file and validate the result.

    An explicitly given config_file must exist. The default file is only read
    when load_default is true and it exists.
    """
    if config_file is not None:
        if not Path(config_file).is_file():
            raise ConfigError(f"failed to load config file '{config_file}': no such file")
        config = Config(config_file)
    elif load_default:
        config = Config()
    else:
        config = None

    merged = {}
    for key in CONFIG_KEYS:
        value = overrides.get(key)
        if not value and config is not None:
            value = config.get(key)
        merged[key] = value or None

    if not merged['media_src']:
        raise ConfigError("media source is required")

    settings = Settings(
        media_src=_to_path(merged['media_src']),
        photos_dst=_to_path(merged['photos_dst']),
        videos_dst=_to_path(merged['videos_dst']),
    )
    settings.validate()
    return settings
