"""Configuration for netsearch."""

from netsearch.config.loader import apply_env_overrides, get_config_path, load_config, save_config
from netsearch.config.schema import BrowserConfig, FetchConfig, NetSearchConfig, WeatherConfig

__all__ = [
    "BrowserConfig",
    "FetchConfig",
    "NetSearchConfig",
    "WeatherConfig",
    "apply_env_overrides",
    "get_config_path",
    "load_config",
    "save_config",
]
