"""Configuration loading utilities."""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from netsearch.config.schema import NetSearchConfig

# Environment variable -> provider whose base URL it overrides.
_PROVIDER_URL_ENV = {
    "BING_URL": "bing",
    "DUCKDUCKGO_URL": "duckduckgo",
    "GOOGLE_URL": "google",
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".netsearch" / "config.json"


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> NetSearchConfig:
    """
    Load configuration from file, then apply environment overrides.

    Args:
        config_path: Optional path to config file. Uses default if not provided.
        environ: Environment mapping. Uses ``os.environ`` if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    config = NetSearchConfig()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            config = NetSearchConfig.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}. Using default configuration.", path, e)

    return apply_env_overrides(config, os.environ if environ is None else environ)


def apply_env_overrides(config: NetSearchConfig, environ: Mapping[str, str]) -> NetSearchConfig:
    """Return a copy of ``config`` with process-level overrides applied."""
    updated = config.model_copy(deep=True)

    quick = environ.get("ENABLE_QUICK_SEARCH")
    if quick is not None:
        updated.quick_search = quick == "true"

    for env_key, provider in _PROVIDER_URL_ENV.items():
        url = environ.get(env_key, "").strip()
        if url:
            updated.provider_base_urls[provider] = url

    return updated


def save_config(config: NetSearchConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
