"""Dashboard configuration management."""

import os
from functools import lru_cache

from .schemas import DashboardConfig
from .utils import load_json

# Environment variables mapped to DashboardConfig fields
ENV_VARS = {
    'league_id': 'SLEEPER_LEAGUE_ID',
    'week': 'SLEEPER_WEEK',
    'base_url': 'SLEEPER_BASE_URL',
    'timeout': 'SLEEPER_TIMEOUT',
}
CONFIG_FILE_ENV = 'SLEEPER_CONFIG_FILE'


def config_from_env(environ: dict[str, str] | None = None) -> DashboardConfig:
    """
    Build configuration from environment variables.

    If SLEEPER_CONFIG_FILE is set, that JSON file supplies the base values
    and the individual SLEEPER_* variables override them.

    Args:
        environ: Mapping to read instead of os.environ (for testing)

    Raises:
        FileNotFoundError: If the named config file doesn't exist
        ValueError: If values fail validation
    """
    environ = os.environ if environ is None else environ

    values = {}
    config_file = environ.get(CONFIG_FILE_ENV)
    if config_file:
        values = load_json(config_file, schema=DashboardConfig).model_dump()

    for field_name, env_key in ENV_VARS.items():
        if environ.get(env_key):
            values[field_name] = environ[env_key]

    return DashboardConfig(**values)


@lru_cache(maxsize=1)
def get_config() -> DashboardConfig:
    """
    Load configuration from the process environment.

    Cached after first load; call clear_config_cache() to re-read.
    """
    return config_from_env()


def clear_config_cache() -> None:
    """Clear the configuration cache."""
    get_config.cache_clear()
