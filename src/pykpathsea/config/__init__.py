"""
Configuration for pykpathsea.
"""

from pykpathsea.config.defaults import AVAILABILITY_TIMEOUT, DEFAULT_TIMEOUT
from pykpathsea.config.loader import (
    ConfigSource,
    KpathseaConfig,
    clear_config_cache,
    get_config,
)

__all__ = [
    "AVAILABILITY_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "ConfigSource",
    "KpathseaConfig",
    "clear_config_cache",
    "get_config",
]
