"""
Configuration loader with priority resolution.

Root directory (PYKPATHSEA_ROOT):
- macOS/Linux: ~/.pykpathsea
- Windows: %APPDATA%\\pykpathsea
- Override: PYKPATHSEA_ROOT environment variable

Each setting (tex_path, timeout) is resolved independently, highest first:
1. Environment variable (PYKPATHSEA_TEX_PATH, PYKPATHSEA_TIMEOUT)
2. Project config (.pykpathsea/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Default (no tex_path, no timeout)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from pykpathsea.config.defaults import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

ENV_ROOT = "PYKPATHSEA_ROOT"
ENV_TEX_PATH = "PYKPATHSEA_TEX_PATH"
ENV_TIMEOUT = "PYKPATHSEA_TIMEOUT"


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class KpathseaConfig:
    """Resolved pykpathsea configuration."""

    tex_path: Path | None = None
    timeout: float | None = DEFAULT_TIMEOUT
    source: ConfigSource = ConfigSource.DEFAULT

    def __repr__(self) -> str:
        return (
            f"KpathseaConfig(tex_path={self.tex_path!r}, "
            f"timeout={self.timeout!r}, source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _parse_timeout(value: Any, origin: str) -> float | None:
    """Coerce a configured timeout to a positive float.

    Invalid values are logged and ignored.
    """
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid timeout {value!r} from {origin}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive timeout {value!r} from {origin}")
        return None
    return timeout


def _get_tex_path_from_yaml(
    config: dict[str, Any] | None,
    config_path: Path | None = None,
) -> Path | None:
    """Extract tex_path from a parsed YAML config.

    Relative paths are resolved against the config file's directory.
    """
    if config is None:
        return None

    tex_path = config.get("tex_path")
    if not tex_path:
        return None

    path = Path(str(tex_path)).expanduser()
    if not path.is_absolute() and config_path is not None:
        path = (config_path.parent / path).resolve()
    return path


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .pykpathsea/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".pykpathsea" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the pykpathsea root directory.

    Priority:
    1. PYKPATHSEA_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\pykpathsea
       - macOS/Linux: ~/.pykpathsea
    """
    env_root = os.environ.get(ENV_ROOT)
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "pykpathsea"
        return Path.home() / "AppData" / "Roaming" / "pykpathsea"
    return Path.home() / ".pykpathsea"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _resolve_config() -> KpathseaConfig:
    """Resolve configuration from all sources in priority order.

    ``source`` reports the highest-priority source that supplied any value.
    """
    tex_path: Path | None = None
    timeout: float | None = None
    sources: list[ConfigSource] = []

    env_tex_path = os.environ.get(ENV_TEX_PATH)
    if env_tex_path:
        tex_path = Path(env_tex_path).expanduser()
        logger.info(f"Using tex_path from {ENV_TEX_PATH}: {tex_path}")
        sources.append(ConfigSource.ENV)

    env_timeout = os.environ.get(ENV_TIMEOUT)
    if env_timeout:
        timeout = _parse_timeout(env_timeout, ENV_TIMEOUT)
        if timeout is not None:
            sources.append(ConfigSource.ENV)

    layers: list[tuple[ConfigSource, Path]] = []
    project_config_path = _find_project_config()
    if project_config_path:
        layers.append((ConfigSource.PROJECT, project_config_path))
    layers.append((ConfigSource.USER, _get_user_config_path()))

    for source, config_path in layers:
        if tex_path is not None and timeout is not None:
            break
        data = _load_yaml_config(config_path)
        if data is None:
            continue
        if tex_path is None:
            tex_path = _get_tex_path_from_yaml(data, config_path)
            if tex_path is not None:
                logger.info(f"Using tex_path from {config_path}: {tex_path}")
                sources.append(source)
        if timeout is None:
            timeout = _parse_timeout(data.get("timeout"), str(config_path))
            if timeout is not None:
                sources.append(source)

    if timeout is None:
        timeout = DEFAULT_TIMEOUT

    source = sources[0] if sources else ConfigSource.DEFAULT
    if source is ConfigSource.DEFAULT:
        logger.debug("Using default configuration")
    return KpathseaConfig(tex_path=tex_path, timeout=timeout, source=source)


@lru_cache(maxsize=1)
def get_config() -> KpathseaConfig:
    """Get resolved pykpathsea configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
