"""
pykpathsea - Find TeX files with kpsewhich.

Resolve fonts, style files and configuration files to absolute paths:
1. Locate the kpsewhich executable (optional TeX bin directory, else PATH)
2. Run `kpsewhich [--format=<format>] <name>`
3. Return the printed path or raise a typed error
"""

from pykpathsea.config.loader import (
    ConfigSource,
    KpathseaConfig,
    clear_config_cache,
    get_config,
)
from pykpathsea.exceptions import (
    ExecutionError,
    FileNotFoundInTreeError,
    InvalidArgumentError,
    KpathseaError,
    ToolNotFoundError,
)
from pykpathsea.formats import FileFormat
from pykpathsea.tools.kpsewhich import Kpathsea

__version__ = "0.1.0"

__all__ = [
    "Kpathsea",
    "FileFormat",
    # Exceptions
    "KpathseaError",
    "InvalidArgumentError",
    "FileNotFoundInTreeError",
    "ExecutionError",
    "ToolNotFoundError",
    # Config
    "ConfigSource",
    "KpathseaConfig",
    "get_config",
    "clear_config_cache",
    "__version__",
]
