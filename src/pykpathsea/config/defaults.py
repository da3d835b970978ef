"""
Default configuration values for pykpathsea.

Note: tex_path and timeout are resolved via config/loader.py which supports
environment variables (PYKPATHSEA_TEX_PATH, PYKPATHSEA_TIMEOUT), project
config, and user config.
"""

# No lookup timeout unless one is configured
DEFAULT_TIMEOUT: float | None = None

# Timeout for the `kpsewhich --version` availability probe (seconds)
AVAILABILITY_TIMEOUT = 5
