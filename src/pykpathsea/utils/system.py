"""
System utilities for locating the kpsewhich executable.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable

logger = logging.getLogger(__name__)

KPSEWHICH = "kpsewhich"


def executable_name(platform: str | None = None) -> str:
    """Platform-specific file name of kpsewhich.

    Args:
        platform: Value in the style of ``sys.platform`` (default: current)

    Returns:
        ``kpsewhich.exe`` on Windows, ``kpsewhich`` elsewhere
    """
    platform = sys.platform if platform is None else platform
    return f"{KPSEWHICH}.exe" if platform == "win32" else KPSEWHICH


def locate_kpsewhich(
    tex_path: str | os.PathLike[str] | None = None,
    *,
    file_exists: Callable[[str], bool] | None = None,
    platform: str | None = None,
) -> str:
    """Resolve the kpsewhich executable to invoke.

    Without a hint the bare name is returned and PATH is searched when the
    tool runs. With a hint, ``<tex_path>/kpsewhich[.exe]`` is used if it
    exists; otherwise a warning is logged and the bare name is returned.
    Never raises: a missing tool surfaces on the first lookup.

    Args:
        tex_path: Directory containing the TeX binaries
        file_exists: Existence check (default: os.path.exists)
        platform: Value in the style of ``sys.platform`` (default: current)

    Returns:
        Path or bare name of the executable
    """
    if not tex_path:
        return KPSEWHICH

    exists = file_exists or os.path.exists
    candidate = os.path.join(os.fspath(tex_path), executable_name(platform))
    if exists(candidate):
        return os.path.abspath(candidate)

    logger.warning(
        f"'{KPSEWHICH}' not found at {candidate}. Falling back to system PATH."
    )
    return KPSEWHICH
