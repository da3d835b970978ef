"""
External tool wrappers for pykpathsea.

Provides a clean interface to kpsewhich.
"""

from pykpathsea.tools.base import ToolResult
from pykpathsea.tools.kpsewhich import Kpathsea, build_args, interpret_result
from pykpathsea.tools.runner import ProcessRunner, SubprocessRunner

__all__ = [
    "ToolResult",
    "Kpathsea",
    "build_args",
    "interpret_result",
    "ProcessRunner",
    "SubprocessRunner",
]
