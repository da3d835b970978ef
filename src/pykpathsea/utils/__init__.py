"""
Utility functions for pykpathsea.
"""

from pykpathsea.utils.system import executable_name, locate_kpsewhich

__all__ = [
    "executable_name",
    "locate_kpsewhich",
]
