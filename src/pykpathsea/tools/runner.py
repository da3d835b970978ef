"""
Process runner used to invoke kpsewhich.

The runner is the only place that touches ``subprocess``; lookups take any
object with a matching ``run`` method so tests can substitute a fake.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Protocol

from pykpathsea.tools.base import ToolResult

logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    """Runs a command and reports its output and exit status."""

    def run(self, cmd: list[str], timeout: float | None = None) -> ToolResult: ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, never through a shell.

    Output is decoded like file names (``os.fsdecode``), so undecodable
    bytes survive as surrogate escapes and ``os.fsencode`` restores them.
    """

    def run(self, cmd: list[str], timeout: float | None = None) -> ToolResult:
        logger.debug(f"Running: {cmd!r} (timeout={timeout})")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding=sys.getfilesystemencoding(),
                errors="surrogateescape",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return ToolResult.from_error(f"Timeout after {timeout}s")
        except FileNotFoundError:
            return ToolResult.from_error(
                f"{cmd[0]} not found. Install a TeX distribution "
                "(TeX Live, MiKTeX) or pass tex_path.",
                spawn_failed=True,
            )
        except OSError as e:
            return ToolResult.from_error(str(e), spawn_failed=True)
        except Exception as e:
            return ToolResult.from_error(str(e))
        return ToolResult(
            success=result.returncode == 0,
            stdout=result.stdout,
            stderr=result.stderr,
            returncode=result.returncode,
        )
