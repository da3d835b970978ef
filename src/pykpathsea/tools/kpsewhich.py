"""
kpsewhich wrapper for resolving TeX files to absolute paths.

The search itself happens inside kpsewhich; this module only builds the
command line and interprets what the tool prints.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable

from pykpathsea.config.defaults import AVAILABILITY_TIMEOUT
from pykpathsea.config.loader import KpathseaConfig, get_config
from pykpathsea.exceptions import (
    ExecutionError,
    FileNotFoundInTreeError,
    InvalidArgumentError,
    ToolNotFoundError,
)
from pykpathsea.formats import FileFormat
from pykpathsea.tools.base import ToolResult
from pykpathsea.tools.runner import ProcessRunner, SubprocessRunner
from pykpathsea.utils.system import locate_kpsewhich

logger = logging.getLogger(__name__)


def build_args(
    file_name: str,
    file_format: FileFormat | str = FileFormat.ALL,
) -> list[str]:
    """Build the kpsewhich argument vector for one lookup.

    The optional ``--format=`` flag comes first and the file name last.
    No flag is added for ``FileFormat.ALL``.

    Raises:
        InvalidArgumentError: If file_name is empty or the format is unknown.
    """
    if not file_name or not isinstance(file_name, str):
        raise InvalidArgumentError(
            "file_name must be provided.",
            file_name=file_name or None,
            file_format=str(file_format),
        )
    try:
        fmt = FileFormat.parse(file_format)
    except InvalidArgumentError as e:
        raise InvalidArgumentError(
            e.message, file_name=file_name, file_format=str(file_format)
        ) from e

    args: list[str] = []
    if fmt.flag is not None:
        args.append(fmt.flag)
    args.append(file_name)
    return args


def interpret_result(
    result: ToolResult,
    file_name: str,
    file_format: FileFormat | str = FileFormat.ALL,
) -> str:
    """Map a kpsewhich run to a resolved path or a typed error.

    kpsewhich exits 0 with empty output when nothing matched, so an empty
    stdout on success is a miss, not a result.

    Returns:
        The trimmed path printed by kpsewhich.

    Raises:
        FileNotFoundInTreeError: Exit 0 with no output.
        ToolNotFoundError: The executable could not be started.
        ExecutionError: Any other failure; stderr is preferred as the detail.
    """
    fmt = FileFormat.parse(file_format).value
    if result.success:
        resolved = result.stdout.strip()
        if resolved:
            return resolved
        raise FileNotFoundInTreeError(
            f"File '{file_name}' not found for format '{fmt}'.",
            file_name=file_name,
            file_format=fmt,
            stderr=result.stderr.strip(),
            returncode=result.returncode,
        )

    stderr = result.stderr.strip()
    if result.error is not None:
        detail = stderr or result.error
        returncode = None
    else:
        detail = stderr or f"kpsewhich exited with code {result.returncode}"
        returncode = result.returncode
    message = f"Error finding '{file_name}' (format '{fmt}'): {detail}"

    if result.spawn_failed:
        raise ToolNotFoundError(
            "kpsewhich",
            message,
            file_name=file_name,
            file_format=fmt,
            stderr=stderr,
        )
    raise ExecutionError(
        message,
        file_name=file_name,
        file_format=fmt,
        stderr=stderr,
        returncode=returncode,
    )


class Kpathsea:
    """Look up TeX files with the kpsewhich command-line tool.

    Example:
        >>> kpse = Kpathsea()
        >>> kpse.find_file("cmr10", FileFormat.TFM)
        '/usr/share/texlive/texmf-dist/fonts/tfm/public/cm/cmr10.tfm'

    Args:
        tex_path: Directory containing kpsewhich. When omitted, or when the
            directory has no kpsewhich, PATH is searched at lookup time.
        runner: Process runner (default: SubprocessRunner)
        timeout: Seconds to wait for each lookup; None waits forever
        file_exists: Existence check used to validate tex_path

    Raises:
        InvalidArgumentError: If timeout is not a positive number.
    """

    def __init__(
        self,
        tex_path: str | os.PathLike[str] | None = None,
        *,
        runner: ProcessRunner | None = None,
        timeout: float | None = None,
        file_exists: Callable[[str], bool] | None = None,
    ):
        if timeout is not None and (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or timeout <= 0
        ):
            raise InvalidArgumentError(
                f"timeout must be a positive number of seconds, got {timeout!r}"
            )
        self._kpsewhich_path = locate_kpsewhich(tex_path, file_exists=file_exists)
        self._runner: ProcessRunner = runner or SubprocessRunner()
        self._timeout = timeout

    @classmethod
    def from_config(
        cls,
        config: KpathseaConfig | None = None,
        *,
        runner: ProcessRunner | None = None,
    ) -> Kpathsea:
        """Create an instance from the resolved pykpathsea configuration."""
        config = config or get_config()
        return cls(config.tex_path, runner=runner, timeout=config.timeout)

    @property
    def name(self) -> str:
        """Tool name for logging and error messages."""
        return "kpsewhich"

    @property
    def kpsewhich_path(self) -> str:
        """Executable invoked for lookups (absolute path or bare name)."""
        return self._kpsewhich_path

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def get_path(self) -> str:
        """Get the path to the kpsewhich executable."""
        return self._kpsewhich_path

    def is_available(self) -> bool:
        """Check if kpsewhich can be run."""
        result = self._runner.run(
            [self._kpsewhich_path, "--version"], timeout=AVAILABILITY_TIMEOUT
        )
        return result.success

    def _command(
        self, file_name: str, file_format: FileFormat | str
    ) -> tuple[list[str], FileFormat]:
        args = build_args(file_name, file_format)
        fmt = FileFormat.parse(file_format)
        cmd = [self._kpsewhich_path, *args]
        logger.debug(f"kpsewhich lookup: {cmd!r}")
        return cmd, fmt

    def _interpret(self, result: ToolResult, file_name: str, fmt: FileFormat) -> str:
        try:
            return interpret_result(result, file_name, fmt)
        except (FileNotFoundInTreeError, ExecutionError) as e:
            logger.debug(f"kpsewhich lookup failed: {e}")
            raise

    def find_file(
        self,
        file_name: str,
        file_format: FileFormat | str = FileFormat.ALL,
    ) -> str:
        """Find a file, blocking until kpsewhich exits.

        Args:
            file_name: Name to look up (e.g. "cmr10", "article.cls")
            file_format: Format filter (default: search all formats)

        Returns:
            Absolute path to the file

        Raises:
            InvalidArgumentError: file_name is empty (no process is started)
            FileNotFoundInTreeError: kpsewhich found nothing
            ExecutionError: kpsewhich failed or could not be started
        """
        cmd, fmt = self._command(file_name, file_format)
        result = self._runner.run(cmd, timeout=self._timeout)
        return self._interpret(result, file_name, fmt)

    async def find_file_async(
        self,
        file_name: str,
        file_format: FileFormat | str = FileFormat.ALL,
    ) -> str:
        """Find a file without blocking the event loop.

        Same arguments, result and errors as :meth:`find_file`; the process
        runs in a worker thread.
        """
        cmd, fmt = self._command(file_name, file_format)
        result = await asyncio.to_thread(self._runner.run, cmd, self._timeout)
        return self._interpret(result, file_name, fmt)
