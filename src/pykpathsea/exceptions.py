"""
Custom exceptions for pykpathsea.

All pykpathsea exceptions inherit from KpathseaError for easy catching.
"""

from __future__ import annotations

from typing import Any


class KpathseaError(Exception):
    """Base exception for all pykpathsea errors.

    Attributes:
        message: Human-readable error message
        file_name: The file name that was being looked up, if any
        file_format: The format value used for the lookup, if any
        stderr: Trimmed stderr output from kpsewhich
        returncode: Exit status of kpsewhich, when it ran
    """

    def __init__(
        self,
        message: str,
        *,
        file_name: str | None = None,
        file_format: str | None = None,
        stderr: str = "",
        returncode: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.file_name = file_name
        self.file_format = file_format
        self.stderr = stderr
        self.returncode = returncode

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.file_name is not None:
            result["file_name"] = self.file_name
        if self.file_format is not None:
            result["file_format"] = self.file_format
        if self.stderr:
            result["stderr"] = self.stderr
        if self.returncode is not None:
            result["returncode"] = self.returncode
        return result


class InvalidArgumentError(KpathseaError, ValueError):
    """A lookup argument was missing or invalid. No process was started."""

    pass


class FileNotFoundInTreeError(KpathseaError):
    """kpsewhich exited successfully but printed no path."""

    pass


class ExecutionError(KpathseaError):
    """kpsewhich failed: non-zero exit, timeout, or runtime error."""

    pass


class ToolNotFoundError(ExecutionError):
    """The kpsewhich executable could not be started."""

    def __init__(self, tool_path: str, message: str | None = None, **kwargs: Any):
        self.tool_path = tool_path
        msg = message or f"Required tool '{tool_path}' not found in PATH"
        super().__init__(msg, **kwargs)
