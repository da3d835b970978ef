"""
Result type shared by process runners.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolResult:
    """Result from running an external tool."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    error: str | None = None
    spawn_failed: bool = False

    @classmethod
    def from_error(cls, error: str, *, spawn_failed: bool = False) -> ToolResult:
        """Create a failed result from an error message."""
        return cls(success=False, error=error, returncode=-1, spawn_failed=spawn_failed)

    @classmethod
    def ok(cls, stdout: str = "", stderr: str = "") -> ToolResult:
        """Create a successful result."""
        return cls(success=True, stdout=stdout, stderr=stderr, returncode=0)
