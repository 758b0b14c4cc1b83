"""Exception hierarchy for expressgen.

Every failure during generation is fatal to the run.  The generator never
catches or retries these; the CLI entry point reports them and exits with a
non-zero status.  Files written before the failure are left on disk.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all project generation failures."""


class PathExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target directory already exists: {path}")


class FilesystemError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ExternalCommandError(ScaffoldError):
    """Raised when a package-manager or git invocation exits non-zero."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class InputParseError(ScaffoldError):
    """Raised when ``package.json`` cannot be parsed back for patching."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
