"""External command execution for the generator.

The generator never spawns processes directly.  It talks to a
``CommandRunner`` (real or fake) through two thin wrappers,
``PackageManager`` and ``VersionControl``, which build the command lines and
turn non-zero exits into ``ExternalCommandError``.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Protocol

from expressgen.errors import ExternalCommandError
from expressgen.utils import run_command


class CommandRunner(Protocol):
    """Anything that can run a command in a directory and report its exit."""

    async def run(
        self, cmd: list[str], cwd: Path, *, capture: bool = False
    ) -> tuple[int, str, str]:
        """Run *cmd* in *cwd*; return ``(returncode, stdout, stderr)``.

        With ``capture=False`` the child inherits the terminal's streams.
        """
        ...


class SubprocessRunner:
    """Runs commands as real child processes, one at a time."""

    async def run(
        self, cmd: list[str], cwd: Path, *, capture: bool = False
    ) -> tuple[int, str, str]:
        return await run_command(cmd, cwd=cwd, capture=capture)


async def _check(
    runner: CommandRunner, cmd: list[str], cwd: Path, *, capture: bool = False
) -> str:
    """Run *cmd* and raise ``ExternalCommandError`` on a non-zero exit."""
    returncode, stdout, stderr = await runner.run(cmd, cwd, capture=capture)
    if returncode != 0:
        raise ExternalCommandError(shlex.join(cmd), returncode, stderr)
    return stdout


class PackageManager:
    """npm-compatible package manager commands."""

    def __init__(self, runner: CommandRunner, executable: str = "npm") -> None:
        self.runner = runner
        self.executable = executable

    async def init(self, cwd: Path) -> None:
        """Create a default ``package.json`` non-interactively."""
        await _check(self.runner, [self.executable, "init", "-y"], cwd)

    async def install(self, cwd: Path, packages: list[str], *, dev: bool = False) -> None:
        """Install *packages*; a no-op for an empty list."""
        if not packages:
            return
        cmd = [self.executable, "install"]
        if dev:
            cmd.append("--save-dev")
        await _check(self.runner, cmd + list(packages), cwd)


class VersionControl:
    """git commands used to create the initial commit."""

    def __init__(self, runner: CommandRunner, executable: str = "git") -> None:
        self.runner = runner
        self.executable = executable

    async def init(self, cwd: Path) -> None:
        await _check(self.runner, [self.executable, "init"], cwd)

    async def add_all(self, cwd: Path) -> None:
        await _check(self.runner, [self.executable, "add", "."], cwd, capture=True)

    async def commit(self, cwd: Path, message: str) -> None:
        await _check(
            self.runner, [self.executable, "commit", "-m", message], cwd, capture=True
        )
