"""Shared utility functions for expressgen.

Provides async command execution, JSON I/O, and Rich-based progress
reporting.  The generator and CLI print through the module-level ``console``
unless a different ``Console`` is injected.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Argument list; the first item is the executable.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A missing executable is
        reported as return code 127.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return (127, "", f"Executable not found: {cmd[0]}")

    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def dump_json(data: Any) -> str:
    """Serialise *data* with two-space indentation and no trailing newline.

    The layout matches what Node's ``JSON.stringify(data, null, 2)`` emits,
    so rewritten ``package.json`` files stay diff-friendly.
    """
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str, out: Console | None = None) -> None:
    """Print a completed-step line prefixed with a green ``+``."""
    (out or console).print(f"  [green]+[/green] {message}")


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")
