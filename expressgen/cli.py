"""Command-line entry point.

Usage::

    expressgen
    python -m expressgen

There are no options: every setting is asked interactively.  The output
directory and executables can be overridden through ``EXPRESSGEN_*``
environment variables (see ``expressgen.config``).
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from expressgen.config import GeneratorConfig
from expressgen.errors import ExternalCommandError, ScaffoldError
from expressgen.prompts import collect_request
from expressgen.scaffolder import ProjectGenerator
from expressgen.utils import console, print_error


def exit_code_for(error: ScaffoldError) -> int:
    """Exit status for a failed run: the failing command's own, else 1."""
    if isinstance(error, ExternalCommandError) and error.returncode > 0:
        return error.returncode
    return 1


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``expressgen``."""
    parser = argparse.ArgumentParser(
        prog="expressgen",
        description="Interactively scaffold a minimal Express (Node.js) project.",
    )
    parser.parse_args(argv)

    config = GeneratorConfig.from_env()
    try:
        request = collect_request(console)
    except (EOFError, KeyboardInterrupt):
        print_error("Aborted: no project was generated.")
        sys.exit(1)

    generator = ProjectGenerator(request, config=config, console=console)
    try:
        asyncio.run(generator.generate())
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(exit_code_for(exc))


if __name__ == "__main__":
    main()
