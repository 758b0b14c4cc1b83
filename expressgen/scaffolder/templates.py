"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``expressgen/scaffolder/templates/`` directory and renders them with the
request-derived context.  The templates are whitespace-exact: the rendered
output is written byte for byte, so template files must not gain stray
trailing newlines.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from expressgen.errors import FilesystemError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Output is source code and config files, never HTML, so autoescaping is
    disabled for every extension.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"Dockerfile.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Returns the output path.

        Raises:
            FilesystemError: If the file cannot be written.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await write_file(out, content)
        return out


# ---------------------------------------------------------------------------
# File writing
# ---------------------------------------------------------------------------

async def write_file(path: Path, content: str) -> None:
    """Write *content* to *path* in a worker thread.

    The parent directory must already exist; the generator creates the layout
    up front.

    Raises:
        FilesystemError: Wrapping the underlying ``OSError``.
    """
    try:
        await asyncio.to_thread(_write_file, path, content)
    except OSError as exc:
        raise FilesystemError(f"Could not write {path}: {exc}", path=path) from exc


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write content without newline translation."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
