"""Dockerfile generation for the scaffolded Express app.

Renders ``Dockerfile.j2``: a single-stage ``node:18`` image that copies the
manifest first (so the install layer is cached), installs, copies the rest of
the sources, runs ``npm start`` and exposes the server port.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer


class DockerGenerator:
    """Writes the project Dockerfile."""

    TEMPLATE = "Dockerfile.j2"
    OUTPUT_NAME = "Dockerfile"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, output_dir: Path, context: dict[str, Any]) -> Path:
        """Render the Dockerfile into *output_dir*.

        Args:
            output_dir: Project root directory.
            context: Template rendering context; needs ``base_image`` and ``port``.

        Returns:
            Path of the written Dockerfile.
        """
        return await self.renderer.render_to_file(
            self.TEMPLATE, output_dir / self.OUTPUT_NAME, context
        )
