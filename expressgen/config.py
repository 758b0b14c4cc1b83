"""expressgen configuration.

Typed settings for a generation run.  The prompt answers describe *what* to
build; this model describes *where* to build it and which executables to call.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Settings shared by the CLI entry point and the project generator.

    Instances are created once (usually via :meth:`from_env`) and passed to
    ``ProjectGenerator``.  Tests construct them directly with ``output_dir``
    pointing at a temporary directory.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which the project folder is created",
    )
    npm_command: str = Field(default="npm", min_length=1)
    git_command: str = Field(default="git", min_length=1)
    commit_message: str = Field(default="Initial commit", min_length=1)

    def project_path(self, project_name: str) -> Path:
        """Return ``<output_dir>/<project_name>``."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESSGEN_OUTPUT_DIR, EXPRESSGEN_NPM, EXPRESSGEN_GIT,
            EXPRESSGEN_COMMIT_MESSAGE.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("EXPRESSGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPRESSGEN_OUTPUT_DIR"])
        if os.environ.get("EXPRESSGEN_NPM"):
            kwargs["npm_command"] = os.environ["EXPRESSGEN_NPM"]
        if os.environ.get("EXPRESSGEN_GIT"):
            kwargs["git_command"] = os.environ["EXPRESSGEN_GIT"]
        if os.environ.get("EXPRESSGEN_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["EXPRESSGEN_COMMIT_MESSAGE"]
        return cls(**kwargs)
