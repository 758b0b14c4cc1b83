"""Pydantic v2 models for a single generation run.

``GenerationRequest`` is the finished answer set handed from the prompt
collector to the generator.  It is frozen: the generator only reads it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Source language of the generated project."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def split_tokens(value: Any) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty tokens.

    Accepts either a raw string (``"cors, dotenv"``) or an already-split
    sequence.  Order and duplicates are preserved.

    Examples::

        split_tokens("cors, ,dotenv ") -> ["cors", "dotenv"]
        split_tokens(["  a", ""])     -> ["a"]
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value)
    return [str(p).strip() for p in parts if str(p).strip()]


def validate_project_name(value: str) -> str:
    """Return the trimmed name, or raise ``ValueError`` if it is not a plain directory name."""
    name = value.strip()
    if not name:
        raise ValueError("project name must not be empty")
    if name in (".", "..") or "/" in name or "\\" in name or "\x00" in name:
        raise ValueError(f"project name must be a plain directory name, got {name!r}")
    return name


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """Everything the user answered about the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name of the new project")
    language: Language = Field(default=Language.JAVASCRIPT)
    use_mongo: bool = Field(default=False, description="Add mongoose to the dependencies")
    use_docker: bool = Field(default=False, description="Write a Dockerfile")
    use_lint: bool = Field(default=False, description="Install and configure ESLint + Prettier")
    init_git: bool = Field(default=False, description="Initialise a git repo with one commit")
    add_env: bool = Field(default=False, description="Write a .env file")
    extra_dependencies: list[str] = Field(
        default_factory=list,
        description="Additional npm packages, in the order given",
    )
    env_var_names: Optional[list[str]] = Field(
        default=None,
        description="Variable names for .env; only set when add_env is true",
    )

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("extra_dependencies", mode="before")
    @classmethod
    def _split_dependencies(cls, value: Any) -> list[str]:
        return split_tokens(value)

    @field_validator("env_var_names", mode="before")
    @classmethod
    def _split_env_vars(cls, value: Any) -> Optional[list[str]]:
        if value is None:
            return None
        return split_tokens(value)

    @model_validator(mode="after")
    def _env_vars_follow_add_env(self) -> "GenerationRequest":
        if not self.add_env and self.env_var_names is not None:
            object.__setattr__(self, "env_var_names", None)
        elif self.add_env and self.env_var_names is None:
            object.__setattr__(self, "env_var_names", [])
        return self

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT
