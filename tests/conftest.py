"""Shared pytest fixtures for the expressgen test suite.

Provides reusable fixtures for:
- Temporary output directories and a matching ``GeneratorConfig``
- A recording command runner that stands in for npm and git
- A Rich console that captures output into a string
- A factory for ``GenerationRequest`` objects
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Callable

import pytest
from rich.console import Console

from expressgen.config import GeneratorConfig
from expressgen.scaffolder.models import GenerationRequest, Language


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

NPM_INIT_MANIFEST: dict[str, Any] = {
    "version": "1.0.0",
    "description": "",
    "main": "index.js",
    "scripts": {
        "test": 'echo "Error: no test specified" && exit 1',
    },
    "keywords": [],
    "author": "",
    "license": "ISC",
}


class RecordingRunner:
    """Records every command instead of spawning it.

    ``npm init -y`` is simulated by writing a ``package.json`` the way npm
    does, so the manifest patch step has something to read.  Set
    ``fail_on`` to a ``(cmd -> returncode)`` callable to make commands fail.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.fail_on: Callable[[list[str]], int] | None = None
        self.manifest: dict[str, Any] | None = None

    async def run(
        self, cmd: list[str], cwd: Path, *, capture: bool = False
    ) -> tuple[int, str, str]:
        self.calls.append({"cmd": list(cmd), "cwd": Path(cwd), "capture": capture})
        if self.fail_on is not None:
            code = self.fail_on(cmd)
            if code:
                return (code, "", f"simulated failure: {' '.join(cmd)}")
        if cmd[1:3] == ["init", "-y"]:
            manifest = self.manifest or {"name": Path(cwd).name, **NPM_INIT_MANIFEST}
            (Path(cwd) / "package.json").write_text(
                json.dumps(manifest, indent=2), encoding="utf-8"
            )
        return (0, "", "")

    @property
    def commands(self) -> list[list[str]]:
        return [c["cmd"] for c in self.calls]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "workspace"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(output_dir=output_dir)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def capture_console() -> Console:
    """A Console that writes plain text into ``console.file``."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture
def make_request() -> Callable[..., GenerationRequest]:
    """Build a ``GenerationRequest`` with every option off by default."""

    def _make(**overrides: Any) -> GenerationRequest:
        data: dict[str, Any] = {
            "project_name": "demo",
            "language": Language.JAVASCRIPT,
            "use_mongo": False,
            "use_docker": False,
            "use_lint": False,
            "init_git": False,
            "add_env": False,
            "extra_dependencies": "",
        }
        data.update(overrides)
        return GenerationRequest(**data)

    return _make
