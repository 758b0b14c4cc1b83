"""Tests for the command runner wrappers.

Covers:
- PackageManager command lines (init, install, install --save-dev)
- VersionControl command lines and stdio capture
- ExternalCommandError on non-zero exit
- SubprocessRunner against real processes
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from expressgen.errors import ExternalCommandError
from expressgen.scaffolder.runner import PackageManager, SubprocessRunner, VersionControl


pytestmark = pytest.mark.unit


class TestPackageManager:
    async def test_init(self, runner, tmp_path: Path):
        await PackageManager(runner).init(tmp_path)
        assert runner.commands == [["npm", "init", "-y"]]
        assert runner.calls[0]["cwd"] == tmp_path
        assert runner.calls[0]["capture"] is False

    async def test_install(self, runner, tmp_path: Path):
        await PackageManager(runner).install(tmp_path, ["express", "cors"])
        assert runner.commands == [["npm", "install", "express", "cors"]]

    async def test_install_dev(self, runner, tmp_path: Path):
        await PackageManager(runner).install(tmp_path, ["typescript"], dev=True)
        assert runner.commands == [["npm", "install", "--save-dev", "typescript"]]

    async def test_install_nothing_is_noop(self, runner, tmp_path: Path):
        await PackageManager(runner).install(tmp_path, [], dev=True)
        assert runner.commands == []

    async def test_custom_executable(self, runner, tmp_path: Path):
        await PackageManager(runner, "pnpm").install(tmp_path, ["express"])
        assert runner.commands == [["pnpm", "install", "express"]]

    async def test_failure_raises(self, runner, tmp_path: Path):
        runner.fail_on = lambda cmd: 1 if "install" in cmd else 0
        with pytest.raises(ExternalCommandError) as exc_info:
            await PackageManager(runner).install(tmp_path, ["express"])
        err = exc_info.value
        assert err.command == "npm install express"
        assert err.returncode == 1
        assert "simulated failure" in err.stderr


class TestVersionControl:
    async def test_sequence(self, runner, tmp_path: Path):
        git = VersionControl(runner)
        await git.init(tmp_path)
        await git.add_all(tmp_path)
        await git.commit(tmp_path, "Initial commit")
        assert runner.commands == [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", "Initial commit"],
        ]

    async def test_init_inherits_stdio_and_rest_capture(self, runner, tmp_path: Path):
        git = VersionControl(runner)
        await git.init(tmp_path)
        await git.add_all(tmp_path)
        await git.commit(tmp_path, "msg")
        assert [c["capture"] for c in runner.calls] == [False, True, True]

    async def test_commit_failure_quotes_message(self, runner, tmp_path: Path):
        runner.fail_on = lambda cmd: 128 if "commit" in cmd else 0
        with pytest.raises(ExternalCommandError) as exc_info:
            await VersionControl(runner).commit(tmp_path, "Initial commit")
        assert exc_info.value.command == "git commit -m 'Initial commit'"
        assert exc_info.value.returncode == 128


class TestSubprocessRunner:
    async def test_success(self, tmp_path: Path):
        code, out, _ = await SubprocessRunner().run(
            [sys.executable, "-c", "print('hello')"], tmp_path, capture=True
        )
        assert code == 0
        assert out == "hello"

    async def test_runs_in_cwd(self, tmp_path: Path):
        code, out, _ = await SubprocessRunner().run(
            [sys.executable, "-c", "import os; print(os.getcwd())"], tmp_path, capture=True
        )
        assert code == 0
        assert Path(out).resolve() == tmp_path.resolve()

    async def test_nonzero_exit(self, tmp_path: Path):
        code, _, _ = await SubprocessRunner().run(
            [sys.executable, "-c", "import sys; sys.exit(3)"], tmp_path, capture=True
        )
        assert code == 3

    async def test_missing_executable(self, tmp_path: Path):
        code, _, err = await SubprocessRunner().run(
            ["definitely-not-a-real-binary-xyz"], tmp_path, capture=True
        )
        assert code == 127
        assert "not found" in err
