"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and generates an Express project directory:
folder layout, entry point, optional ``.env``/Dockerfile/lint configs, the
npm manifest with its dependencies installed, and optionally a git repo with
an initial commit.

Every step runs in order and any failure aborts the remaining ones.  Nothing
is rolled back: a failed run can leave a half-built directory behind.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from expressgen.config import GeneratorConfig
from expressgen.errors import FilesystemError, InputParseError, PathExistsError
from expressgen.utils import console as default_console
from expressgen.utils import dump_json, load_json, print_step, print_success, print_warning

from . import artifacts
from .docker_gen import DockerGenerator
from .models import GenerationRequest
from .runner import CommandRunner, PackageManager, SubprocessRunner, VersionControl
from .templates import TemplateRenderer, write_file


MANIFEST_NAME = "package.json"


class ProjectGenerator:
    """Drives one generation run.

    Args:
        request: The collected answers.
        config: Output root and executable names.  Defaults to
            ``GeneratorConfig.from_env()``.
        runner: Executes npm and git.  Defaults to real subprocesses.
        console: Where progress and the completion report are printed.
    """

    def __init__(
        self,
        request: GenerationRequest,
        config: GeneratorConfig | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
    ) -> None:
        self.request = request
        self.config = config or GeneratorConfig.from_env()
        self.runner = runner or SubprocessRunner()
        self.console = console or default_console
        self.renderer = TemplateRenderer()
        self.docker_gen = DockerGenerator(self.renderer)
        self.npm = PackageManager(self.runner, self.config.npm_command)
        self.git = VersionControl(self.runner, self.config.git_command)

    @property
    def project_root(self) -> Path:
        return self.config.project_path(self.request.project_name)

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the project and return its root directory.

        Raises:
            PathExistsError: The project directory already exists.
            FilesystemError: A directory or file could not be written.
            ExternalCommandError: npm or git exited non-zero.
            InputParseError: ``package.json`` could not be parsed back.
        """
        request = self.request
        root = self.project_root
        context = artifacts.template_context(request)

        # 1. Folder layout
        await self._create_directory_structure(root)

        # 2. Server entry point
        await self.renderer.render_to_file(
            artifacts.entry_point_template(request),
            root / artifacts.entry_point_path(request),
            context,
        )
        print_step(f"Wrote {artifacts.entry_point_path(request)}", self.console)

        # 3. Optional .env and Dockerfile, then .gitignore
        if request.add_env:
            await self._write_env_file(root)
        if request.use_docker:
            await self.docker_gen.generate(root, context)
            print_step("Wrote Dockerfile", self.console)
        await self.renderer.render_to_file("gitignore.j2", root / ".gitignore", context)

        # 4. Manifest and dependencies
        await self.npm.init(root)
        await self.npm.install(root, artifacts.runtime_dependencies(request))
        await self.npm.install(
            root, artifacts.typescript_dev_dependencies(request), dev=True
        )

        # 5. TypeScript and lint configs
        ts_config = artifacts.tsconfig(request)
        if ts_config is not None:
            await write_file(root / "tsconfig.json", dump_json(ts_config))
            print_step("Wrote tsconfig.json", self.console)

        lint_config = artifacts.eslint_config(request)
        if lint_config is not None:
            await self.npm.install(root, artifacts.lint_dependencies(request), dev=True)
            await write_file(root / ".eslintrc.json", dump_json(lint_config))
            await write_file(root / ".prettierrc", artifacts.PRETTIER_CONFIG)
            print_step("Configured ESLint and Prettier", self.console)

        # 6. Version control
        if request.init_git:
            await self.git.init(root)
            await self.git.add_all(root)
            await self.git.commit(root, self.config.commit_message)
            self.console.print("Git repo initialized with first commit.")

        print_success(
            f'\nProject "{escape(request.project_name)}" created successfully!',
            self.console,
        )

        # 7. Start script
        await self._patch_manifest(root)

        # 8. Next steps
        self._print_next_steps()
        return root

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and its fixed subfolders.

        Raises ``PathExistsError`` before anything is written if *root*
        already exists.
        """
        if root.exists():
            raise PathExistsError(root)

        def _mkdirs() -> None:
            root.mkdir(parents=True)
            for folder in artifacts.project_folders(self.request):
                (root / folder).mkdir()

        try:
            await asyncio.to_thread(_mkdirs)
        except FileExistsError as exc:
            raise PathExistsError(root) from exc
        except OSError as exc:
            raise FilesystemError(
                f"Could not create project directory {root}: {exc}", path=root
            ) from exc
        print_step(f"Created [bold]{escape(str(root))}[/bold]", self.console)

    # -- Env file ----------------------------------------------------------

    async def _write_env_file(self, root: Path) -> None:
        names = artifacts.env_variable_names(self.request)
        await write_file(root / ".env", artifacts.render_env_file(names))
        self.console.print(f".env file created with: {escape(', '.join(names))}")
        if not names:
            print_warning("  No variable names given; .env is empty.", self.console)

    # -- Manifest ----------------------------------------------------------

    async def _patch_manifest(self, root: Path) -> None:
        """Set ``scripts.start`` in ``package.json``, keeping other scripts."""
        manifest_path = root / MANIFEST_NAME
        try:
            manifest = await asyncio.to_thread(load_json, manifest_path)
        except ValueError as exc:
            raise InputParseError(
                f"Could not parse {manifest_path}: {exc}", path=manifest_path
            ) from exc
        except OSError as exc:
            raise FilesystemError(
                f"Could not read {manifest_path}: {exc}", path=manifest_path
            ) from exc

        if not isinstance(manifest, dict):
            raise InputParseError(
                f"Expected a JSON object in {manifest_path}, got {type(manifest).__name__}",
                path=manifest_path,
            )

        patched = artifacts.patch_manifest(manifest, self.request)
        await write_file(manifest_path, dump_json(patched))

    # -- Completion report -------------------------------------------------

    def _print_next_steps(self) -> None:
        self.console.print()
        for label, command in artifacts.next_steps(self.request):
            self.console.print(f" {label}:\n   [cyan]{command}[/cyan]")
