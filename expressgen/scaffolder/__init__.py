"""expressgen scaffolder -- generates Express project structures.

Takes a ``GenerationRequest`` (the collected prompt answers) and writes a new
project directory: entry point, optional ``.env``, Dockerfile and lint
configs, an npm manifest with its dependencies, and optionally a git repo.

Quick usage::

    from expressgen.scaffolder import GenerationRequest, Language, ProjectGenerator

    request = GenerationRequest(
        project_name="demo",
        language=Language.TYPESCRIPT,
        use_docker=True,
        extra_dependencies="cors, dotenv",
    )
    project_path = await ProjectGenerator(request).generate()
"""

from expressgen.scaffolder.generator import ProjectGenerator
from expressgen.scaffolder.models import GenerationRequest, Language
from expressgen.scaffolder.runner import (
    CommandRunner,
    PackageManager,
    SubprocessRunner,
    VersionControl,
)
from expressgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "CommandRunner",
    "GenerationRequest",
    "Language",
    "PackageManager",
    "ProjectGenerator",
    "SubprocessRunner",
    "TemplateRenderer",
    "VersionControl",
]
