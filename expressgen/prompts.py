"""Interactive answer collection.

Asks every question up front and returns a finished ``GenerationRequest``;
generation does not start until this returns.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from expressgen.scaffolder.models import GenerationRequest, Language, validate_project_name
from expressgen.utils import console as default_console
from expressgen.utils import print_error


class _NamePrompt(Prompt):
    """``Prompt`` that stops at the end of its input stream instead of re-asking."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        line = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and line == "":
            raise EOFError("input ended before a project name was given")
        return line


def collect_request(
    console: Console | None = None,
    stream: TextIO | None = None,
) -> GenerationRequest:
    """Prompt for every option and build the request.

    Args:
        console: Console used to render the questions.
        stream: Optional input stream (tests feed answers through a
            ``StringIO``); defaults to the terminal.

    Raises:
        EOFError: Input ended before a project name was given.
    """
    out = console or default_console

    project_name = _ask_project_name(out, stream)
    language = Prompt.ask(
        "Choose language",
        choices=[lang.value for lang in Language],
        default=Language.JAVASCRIPT.value,
        console=out,
        stream=stream,
    )
    use_mongo = Confirm.ask("Use MongoDB?", default=True, console=out, stream=stream)
    use_docker = Confirm.ask("Add Docker support?", default=True, console=out, stream=stream)
    dependencies = Prompt.ask(
        "Other dependencies (comma-separated, e.g., cors,dotenv)",
        default="",
        show_default=False,
        console=out,
        stream=stream,
    )
    add_env = Confirm.ask(
        "Do you want to create a .env file?", default=True, console=out, stream=stream
    )
    env_vars = None
    if add_env:
        env_vars = Prompt.ask(
            "Enter .env variable names (comma separated)",
            default="",
            show_default=False,
            console=out,
            stream=stream,
        )
    use_lint = Confirm.ask(
        "Add ESLint and Prettier setup?", default=True, console=out, stream=stream
    )
    init_git = Confirm.ask(
        "Initialize git repository?", default=True, console=out, stream=stream
    )

    return GenerationRequest(
        project_name=project_name,
        language=Language(language),
        use_mongo=use_mongo,
        use_docker=use_docker,
        extra_dependencies=dependencies,
        add_env=add_env,
        env_var_names=env_vars,
        use_lint=use_lint,
        init_git=init_git,
    )


def _ask_project_name(out: Console, stream: TextIO | None) -> str:
    """Ask until the answer is usable as a directory name.

    Raises ``EOFError`` once *stream* is exhausted; a blank line is re-asked.
    Terminal input raises it on its own through ``input()``.
    """
    while True:
        answer = _NamePrompt.ask("Project name", console=out, stream=stream)
        try:
            return validate_project_name(answer or "")
        except ValueError as exc:
            print_error(str(exc), out)
