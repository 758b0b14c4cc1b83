"""Pure mapping from a ``GenerationRequest`` to generated artifacts.

Nothing in this module touches the filesystem or spawns processes.  The
generator calls these functions and writes their results; tests call them
directly.
"""

from __future__ import annotations

from typing import Any

from .models import GenerationRequest


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SERVER_PORT = 3000
NODE_BASE_IMAGE = "node:18"

PROJECT_FOLDERS: tuple[str, ...] = ("routes", "controllers", "models", "config")

BASE_DEPENDENCIES: tuple[str, ...] = ("express",)

TYPESCRIPT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "typescript",
    "@types/node",
    "@types/express",
    "ts-node-dev",
)

LINT_DEPENDENCIES: tuple[str, ...] = ("eslint", "prettier")

TYPESCRIPT_LINT_DEPENDENCIES: tuple[str, ...] = (
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
)

GITIGNORE_ENTRIES: tuple[str, ...] = (
    "node_modules",
    ".env",
    "dist",
    ".DS_Store",
    "npm-debug.log",
)

START_SCRIPTS: dict[bool, str] = {
    True: "ts-node-dev src/index.ts",
    False: "node server.js",
}


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def project_folders(request: GenerationRequest) -> list[str]:
    """Subfolders created inside the project root."""
    folders = list(PROJECT_FOLDERS)
    if request.is_typescript:
        folders.append("src")
    return folders


def entry_point_path(request: GenerationRequest) -> str:
    """Project-relative path of the server entry point."""
    return "src/index.ts" if request.is_typescript else "server.js"


def entry_point_template(request: GenerationRequest) -> str:
    return "index.ts.j2" if request.is_typescript else "server.js.j2"


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def runtime_dependencies(request: GenerationRequest) -> list[str]:
    """``express``, then ``mongoose`` if requested, then the extras verbatim.

    Duplicates are kept: an extra ``express`` is installed twice, exactly as
    typed.
    """
    deps = list(BASE_DEPENDENCIES)
    if request.use_mongo:
        deps.append("mongoose")
    deps.extend(request.extra_dependencies)
    return deps


def typescript_dev_dependencies(request: GenerationRequest) -> list[str]:
    if not request.is_typescript:
        return []
    return list(TYPESCRIPT_DEV_DEPENDENCIES)


def lint_dependencies(request: GenerationRequest) -> list[str]:
    if not request.use_lint:
        return []
    deps = list(LINT_DEPENDENCIES)
    if request.is_typescript:
        deps.extend(TYPESCRIPT_LINT_DEPENDENCIES)
    return deps


# ---------------------------------------------------------------------------
# Plain-text artifacts
# ---------------------------------------------------------------------------

def env_variable_names(request: GenerationRequest) -> list[str]:
    return list(request.env_var_names or [])


def render_env_file(names: list[str]) -> str:
    """One ``NAME=`` line per variable, newline separated, no trailing newline.

    An empty list yields an empty string; the caller still writes the file.
    """
    return "\n".join(f"{name}=" for name in names)


def parse_env_file(content: str) -> list[str]:
    """Return the variable names from ``.env`` content written by :func:`render_env_file`."""
    names = []
    for line in content.splitlines():
        if not line.strip():
            continue
        names.append(line.split("=", 1)[0].strip())
    return names


# ---------------------------------------------------------------------------
# Structured configs
# ---------------------------------------------------------------------------

def tsconfig(request: GenerationRequest) -> dict[str, Any] | None:
    """``tsconfig.json`` contents, or ``None`` for JavaScript projects."""
    if not request.is_typescript:
        return None
    return {
        "compilerOptions": {
            "target": "ES6",
            "module": "commonjs",
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "esModuleInterop": True,
        }
    }


def eslint_config(request: GenerationRequest) -> dict[str, Any] | None:
    """``.eslintrc.json`` contents, or ``None`` when linting was declined."""
    if not request.use_lint:
        return None
    if request.is_typescript:
        return {
            "parser": "@typescript-eslint/parser",
            "extends": ["eslint:recommended", "plugin:@typescript-eslint/recommended"],
            "parserOptions": {
                "ecmaVersion": 2020,
                "sourceType": "module",
            },
            "rules": {},
        }
    return {
        "env": {"node": True, "es2021": True},
        "extends": ["eslint:recommended"],
        "parserOptions": {"ecmaVersion": "latest", "sourceType": "module"},
        "rules": {},
    }


PRETTIER_CONFIG = "{}"


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

def start_script(request: GenerationRequest) -> str:
    return START_SCRIPTS[request.is_typescript]


def patch_manifest(manifest: dict[str, Any], request: GenerationRequest) -> dict[str, Any]:
    """Return a copy of *manifest* with ``scripts.start`` set.

    Existing scripts are preserved; only ``start`` is overwritten.
    """
    existing = manifest.get("scripts")
    scripts = dict(existing) if isinstance(existing, dict) else {}
    scripts["start"] = start_script(request)
    return {**manifest, "scripts": scripts}


# ---------------------------------------------------------------------------
# Completion report
# ---------------------------------------------------------------------------

def next_steps(request: GenerationRequest) -> list[tuple[str, str]]:
    """``(label, command)`` pairs describing how to run the new project."""
    steps = [("To run the app", "npm start")]
    if request.is_typescript:
        steps.extend([
            ("To compile the app", "tsc"),
            ("To run the app", "node dist/index.js"),
            ("Or use ts-node", "npx ts-node src/index.ts"),
        ])
    else:
        steps.append(("To run the app", "node server.js"))
    return steps


def template_context(request: GenerationRequest) -> dict[str, Any]:
    """Jinja2 context shared by every rendered template."""
    return {
        "port": SERVER_PORT,
        "base_image": NODE_BASE_IMAGE,
        "gitignore_entries": list(GITIGNORE_ENTRIES),
        "startup_message": "Server running",
    }
