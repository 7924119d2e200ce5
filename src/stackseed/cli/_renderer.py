"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

from pathlib import Path

from stackseed.cli._types import Language, ProjectKind
from stackseed.core.composer import (
    TemplatesDir,
    compose_fullstack,
    compose_single,
    default_templates_dir,
)
from stackseed.core.config import ScaffoldConfig
from stackseed.core.fragments import (
    conftest_py,
    env_example,
    prettier_config,
    pyproject_toml,
    vscode_settings,
)


def _python_files(config: ScaffoldConfig, package_name: str) -> dict[str, str]:
    return {
        "pyproject.toml": pyproject_toml(package_name, config.tooling),
        "src/__init__.py": "",
        "tests/__init__.py": "",
        "tests/conftest.py": conftest_py(),
    }


def _nextjs_files(config: ScaffoldConfig) -> dict[str, str]:
    files = {
        ".env.example": env_example(),
        ".prettierrc": prettier_config(),
    }
    if config.node_version is not None:
        files[".nvmrc"] = f"{config.node_version}\n"
        files[".node-version"] = f"{config.node_version}\n"
    return files


def _nested(subdir: str, files: dict[str, str]) -> dict[str, str]:
    return {f"{subdir}/{name}": content for name, content in files.items()}


def build_files(
    config: ScaffoldConfig, templates_dir: TemplatesDir | None = None
) -> dict[str, str]:
    """Build every generated file in memory. Keys are paths relative to the project root."""
    tdir = templates_dir if templates_dir is not None else default_templates_dir()
    kind = ProjectKind(config.kind)

    files: dict[str, str] = {}
    if kind == ProjectKind.FULLSTACK:
        languages = [(lang.value, lang.subdir) for lang in (Language.PYTHON, Language.NEXTJS)]
        files[".gitignore"] = compose_fullstack(tdir, languages)
        files[".vscode/settings.json"] = vscode_settings(kind.value)
        backend = _python_files(config, f"{config.project_name}-{Language.PYTHON.subdir}")
        files.update(_nested(Language.PYTHON.subdir, backend))
        files.update(_nested(Language.NEXTJS.subdir, _nextjs_files(config)))
    else:
        files[".gitignore"] = compose_single(tdir, kind.value)
        files[".vscode/settings.json"] = vscode_settings(kind.value)
        if kind == ProjectKind.PYTHON:
            files.update(_python_files(config, config.project_name))
        else:
            files.update(_nextjs_files(config))
    return files


def render_project(
    project_dir: Path,
    config: ScaffoldConfig,
    templates_dir: TemplatesDir | None = None,
) -> list[str]:
    """Render a project's generated files to disk. Returns list of created file names.

    All content is built before *project_dir* is created, so a missing template
    leaves nothing behind.

    Raises:
        FileExistsError: If *project_dir* already exists.
        TemplateError: If a gitignore template is missing or unreadable.
    """
    files = build_files(config, templates_dir)

    project_dir.mkdir(parents=True)
    for name, content in files.items():
        path = project_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    return list(files)
