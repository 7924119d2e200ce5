"""Configuration dataclasses for scaffolded projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from stackseed.core.validators import (
    major_minor,
    ruff_target_version,
    validate_project_name,
    validate_python_version,
)

ProjectKindName = Literal["python", "nextjs", "fullstack"]

DEFAULT_PYTHON_VERSION = "3.13"
DEFAULT_LINT_SELECT: tuple[str, ...] = ("E", "W", "F", "I", "B", "C4", "UP", "RUF")


@dataclass(kw_only=True)
class ToolingConfig:
    """
    Python tooling written into the generated ``pyproject.toml``.

    Attributes:
        python_version: Interpreter version, ``X.Y`` or ``X.Y.Z``.
        line_length: Ruff line length.
        lint_select: Ruff rule families to enable.
        strict_mypy: Whether mypy runs in strict mode.
    """

    python_version: str = DEFAULT_PYTHON_VERSION
    line_length: int = 88
    lint_select: tuple[str, ...] = DEFAULT_LINT_SELECT
    strict_mypy: bool = True

    def __post_init__(self) -> None:
        if not validate_python_version(self.python_version):
            raise ValueError(
                f"python_version must look like X.Y or X.Y.Z, got {self.python_version!r}."
            )
        if self.line_length <= 0:
            raise ValueError(f"line_length must be positive, got {self.line_length}.")

    @property
    def ruff_target(self) -> str:
        return ruff_target_version(self.python_version)

    @property
    def major_minor(self) -> str:
        return major_minor(self.python_version)


@dataclass(kw_only=True)
class ScaffoldConfig:
    """
    Everything needed to render a new project.

    Attributes:
        project_name: Directory and package name of the project.
        kind: Project layout, ``python``, ``nextjs`` or ``fullstack``.
        tooling: Python tooling for python and fullstack projects.
        node_version: Pinned Node.js version written to ``.nvmrc``, if any.
    """

    project_name: str
    kind: ProjectKindName
    tooling: ToolingConfig = field(default_factory=ToolingConfig)
    node_version: str | None = None

    def __post_init__(self) -> None:
        if not validate_project_name(self.project_name):
            raise ValueError(
                f"Invalid project name {self.project_name!r}. Must start with a letter and "
                "contain only alphanumeric characters, hyphens, or underscores."
            )
        if self.node_version is not None and not self.node_version.strip():
            raise ValueError("node_version must not be empty.")
