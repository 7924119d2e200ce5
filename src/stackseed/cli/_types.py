"""Enums for CLI options."""

from enum import Enum


class ProjectKind(str, Enum):
    """Available project layouts."""

    PYTHON = "python"
    NEXTJS = "nextjs"
    FULLSTACK = "fullstack"

    @property
    def label(self) -> str:
        labels: dict[ProjectKind, str] = {
            ProjectKind.PYTHON: "Python",
            ProjectKind.NEXTJS: "Next.js",
            ProjectKind.FULLSTACK: "Fullstack (Python + Next.js)",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ProjectKind, str] = {
            ProjectKind.PYTHON: "uv-managed app with ruff, mypy and pytest configured.",
            ProjectKind.NEXTJS: "Next.js app with Prettier, ESLint and a pinned Node version.",
            ProjectKind.FULLSTACK: "Monorepo with backend/ (Python) and frontend/ (Next.js).",
        }
        return descriptions[self]


class Language(str, Enum):
    """Languages with a bundled gitignore template."""

    PYTHON = "python"
    NEXTJS = "nextjs"

    @property
    def subdir(self) -> str:
        """Directory the language lives in within a fullstack project."""
        subdirs: dict[Language, str] = {
            Language.PYTHON: "backend",
            Language.NEXTJS: "frontend",
        }
        return subdirs[self]
