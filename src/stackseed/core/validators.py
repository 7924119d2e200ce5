"""Validation of user-supplied project names and Python versions."""

from __future__ import annotations

import re

PROJECT_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")
PYTHON_VERSION_RE = re.compile(r"^[0-9]+\.[0-9]+(\.[0-9]+)?$")


def validate_project_name(name: str) -> bool:
    """A name starts with a letter and holds only letters, digits, ``-`` and ``_``."""
    return PROJECT_NAME_RE.fullmatch(name) is not None


def validate_python_version(version: str) -> bool:
    """Accepts ``X.Y`` and ``X.Y.Z``."""
    return PYTHON_VERSION_RE.fullmatch(version) is not None


def major_minor(version: str) -> str:
    """``3.14.2`` -> ``3.14``."""
    return ".".join(version.split(".")[:2])


def ruff_target_version(version: str) -> str:
    """``3.14.2`` -> ``py314``."""
    return "py" + major_minor(version).replace(".", "")
