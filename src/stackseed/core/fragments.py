"""Text of the small files generated alongside a new project."""

from __future__ import annotations

import importlib.resources as ilr

from stackseed.core.config import ToolingConfig


def _read(*parts: str) -> str:
    resource = ilr.files("stackseed").joinpath("templates")
    for part in parts:
        resource = resource.joinpath(part)
    return resource.read_text(encoding="utf-8")


def tool_config(tooling: ToolingConfig) -> str:
    """The ``[tool.*]`` block appended to a generated ``pyproject.toml``."""
    select = ", ".join(f'"{rule}"' for rule in tooling.lint_select)
    strict = "true" if tooling.strict_mypy else "false"

    return f"""\

# --------------------------------------------------
# Tool Configuration
# --------------------------------------------------

[tool.ruff]
target-version = "{tooling.ruff_target}"
line-length = {tooling.line_length}

[tool.ruff.lint]
select = [{select}]

[tool.mypy]
python_version = "{tooling.major_minor}"
strict = {strict}

[tool.pytest.ini_options]
testpaths = ["tests"]
"""


def pyproject_toml(project_name: str, tooling: ToolingConfig) -> str:
    """Generate a minimal pyproject.toml for the scaffolded project."""
    return (
        f"""\
[project]
name = "{project_name}"
version = "0.1.0"
requires-python = ">={tooling.major_minor}"
dependencies = []

[dependency-groups]
dev = [
    "mypy",
    "pytest",
    "ruff",
]
"""
        + tool_config(tooling)
    )


def conftest_py() -> str:
    return '''\
"""
pytest configuration file

Add src directory to Python path so that tests can import src modules.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
'''


def env_example() -> str:
    return """\
# ==================================================
# Environment Variables
# ==================================================
# Copy this file to .env.local and fill in your values
# NEVER commit .env.local to version control

# --------------------------------------------------
# Application
# --------------------------------------------------
# NEXT_PUBLIC_APP_URL=http://localhost:3000

# --------------------------------------------------
# Database (Example)
# --------------------------------------------------
# DATABASE_URL=

# --------------------------------------------------
# Authentication (Example)
# --------------------------------------------------
# NEXTAUTH_SECRET=
# NEXTAUTH_URL=http://localhost:3000
"""


def prettier_config() -> str:
    return """\
{
    "semi": true,
    "singleQuote": true,
    "tabWidth": 4,
    "trailingComma": "es5",
    "printWidth": 100
}
"""


def vscode_settings(kind: str) -> str:
    """Bundled ``.vscode/settings.json`` for a project kind."""
    return _read("vscode", f"{kind}.settings.json")
