"""Shared fixtures for the stackseed test suite."""

from pathlib import Path

import pytest

BASE = """\
# Base
.env
*.pem

# OS
.DS_Store
"""

PYTHON = """\
# Python
__pycache__/
*.py[cod]

!keep.py
.venv/
"""

NEXTJS = """\
# Next.js
node_modules/
.next/
"""


@pytest.fixture
def texts() -> dict[str, str]:
    return {"base": BASE, "python": PYTHON, "nextjs": NEXTJS}


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir()
    (root / "base.template").write_text(BASE, encoding="utf-8")
    (root / "python.template").write_text(PYTHON, encoding="utf-8")
    (root / "nextjs.template").write_text(NEXTJS, encoding="utf-8")
    return root
