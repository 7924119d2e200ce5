"""Tests for stackseed.core.fragments — generated file contents."""

import json

import pytest

from stackseed.core.config import ToolingConfig
from stackseed.core.fragments import (
    conftest_py,
    env_example,
    prettier_config,
    pyproject_toml,
    tool_config,
    vscode_settings,
)


class TestToolConfig:
    def test_versions(self):
        text = tool_config(ToolingConfig(python_version="3.14.2"))
        assert 'target-version = "py314"' in text
        assert 'python_version = "3.14"' in text
        assert "line-length = 88" in text
        assert "strict = true" in text

    def test_lint_select(self):
        text = tool_config(ToolingConfig(lint_select=("E", "F")))
        assert 'select = ["E", "F"]' in text

    def test_non_strict(self):
        assert "strict = false" in tool_config(ToolingConfig(strict_mypy=False))


class TestPyprojectToml:
    def test_project_table(self):
        text = pyproject_toml("demo", ToolingConfig(python_version="3.13"))
        assert text.startswith("[project]\n")
        assert 'name = "demo"' in text
        assert 'requires-python = ">=3.13"' in text
        assert "[tool.ruff]" in text
        assert '"pytest"' in text


class TestStaticFragments:
    def test_env_example_is_all_comments(self):
        for line in env_example().splitlines():
            assert line == "" or line.startswith("#")

    def test_prettier_is_json(self):
        assert json.loads(prettier_config())["printWidth"] == 100

    def test_conftest_compiles(self):
        compile(conftest_py(), "conftest.py", "exec")

    @pytest.mark.parametrize("kind", ["python", "nextjs", "fullstack"])
    def test_vscode_settings_are_json(self, kind: str):
        settings = json.loads(vscode_settings(kind))
        assert settings["editor.formatOnSave"] is True
