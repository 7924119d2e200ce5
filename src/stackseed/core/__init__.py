"""Core building blocks: gitignore composition, validation and generated files."""

from stackseed.core.composer import (
    Template,
    TemplateDecodeError,
    TemplateError,
    TemplateNotFoundError,
    available_templates,
    compose_fullstack,
    compose_single,
    default_templates_dir,
    load_template,
    prefix_line,
)
from stackseed.core.config import DEFAULT_PYTHON_VERSION, ScaffoldConfig, ToolingConfig
from stackseed.core.validators import validate_project_name, validate_python_version

__all__ = [
    "DEFAULT_PYTHON_VERSION",
    "ScaffoldConfig",
    "Template",
    "TemplateDecodeError",
    "TemplateError",
    "TemplateNotFoundError",
    "ToolingConfig",
    "available_templates",
    "compose_fullstack",
    "compose_single",
    "default_templates_dir",
    "load_template",
    "prefix_line",
    "validate_project_name",
    "validate_python_version",
]
