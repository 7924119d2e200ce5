"""Composition of ``.gitignore`` files from base and language templates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import importlib.resources as ilr
from importlib.resources.abc import Traversable
from pathlib import Path

BASE_TEMPLATE = "base"
TEMPLATE_SUFFIX = ".template"
BANNER_RULE = "# " + "-" * 50

TemplatesDir = Path | Traversable


class TemplateError(Exception):
    """Base class for template loading failures."""


class TemplateNotFoundError(TemplateError, FileNotFoundError):
    """Raised when a named template is missing from the templates directory."""

    def __init__(self, name: str, path: TemplatesDir) -> None:
        super().__init__(f"Template '{name}' not found at {path}")
        self.name = name
        self.path = path


class TemplateDecodeError(TemplateError, ValueError):
    """Raised when a template is not valid UTF-8."""

    def __init__(self, name: str, path: TemplatesDir, reason: str) -> None:
        super().__init__(f"Template '{name}' at {path} is not valid UTF-8: {reason}")
        self.name = name
        self.path = path


@dataclass(frozen=True)
class Template:
    """
    An immutable, ordered sequence of template lines.

    Attributes:
        name: Resource name the template was loaded from (``base``, ``python``...).
        lines: Lines of the template without line terminators.
    """

    name: str
    lines: tuple[str, ...]

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def prefixed(self, prefix: str) -> Template:
        return Template(self.name, tuple(prefix_line(line, prefix) for line in self.lines))


def default_templates_dir() -> Traversable:
    """Gitignore templates bundled with the package."""
    return ilr.files("stackseed").joinpath("templates").joinpath("gitignore")


def available_templates(templates_dir: TemplatesDir | None = None) -> list[str]:
    """Language template names found in *templates_dir*, base excluded."""
    root = templates_dir if templates_dir is not None else default_templates_dir()
    names = [
        entry.name.removesuffix(TEMPLATE_SUFFIX)
        for entry in root.iterdir()
        if entry.name.endswith(TEMPLATE_SUFFIX)
    ]
    return sorted(n for n in names if n != BASE_TEMPLATE)


def load_template(templates_dir: TemplatesDir, name: str) -> Template:
    """Read ``<name>.template`` from *templates_dir*.

    Raises:
        TemplateNotFoundError: If the resource does not exist.
        TemplateDecodeError: If the resource is not valid UTF-8.
    """
    resource = templates_dir.joinpath(f"{name}{TEMPLATE_SUFFIX}")
    if not resource.is_file():
        raise TemplateNotFoundError(name, resource)
    try:
        content = resource.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateDecodeError(name, resource, exc.reason) from exc

    # Only "\n" ends a line; form feeds and other separators stay inside the pattern.
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return Template(name, tuple(lines))


def prefix_line(line: str, prefix: str) -> str:
    """Prepend ``prefix/`` to *line* unless it is empty or a comment.

    The rule is purely syntactic: negation patterns such as ``!keep.txt`` become
    ``prefix/!keep.txt``.
    """
    if not line or line.startswith("#"):
        return line
    return f"{prefix}/{line}"


def banner(prefix: str, language: str) -> list[str]:
    title = prefix[:1].upper() + prefix[1:]
    return [BANNER_RULE, f"# {title} ({language})", BANNER_RULE]


def compose_single(templates_dir: TemplatesDir, language: str) -> str:
    """Base template, one blank line, then the *language* template."""
    base = load_template(templates_dir, BASE_TEMPLATE)
    lang = load_template(templates_dir, language)
    return base.render() + "\n" + lang.render()


def compose_fullstack(
    templates_dir: TemplatesDir,
    languages: Sequence[tuple[str, str]],
) -> str:
    """
    Compose a monorepo ``.gitignore`` from the base and several language templates.

    The base template is emitted unprefixed. Each ``(language, prefix)`` section
    follows in the given order, introduced by a blank line and a banner, with
    every pattern line rewritten under ``prefix/``.

    Args:
        templates_dir: Directory holding the ``*.template`` resources.
        languages: ``(language, prefix)`` pairs in output order.

    Raises:
        TemplateNotFoundError: If the base or any language template is missing.
            Nothing is rendered in that case.
        TemplateDecodeError: If a template is not valid UTF-8.
    """
    base = load_template(templates_dir, BASE_TEMPLATE)
    sections = [(load_template(templates_dir, lang), prefix) for lang, prefix in languages]

    parts = [base.render()]
    for template, prefix in sections:
        header = "".join(f"{line}\n" for line in ["", *banner(prefix, template.name)])
        parts.append(header + template.prefixed(prefix).render())
    return "".join(parts)
