"""Typer CLI application for stackseed."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
import typer
from typer import Argument, Exit, Option, Typer

import stackseed
from stackseed.cli._output import OutputStyle, Reporter
from stackseed.cli._prompts import prompt_kind, prompt_project_name, prompt_python_version
from stackseed.cli._renderer import render_project
from stackseed.cli._types import Language, ProjectKind
from stackseed.core.composer import (
    TemplateError,
    TemplateNotFoundError,
    available_templates,
    compose_fullstack,
    compose_single,
    default_templates_dir,
)
from stackseed.core.config import ScaffoldConfig, ToolingConfig
from stackseed.core.validators import validate_project_name, validate_python_version

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """stackseed: scaffolding tool for Python, Next.js and fullstack projects."""


_NEXT_STEPS: dict[ProjectKind, list[str]] = {
    ProjectKind.PYTHON: ["uv sync", "uv run pytest"],
    ProjectKind.NEXTJS: ["npx create-next-app@latest . --ts --eslint --app", "npm run dev"],
    ProjectKind.FULLSTACK: [
        "cd backend && uv sync",
        "cd frontend && npx create-next-app@latest . --ts --eslint --app",
    ],
}


def _print_kinds() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available project kinds")
    _console.print("[dim]│[/]")
    for k in ProjectKind:
        _console.print(f"[dim]│[/]  [bold cyan]{k.value:<12}[/] [bold]{k.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{k.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_kinds_callback(value: bool) -> None:
    if value:
        _print_kinds()
        raise Exit()


def _parse_prefixes(values: list[str]) -> dict[str, str]:
    prefixes: dict[str, str] = {}
    for value in values:
        lang, sep, subdir = value.partition("=")
        if not sep or not lang or not subdir:
            raise typer.BadParameter(f"expected LANGUAGE=DIR, got {value!r}", param_hint="--prefix")
        subdir = subdir.strip("/")
        if not subdir:
            raise typer.BadParameter(f"empty directory in {value!r}", param_hint="--prefix")
        prefixes[lang] = subdir
    return prefixes


def _default_prefix(language: str) -> str | None:
    try:
        return Language(language).subdir
    except ValueError:
        return None


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(help="Name for the new project directory", show_default=False),
    ] = None,
    kind_str: Annotated[
        str | None,
        Option(
            "--kind",
            "-k",
            help="Project kind. Run with --list-kinds / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    python_version: Annotated[
        str | None,
        Option("--python-version", "-p", help="Python version (X.Y or X.Y.Z)", show_default=False),
    ] = None,
    node_version: Annotated[
        str | None,
        Option("--node-version", "-n", help="Node.js version to pin in .nvmrc", show_default=False),
    ] = None,
    no_color: Annotated[bool, Option("--no-color", help="Disable colored output.")] = False,
    list_kinds: Annotated[
        bool,
        Option(
            "--list-kinds",
            "-l",
            help="List all available project kinds and exit.",
            callback=_list_kinds_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new project directory with its generated files."""
    reporter = Reporter(OutputStyle(color=not no_color))

    kind: ProjectKind | None = None
    if kind_str is not None:
        try:
            kind = ProjectKind(kind_str)
        except ValueError:
            valid = ", ".join(f"'{k.value}'" for k in ProjectKind)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{kind_str!r}[/] is not a valid project kind."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_kinds()
            raise Exit(code=2) from None

    if project_name is not None and not validate_project_name(project_name):
        reporter.error(
            f"Invalid project name '{project_name}'. Must start with a letter and contain "
            "only alphanumeric characters, hyphens, or underscores."
        )
        raise Exit(code=1)

    if python_version is not None and not validate_python_version(python_version):
        reporter.error(f"Invalid Python version '{python_version}'. Use X.Y or X.Y.Z.")
        raise Exit(code=1)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  stackseed v{stackseed.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if project_name is None:
        project_name = prompt_project_name()

    project_dir = Path(project_name)
    if project_dir.exists():
        reporter.error(f"Directory '{project_name}' already exists.")
        raise Exit(code=1)

    if kind is None:
        kind = prompt_kind()
    else:
        _console.print("[bold green]◇[/]  What are you building?")
        _console.print(f"[dim]│[/]  {kind.label}")
        _console.print("[dim]│[/]")

    if kind != ProjectKind.NEXTJS and python_version is None:
        python_version = prompt_python_version()

    try:
        tooling = (
            ToolingConfig(python_version=python_version) if python_version else ToolingConfig()
        )
        config = ScaffoldConfig(
            project_name=project_dir.name,
            kind=kind.value,
            tooling=tooling,
            node_version=node_version,
        )
    except ValueError as exc:
        reporter.error(str(exc))
        raise Exit(code=1) from None

    # Render
    reporter.header(f"Creating {project_name}/ ({kind.label})")
    reporter.step("Generating files...")
    if kind != ProjectKind.PYTHON and node_version is None:
        reporter.warning("No Node.js version given, skipping .nvmrc and .node-version")
    try:
        created = render_project(project_dir, config)
    except TemplateError as exc:
        reporter.error(str(exc))
        raise Exit(code=1) from None

    for name in created:
        reporter.success(name)

    _console.print()
    _console.print(f"[bold cyan]●[/]  Done! Next steps in {project_name}/:")
    for command in _NEXT_STEPS[kind]:
        _console.print(f"[dim]│[/]  {command}")
    _console.print()


@app.command()
def gitignore(
    languages: Annotated[
        list[str],
        Argument(help="Language templates to include, in output order", show_default=False),
    ],
    fullstack: Annotated[
        bool,
        Option("--fullstack", "-f", help="Prefix each language section with its subdirectory."),
    ] = False,
    prefix: Annotated[
        list[str] | None,
        Option(
            "--prefix", "-P", help="Override a subdirectory as LANGUAGE=DIR.", show_default=False
        ),
    ] = None,
    templates_dir: Annotated[
        Path | None,
        Option(
            "--templates-dir",
            "-T",
            help="Directory holding *.template files. Defaults to the bundled templates.",
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        Option("--output", "-o", help="Write to this file instead of stdout.", show_default=False),
    ] = None,
) -> None:
    """Compose a .gitignore from the base template and language templates."""
    tdir = templates_dir if templates_dir is not None else default_templates_dir()

    if not fullstack and len(languages) != 1:
        raise typer.BadParameter(
            "exactly one language is required without --fullstack", param_hint="LANGUAGES"
        )
    if not fullstack and prefix:
        raise typer.BadParameter("only valid together with --fullstack", param_hint="--prefix")

    try:
        if fullstack:
            overrides = _parse_prefixes(prefix or [])
            sections: list[tuple[str, str]] = []
            for lang in languages:
                subdir = overrides.get(lang) or _default_prefix(lang)
                if subdir is None:
                    raise typer.BadParameter(
                        f"no default subdirectory for {lang!r}, pass --prefix {lang}=DIR",
                        param_hint="--prefix",
                    )
                sections.append((lang, subdir))
            text = compose_fullstack(tdir, sections)
        else:
            text = compose_single(tdir, languages[0])
    except TemplateNotFoundError as exc:
        _console.print(f"[bold red]Error:[/] {exc}")
        if tdir.is_dir():
            valid = ", ".join(f"'{name}'" for name in available_templates(tdir))
            _console.print(f"[dim]Available templates:[/] {valid or 'none'}")
        raise Exit(code=1) from None
    except TemplateError as exc:
        _console.print(f"[bold red]Error:[/] {exc}")
        raise Exit(code=1) from None

    if output is None:
        typer.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")
        _console.print(f"[bold green]◇[/]  Wrote {output}")
