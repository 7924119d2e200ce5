"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

from collections.abc import Callable
import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from stackseed.cli._types import ProjectKind
from stackseed.core.config import DEFAULT_PYTHON_VERSION
from stackseed.core.validators import validate_project_name, validate_python_version

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _text(
    question: str,
    validate: Callable[[str], bool],
    error: str,
    default: str | None = None,
) -> str:
    """Display a clack-style text prompt, asking again until *validate* accepts."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = f" [{default}] " if default else " "
    while True:
        _console.print("[dim]│[/]  ", end="")
        answer = input(suffix).strip() or (default or "")
        if validate(answer):
            break
        _console.print(f"[dim]│[/]  [bold red]✗[/] {error}")

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


def prompt_kind() -> ProjectKind:
    """Prompt user to choose a project layout."""
    kinds = list(ProjectKind)
    labels = [k.label for k in kinds]
    return _select("What are you building?", kinds, labels)


def prompt_project_name() -> str:
    """Prompt user for a project name until a valid one is entered."""
    return _text(
        "Project name",
        validate_project_name,
        "Invalid project name. Must start with a letter and contain only "
        "alphanumeric characters, hyphens, or underscores.",
    )


def prompt_python_version() -> str:
    """Prompt user for the Python version, defaulting to the fallback version."""
    return _text(
        "Python version",
        validate_python_version,
        "Invalid version format. Use X.Y or X.Y.Z.",
        default=DEFAULT_PYTHON_VERSION,
    )
