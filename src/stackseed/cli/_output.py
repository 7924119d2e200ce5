"""Status-line output for long-running CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console


@dataclass(frozen=True)
class OutputStyle:
    """Formatting options passed explicitly to the reporter."""

    color: bool = True


class Reporter:
    """Prints header, step, success, warning and error lines."""

    def __init__(self, style: OutputStyle | None = None) -> None:
        self.style = style or OutputStyle()
        self.console = Console(no_color=not self.style.color, highlight=False)
        self.err_console = Console(stderr=True, no_color=not self.style.color, highlight=False)

    def header(self, title: str) -> None:
        self.console.print()
        self.console.print(f"[bold cyan]{title}[/]")
        self.console.print("=" * 50)

    def step(self, message: str) -> None:
        self.console.print(f"[blue]➜[/] {message}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/] {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/] {message}")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]✗[/] {message}")
