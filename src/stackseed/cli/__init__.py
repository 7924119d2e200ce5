"""Command-line interface for stackseed."""

from stackseed.cli.app import app

__all__ = ["app"]
