"""Command-line interface for fiber-gen."""

from fibergen.cli.app import app

__all__ = ["app"]
