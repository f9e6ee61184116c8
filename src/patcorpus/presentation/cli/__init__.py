"""Command line interface."""

from patcorpus.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
