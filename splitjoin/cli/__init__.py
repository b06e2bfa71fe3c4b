"""splitjoin command line interface."""

from .main import cli, main

__all__ = ["main", "cli"]
