"""Command line interface for Profile List."""

from profile_list.cli.main import cli

__all__ = ["cli"]
