"""Command line interface for mcpshell."""

from mcpshell.cli.app import app, main
from mcpshell.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
