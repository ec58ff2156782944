"""CLI command modules."""

import typer

from mcpshell.cli.commands.convert import register_commands as register_convert_commands
from mcpshell.cli.commands.params import register_commands as register_params_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_convert_commands(app)
    register_params_commands(app)
