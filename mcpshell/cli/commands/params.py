"""Parameter declaration commands for mcpshell CLI."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from mcpshell.binding import bind_arguments, parse_key_value_args
from mcpshell.cli.app import AppContext
from mcpshell.cli.decorators import handle_errors
from mcpshell.cli.helpers import format_json
from mcpshell.config.loader import load_params_config
from mcpshell.core.logging import get_logger, setup_logging_from_config


logger = get_logger(__name__)

params_app = typer.Typer(
    name="params",
    help="Inspect parameter declarations and bind arguments to them",
    no_args_is_help=True,
)

ConfigFileArgument = Annotated[
    Path,
    typer.Argument(
        help="YAML file declaring the parameters",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]


@params_app.command(name="show")
@handle_errors
def show_params(config_file: ConfigFileArgument) -> None:
    """Show the parameters declared in a configuration file."""
    config = load_params_config(config_file)

    if not config.params:
        typer.echo(f"No parameters declared in {config_file}")
        return

    table = Table(title=f"Parameters: {config_file.name}", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Required")
    table.add_column("Default")
    table.add_column("Description")

    for name, param in config.params.items():
        table.add_row(
            name,
            param.param_type.value,
            "yes" if param.required else "no",
            "" if param.default is None else repr(param.default),
            param.description,
        )

    Console(width=120).print(table)
    if config.output.prefix:
        typer.echo(f"Output prefix: {config.output.prefix}")


@params_app.command(name="bind")
@handle_errors
def bind_params(
    ctx: typer.Context,
    config_file: ConfigFileArgument,
    arguments: Annotated[
        list[str] | None,
        typer.Argument(help="Arguments as NAME=VALUE pairs"),
    ] = None,
) -> None:
    """Convert NAME=VALUE arguments to typed values and print them as JSON."""
    config = load_params_config(config_file)

    app_context = ctx.obj if isinstance(ctx.obj, AppContext) else None
    if "logging" in config.model_fields_set and not (
        app_context and app_context.logging_overridden
    ):
        setup_logging_from_config(config.logging)

    raw = parse_key_value_args(arguments or [])
    bound = bind_arguments(config.params, raw)
    logger.info("parameters_bound", config=str(config_file), count=len(bound))

    typer.echo(format_json(bound, indent=2))


def register_commands(app: typer.Typer) -> None:
    """Register params commands with the main app."""
    app.add_typer(params_app, name="params")
