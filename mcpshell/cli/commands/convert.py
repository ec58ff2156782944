"""Convert command for mcpshell CLI."""

from typing import Annotated

import typer

from mcpshell.cli.decorators import handle_errors
from mcpshell.cli.helpers import format_json
from mcpshell.conversion import convert_string_to_type
from mcpshell.core.logging import get_logger


logger = get_logger(__name__)


@handle_errors
def convert_command(
    value: Annotated[str, typer.Argument(help="Raw string value to convert")],
    param_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="Target type: string, number, integer or boolean",
        ),
    ] = "string",
    json_output: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Convert a raw string value to the given parameter type.

    Values starting with '-' must follow '--', e.g. mcpshell convert -t integer -- -5
    """
    result = convert_string_to_type(value, param_type)
    logger.debug("value_converted", param_type=param_type, result=result)

    if json_output:
        typer.echo(format_json(result))
    else:
        typer.echo(result)


def register_commands(app: typer.Typer) -> None:
    """Register convert command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="convert")(convert_command)
