"""Main CLI application for mcpshell."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer
from pydantic import ValidationError

from mcpshell.cli.decorators.error_handling import print_stack_trace_if_verbose
from mcpshell.config.models import LoggingConfig
from mcpshell.core.logging import get_logger, setup_logging


__all__ = ["app", "main", "__version__", "setup_logging"]


__version__ = distribution("mcpshell").version

logger = get_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        debug: bool = False,
        log_file: str | None = None,
        log_level: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            debug: Whether debug logging was requested
            log_file: Path to log file
            log_level: Explicit log level name
        """
        self.verbose = verbose
        self.debug = debug
        self.log_file = log_file
        self.log_level = log_level

    @property
    def logging_overridden(self) -> bool:
        """Whether logging was configured from the command line or environment."""
        return bool(self.verbose or self.debug or self.log_file or self.log_level)

    def resolve_log_level(self) -> int:
        """Log level from flags, then ``--log-level``, then WARNING."""
        if self.debug or self.verbose >= 2:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        if self.log_level:
            try:
                return LoggingConfig(level=self.log_level).get_log_level_int()
            except ValidationError as e:
                raise typer.BadParameter(
                    f"Invalid log level: {self.log_level}", param_hint="--log-level"
                ) from e
        return logging.WARNING


app = typer.Typer(
    name="mcpshell",
    help=f"""mcpshell v{__version__}

Typed parameters for command line tools: declare parameters in YAML and
convert raw string arguments into strings, numbers, integers and booleans.

Common workflows:
  • Convert a value:     mcpshell convert 42 --type integer
  • Inspect parameters:  mcpshell params show tool.yaml
  • Bind arguments:      mcpshell params bind tool.yaml count=3 verbose=yes""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None,
        typer.Option("--log-file", envvar="MCPSHELL_LOG_FILE", help="Log to file"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            envvar="MCPSHELL_LOG_LEVEL",
            help="Log level (debug, info, warning, error, critical)",
        ),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """mcpshell typed parameter tool."""
    if version:
        print(f"mcpshell v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, debug=debug, log_file=log_file, log_level=log_level
    )
    ctx.obj = app_context

    setup_logging(level=app_context.resolve_log_level(), log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        print_stack_trace_if_verbose()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
