"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from mcpshell.core.errors import (
    ConfigError,
    ConversionError,
    OutputError,
    ParameterError,
    UnsupportedTypeError,
)
from mcpshell.core.logging import get_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Known errors are logged as structured events and turned into exit
    status 1. Anything else is logged as unexpected, with a traceback when
    debug logging is enabled.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConversionError as e:
            logger.error(
                "conversion_error",
                error=str(e),
                value=e.value,
                param_type=e.param_type,
            )
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except UnsupportedTypeError as e:
            logger.error("unsupported_type", error=str(e), param_type=e.param_type)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ParameterError as e:
            logger.error("parameter_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except OutputError as e:
            logger.error("output_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except FileNotFoundError as e:
            logger.error("file_not_found", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
