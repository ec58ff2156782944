"""Logging configuration and setup for mcpshell."""

import logging
import shutil
import sys
from collections.abc import MutableMapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from rich.console import Console
from rich.traceback import Traceback
from structlog.stdlib import BoundLogger
from structlog.typing import ExcInfo, Processor


if TYPE_CHECKING:
    from mcpshell.config.models.logging import LoggingConfig


def setup_logging_from_config(config: "LoggingConfig") -> BoundLogger:
    """Set up logging from a LoggingConfig's level and file."""
    return setup_logging(
        level=config.get_log_level_int(),
        log_file=str(config.file) if config.file else None,
    )


def _format_timestamp_ms(
    logger: Any, log_method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Format timestamp with milliseconds instead of microseconds."""
    if "timestamp_raw" in event_dict:
        timestamp_raw = event_dict.pop("timestamp_raw")
        event_dict["timestamp"] = timestamp_raw[:-3]
    return event_dict


def _callsite_adder() -> Processor:
    return structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO,
        ]
    )


def configure_structlog(log_level: int = logging.INFO) -> None:
    """Configure structlog with shared processors following canonical pattern."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if log_level < logging.INFO:
        processors.append(_callsite_adder())

    processors.extend(
        [
            structlog.processors.TimeStamper(
                fmt="%H:%M:%S.%f" if log_level < logging.INFO else "%Y-%m-%d %H:%M:%S.%f",
                key="timestamp_raw",
            ),
            _format_timestamp_ms,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            # Must stay last so each handler can pick its own renderer
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
    )

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def rich_traceback(sio: TextIO, exc_info: ExcInfo) -> None:
    """Pretty-print *exc_info* to *sio* using the *Rich* package.

    Based on:
    https://github.com/hynek/structlog/blob/74cdff93af217519d4ebea05184f5e0db2972556/src/structlog/dev.py#L179-L192

    """
    term_width, _height = shutil.get_terminal_size((80, 123))
    sio.write("\n")
    Console(file=sio, color_system="truecolor").print(
        Traceback.from_exception(
            *exc_info,
            extra_lines=1,
            width=term_width,
            max_frames=5,
            suppress=["click", "typer", "pydantic"],
        ),
    )


def setup_logging(
    level: int = logging.WARNING,
    log_file: str | None = None,
) -> BoundLogger:
    """
    Setup logging for the entire application using canonical structlog pattern.

    Console output goes to stderr so that command output on stdout stays
    machine readable. When ``log_file`` is given, records are also written
    there as JSON lines.

    Returns a structlog logger instance.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    configure_structlog(log_level=level)

    root_logger.handlers = []

    # Processors applied to records coming from plain stdlib loggers
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.dev.set_exc_info,
    ]
    if level < logging.INFO:
        shared_processors.append(_callsite_adder())

    console_timestamper = structlog.processors.TimeStamper(
        fmt="%H:%M:%S.%f" if level < logging.INFO else "%Y-%m-%d %H:%M:%S.%f",
        key="timestamp_raw",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_renderer = structlog.dev.ConsoleRenderer(exception_formatter=rich_traceback)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors
            + [console_timestamper, _format_timestamp_ms],
            processor=console_renderer,
        )
    )
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors
                + [structlog.processors.TimeStamper(fmt="iso")],
                processor=structlog.processors.JSONRenderer(),
            )
        )
        root_logger.addHandler(file_handler)

    return structlog.get_logger()  # type: ignore[no-any-return]


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a structlog logger instance.

    For exception logging with debug stack traces, use this pattern::

        try:
            ...
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
