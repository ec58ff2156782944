"""Core test fixtures for the mcpshell project."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from typer.testing import CliRunner


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Remove handlers installed by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


# ---- Configuration Fixtures ----


@pytest.fixture
def sample_params_data() -> dict[str, Any]:
    """Parameter declarations covering every type."""
    return {
        "params": {
            "name": {
                "type": "string",
                "description": "Name to greet",
                "required": True,
            },
            "count": {
                "type": "integer",
                "description": "Number of repetitions",
                "default": 3,
            },
            "ratio": {"type": "number", "description": "Scale factor"},
            "verbose": {"type": "boolean", "default": False},
        },
        "output": {"prefix": "Result: "},
    }


@pytest.fixture
def write_params_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing YAML (a mapping or raw text) to a temporary file."""

    def _write(content: dict[str, Any] | str, name: str = "tool.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def params_config_file(
    write_params_file: Callable[..., Path], sample_params_data: dict[str, Any]
) -> Path:
    """A valid parameter configuration file."""
    return write_params_file(sample_params_data)
