"""Configuration models and loading."""

from mcpshell.config.loader import load_params_config
from mcpshell.config.models import (
    LoggingConfig,
    OutputConfig,
    ParamConfig,
    ParamsConfig,
)


__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "ParamConfig",
    "ParamsConfig",
    "load_params_config",
]
