"""Configuration models."""

from .logging import LoggingConfig
from .output import OutputConfig
from .params import ParamConfig, ParamsConfig


__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "ParamConfig",
    "ParamsConfig",
]
