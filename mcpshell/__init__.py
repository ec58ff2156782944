"""mcpshell - typed parameter configuration for command line tools."""

from importlib.metadata import distribution

from .binding import bind_arguments, parse_key_value_args
from .config import (
    LoggingConfig,
    OutputConfig,
    ParamConfig,
    ParamsConfig,
    load_params_config,
)
from .conversion import convert_string_to_type
from .core.errors import (
    ConfigError,
    ConversionError,
    MCPShellError,
    OutputError,
    ParameterError,
    UnsupportedTypeError,
)
from .types import ParamType, TypedValue


__version__ = distribution(__package__ or "mcpshell").version

__all__ = [
    "ConfigError",
    "ConversionError",
    "LoggingConfig",
    "MCPShellError",
    "OutputConfig",
    "OutputError",
    "ParamConfig",
    "ParamType",
    "ParameterError",
    "ParamsConfig",
    "TypedValue",
    "UnsupportedTypeError",
    "__version__",
    "bind_arguments",
    "convert_string_to_type",
    "load_params_config",
    "parse_key_value_args",
]
