"""Exception hierarchy for mcpshell."""

from typing import Any


class MCPShellError(Exception):
    """Base class for all mcpshell errors."""


class ConfigError(MCPShellError):
    """Configuration could not be loaded or is invalid."""


class UnsupportedTypeError(ConfigError, ValueError):
    """A parameter declares a type tag that is not recognized."""

    def __init__(self, param_type: Any) -> None:
        self.param_type = param_type
        super().__init__(f"unsupported parameter type: {param_type}")


class ConversionError(MCPShellError, ValueError):
    """A raw string does not match the syntax of its declared type."""

    def __init__(self, value: str, param_type: str, reason: str | None = None) -> None:
        self.value = value
        self.param_type = param_type
        self.reason = reason
        message = f"failed to parse '{value}' as {param_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParameterError(MCPShellError):
    """Arguments could not be bound to the declared parameters."""


class OutputError(MCPShellError):
    """A result cannot be written in the requested output format."""


__all__ = [
    "ConfigError",
    "ConversionError",
    "MCPShellError",
    "OutputError",
    "ParameterError",
    "UnsupportedTypeError",
]
