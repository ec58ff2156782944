"""Binding of raw command line arguments to declared parameters."""

from collections.abc import Mapping, Sequence

from mcpshell.config.models import ParamConfig
from mcpshell.conversion import convert_string_to_type
from mcpshell.core.errors import ConversionError, ParameterError
from mcpshell.core.logging import get_logger
from mcpshell.types import TypedValue


logger = get_logger(__name__)


def parse_key_value_args(args: Sequence[str]) -> dict[str, str]:
    """Split ``NAME=VALUE`` arguments into a mapping.

    Only the first ``=`` separates name from value, so values may contain
    ``=`` or be empty. A repeated name keeps its last value.

    Raises:
        ParameterError: If an argument has no ``=`` or an empty name
    """
    raw: dict[str, str] = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ParameterError(f"Invalid argument '{arg}': expected NAME=VALUE")
        raw[name] = value
    return raw


def bind_arguments(
    params: Mapping[str, ParamConfig], raw: Mapping[str, str]
) -> dict[str, TypedValue]:
    """Convert raw string arguments into typed values for the declared params.

    Args:
        params: Declared parameters by name
        raw: Raw string values by parameter name

    Returns:
        Typed values for every supplied parameter and every parameter with a
        default. Optional parameters without a default are left out.

    Raises:
        ParameterError: On unknown or missing parameters, or when a value
            cannot be converted to its declared type
    """
    unknown = sorted(name for name in raw if name not in params)
    if unknown:
        raise ParameterError(f"Unknown parameters: {', '.join(unknown)}")

    bound: dict[str, TypedValue] = {}
    missing: list[str] = []

    for name, param in params.items():
        if name in raw:
            try:
                bound[name] = convert_string_to_type(raw[name], param.param_type)
            except ConversionError as e:
                raise ParameterError(f"Invalid value for parameter '{name}': {e}") from e
        elif param.default is not None:
            bound[name] = param.default
            logger.debug("parameter_default_applied", param=name, value=param.default)
        elif param.required:
            missing.append(name)

    if missing:
        raise ParameterError(f"Missing required parameters: {', '.join(missing)}")

    logger.debug("arguments_bound", params=sorted(bound))
    return bound


__all__ = ["bind_arguments", "parse_key_value_args"]
