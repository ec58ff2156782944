"""Conversion of raw strings into typed parameter values.

Raw strings come from command line arguments or environment variables. The
accepted syntax is deliberately narrow:

- no surrounding whitespace is trimmed
- numbers use plain decimal or exponential notation (``1``, ``-2.5``,
  ``.5``, ``6.02e23``) plus ``inf``/``infinity``/``nan`` in any case
- integers are base 10 and must fit in a signed 64-bit range
- leading zeros are accepted, digit-group underscores and locale
  separators (``1,5``) are not
"""

import math
import re

from mcpshell.core.errors import ConversionError
from mcpshell.types import ParamType, TypedValue


TRUTHY_VALUES = frozenset({"true", "t", "yes", "y", "1"})
FALSY_VALUES = frozenset({"false", "f", "no", "n", "0"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE,
)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def convert_string_to_type(
    value: str, param_type: ParamType | str = ""
) -> TypedValue:
    """Convert a raw string to the value kind declared by ``param_type``.

    Args:
        value: The raw string, possibly empty
        param_type: A ParamType or one of ``"string"``, ``"number"``,
            ``"integer"``, ``"boolean"``; empty means ``"string"``

    Returns:
        The string unchanged, a float, an int or a bool

    Raises:
        ConversionError: If ``value`` is not valid for the type
        UnsupportedTypeError: If ``param_type`` is not recognized
    """
    kind = ParamType.parse(param_type)

    if kind is ParamType.STRING:
        return value
    if kind is ParamType.NUMBER:
        return _parse_number(value)
    if kind is ParamType.INTEGER:
        return _parse_integer(value)
    return _parse_boolean(value)


def _parse_number(value: str) -> float:
    if not _NUMBER_PATTERN.fullmatch(value):
        raise ConversionError(value, ParamType.NUMBER.value)

    result = float(value)
    # Finite literals too large for a double must not turn into infinity
    if math.isinf(result) and "inf" not in value.lower():
        raise ConversionError(value, ParamType.NUMBER.value, "value out of range")
    return result


def _parse_integer(value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ConversionError(value, ParamType.INTEGER.value)

    # int64 has at most 19 significant digits; longer strings may also exceed
    # int()'s digit limit, leading zeros included
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > INT64_DIGITS:
        raise ConversionError(value, ParamType.INTEGER.value, "value out of range")

    result = -int(digits) if value.startswith("-") else int(digits)
    if not INT64_MIN <= result <= INT64_MAX:
        raise ConversionError(value, ParamType.INTEGER.value, "value out of range")
    return result


def _parse_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in TRUTHY_VALUES:
        return True
    if lowered in FALSY_VALUES:
        return False
    raise ConversionError(value, ParamType.BOOLEAN.value)


__all__ = [
    "FALSY_VALUES",
    "INT64_MAX",
    "INT64_MIN",
    "TRUTHY_VALUES",
    "convert_string_to_type",
]
