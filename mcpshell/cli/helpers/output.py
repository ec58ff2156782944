"""Helper functions for CLI output formatting."""

import json
from typing import Any

from mcpshell.core.errors import OutputError


def format_json(data: Any, indent: int | None = None) -> str:
    """Serialize command output as strict JSON.

    Args:
        data: Value to serialize
        indent: Optional indentation for pretty printing

    Returns:
        JSON text

    Raises:
        OutputError: If ``data`` holds NaN or infinite numbers, which JSON
            cannot represent
    """
    try:
        return json.dumps(data, indent=indent, allow_nan=False)
    except ValueError as e:
        raise OutputError(f"Cannot write {data!r} as JSON: {e}") from e
