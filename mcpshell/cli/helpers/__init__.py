"""CLI helper functions."""

from mcpshell.cli.helpers.output import format_json


__all__ = ["format_json"]
