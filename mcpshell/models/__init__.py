"""Shared model base classes."""

from .base import MCPShellBaseModel


__all__ = ["MCPShellBaseModel"]
