"""Output formatting model."""

from pydantic import ConfigDict, Field

from mcpshell.models.base import MCPShellBaseModel


class OutputConfig(MCPShellBaseModel):
    """How command output is decorated before being returned."""

    model_config = ConfigDict(str_strip_whitespace=False)

    prefix: str = Field(
        default="",
        description="Template prepended to command output; may use the command's template variables",
    )
