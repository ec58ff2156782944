"""Base model for all mcpshell Pydantic models.

Every configuration record inherits the same serialization behavior so that
values read from YAML round-trip through ``to_dict()`` without surprises.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MCPShellBaseModel(BaseModel):
    """Base model class for all mcpshell Pydantic models.

    ``to_dict()`` gives the JSON-compatible form of the explicitly set fields.
    """

    model_config = ConfigDict(
        # Unknown keys in config files are ignored
        extra="ignore",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")
