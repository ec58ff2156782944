"""Parameter declaration models."""

import re
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from mcpshell.config.models.logging import LoggingConfig
from mcpshell.config.models.output import OutputConfig
from mcpshell.conversion import INT64_MAX, INT64_MIN, convert_string_to_type
from mcpshell.models.base import MCPShellBaseModel
from mcpshell.types import ParamType, TypedValue


PARAM_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class ParamConfig(MCPShellBaseModel):
    """Declaration of a single tool parameter."""

    # Defaults are data, keep their whitespace
    model_config = ConfigDict(str_strip_whitespace=False)

    type: ParamType = Field(
        default=ParamType.STRING,
        description="Parameter type: string (default), number, integer or boolean",
    )
    description: str = Field(
        default="", description="Information about the parameter's purpose"
    )
    required: bool = Field(
        default=False, description="Whether the parameter must be provided"
    )
    default: TypedValue | None = Field(
        default=None, description="Value used when the parameter is not provided"
    )

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> ParamType:
        """Resolve the type tag, treating an empty tag as string."""
        return ParamType.parse(v)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @model_validator(mode="after")
    def validate_default(self) -> "ParamConfig":
        """Check the default value against the declared type.

        Runs on construction and on every assignment, so changing ``type``
        re-checks a default that is already set.
        """
        if self.default is not None:
            # Written through __dict__ to avoid re-entering assignment validation
            self.__dict__["default"] = _coerce_default(self.default, self.param_type)
        return self

    @property
    def param_type(self) -> ParamType:
        """The declared type as a ParamType member."""
        return ParamType.parse(self.type)

    @property
    def has_default(self) -> bool:
        return self.default is not None


def _coerce_default(value: Any, kind: ParamType) -> TypedValue:
    """Bring a default value in line with its parameter type.

    String defaults for non-string types go through the same conversion as
    command line input. Native YAML values must already be of the right kind.
    """
    if isinstance(value, str):
        return convert_string_to_type(value, kind)

    if kind is ParamType.NUMBER:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                raise ValueError(
                    f"default value {value!r} is not a valid number"
                ) from None
    elif kind is ParamType.INTEGER:
        if isinstance(value, int) and not isinstance(value, bool):
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(
                    f"default value {value!r} is out of the signed 64-bit range"
                )
            return value
    elif kind is ParamType.BOOLEAN:
        if isinstance(value, bool):
            return value

    raise ValueError(f"default value {value!r} is not a valid {kind.value}")


class ParamsConfig(MCPShellBaseModel):
    """Parameter declarations together with output and logging settings."""

    params: dict[str, ParamConfig] = Field(
        default_factory=dict, description="Declared parameters by name"
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig, description="Output formatting"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging settings"
    )

    @model_validator(mode="before")
    @classmethod
    def drop_empty_sections(cls, data: Any) -> Any:
        """Treat empty YAML sections (``params:`` with no body) as absent."""
        if not isinstance(data, dict):
            return data

        data = {key: value for key, value in data.items() if value is not None}
        params = data.get("params")
        if isinstance(params, dict):
            data["params"] = {
                name: {} if body is None else body for name, body in params.items()
            }
        return data

    @field_validator("params")
    @classmethod
    def validate_param_names(
        cls, v: dict[str, ParamConfig]
    ) -> dict[str, ParamConfig]:
        invalid = [name for name in v if not PARAM_NAME_PATTERN.fullmatch(name)]
        if invalid:
            raise ValueError(
                f"Invalid parameter names {invalid}: use letters, digits, '_' or '-'"
            )
        return v

    def required_params(self) -> list[str]:
        """Names of required parameters, in declaration order."""
        return [name for name, param in self.params.items() if param.required]
