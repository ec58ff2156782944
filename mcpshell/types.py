"""Parameter type tags and the values they convert to."""

from enum import Enum

from mcpshell.core.errors import UnsupportedTypeError


# Values a parameter can hold once converted. bool precedes int so that
# pydantic's union matching keeps YAML booleans as booleans.
TypedValue = bool | int | float | str


class ParamType(str, Enum):
    """Recognized parameter type tags."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    @classmethod
    def parse(cls, tag: "ParamType | str | None") -> "ParamType":
        """Resolve a declared type tag.

        An empty or missing tag means ``string``. Tags are matched exactly.

        Raises:
            UnsupportedTypeError: If the tag is not one of the recognized types
        """
        if isinstance(tag, cls):
            return tag
        if tag is None or tag == "":
            return cls.STRING
        try:
            return cls(tag)
        except ValueError:
            raise UnsupportedTypeError(tag) from None


__all__ = ["ParamType", "TypedValue"]
