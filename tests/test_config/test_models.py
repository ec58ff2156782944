"""Tests for configuration models.

Covers ParamConfig type and default validation, OutputConfig and
LoggingConfig field handling, and the ParamsConfig document model.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from mcpshell.config.models import (
    LoggingConfig,
    OutputConfig,
    ParamConfig,
    ParamsConfig,
)
from mcpshell.types import ParamType


class TestParamType:
    """Tests for ParamType.parse()."""

    @pytest.mark.parametrize("tag", ["", None])
    def test_empty_tag_is_string(self, tag):
        assert ParamType.parse(tag) is ParamType.STRING

    def test_member_passes_through(self):
        assert ParamType.parse(ParamType.BOOLEAN) is ParamType.BOOLEAN

    def test_known_tags(self):
        assert ParamType.parse("number") is ParamType.NUMBER
        assert ParamType.parse("integer") is ParamType.INTEGER


class TestParamConfig:
    """Tests for ParamConfig model."""

    def test_default_values(self):
        param = ParamConfig()

        assert param.param_type is ParamType.STRING
        assert param.description == ""
        assert param.required is False
        assert param.default is None
        assert param.has_default is False

    def test_empty_type_defaults_to_string(self):
        assert ParamConfig(type="").param_type is ParamType.STRING
        assert ParamConfig(type=None).param_type is ParamType.STRING

    def test_valid_type(self):
        param = ParamConfig(type="integer", description="Count", required=True)

        assert param.type == ParamType.INTEGER
        assert param.param_type is ParamType.INTEGER
        assert param.required is True

    def test_unsupported_type_fails_at_load_time(self):
        with pytest.raises(ValidationError) as exc_info:
            ParamConfig(type="enum")
        assert "unsupported parameter type: enum" in str(exc_info.value)

    def test_integer_default(self):
        param = ParamConfig(type="integer", default=5)
        assert param.default == 5
        assert isinstance(param.default, int)

    def test_number_default_is_float(self):
        param = ParamConfig(type="number", default=2)
        assert param.default == 2.0
        assert isinstance(param.default, float)

    def test_boolean_default(self):
        assert ParamConfig(type="boolean", default=True).default is True

    def test_string_default_keeps_whitespace(self):
        param = ParamConfig(type="string", default="  padded ")
        assert param.default == "  padded "

    @pytest.mark.parametrize(
        "param_type,raw,expected",
        [
            ("integer", "8080", 8080),
            ("number", "1.5", 1.5),
            ("boolean", "yes", True),
            ("boolean", "0", False),
        ],
    )
    def test_string_defaults_are_converted(self, param_type, raw, expected):
        param = ParamConfig(type=param_type, default=raw)
        assert param.default == expected
        assert type(param.default) is type(expected)

    @pytest.mark.parametrize(
        "param_type,default",
        [
            ("integer", "abc"),
            ("integer", 1.5),
            ("integer", True),
            ("number", False),
            ("boolean", 1),
            ("boolean", "maybe"),
            ("string", 42),
            ("string", True),
        ],
    )
    def test_mismatched_defaults_are_rejected(self, param_type, default):
        with pytest.raises(ValidationError):
            ParamConfig(type=param_type, default=default)

    def test_default_checked_on_assignment(self):
        param = ParamConfig(type="integer", default=1)
        param.default = "2"
        assert param.default == 2

        with pytest.raises(ValidationError):
            param.default = "two"

    def test_type_change_rechecks_default(self):
        param = ParamConfig(type="integer", default=5)
        with pytest.raises(ValidationError, match="not a valid boolean"):
            param.type = "boolean"

    def test_type_change_coerces_default(self):
        param = ParamConfig(type="integer", default=5)
        param.type = "number"
        assert param.default == 5.0
        assert isinstance(param.default, float)

        text = ParamConfig(type="string", default="8080")
        text.type = "integer"
        assert text.default == 8080

    @pytest.mark.parametrize("default", [2**63, 2**64, -(2**63) - 1])
    def test_integer_default_outside_int64(self, default):
        with pytest.raises(ValidationError, match="64-bit range"):
            ParamConfig(type="integer", default=default)

    def test_integer_default_at_int64_bounds(self):
        assert ParamConfig(type="integer", default=2**63 - 1).default == 2**63 - 1
        assert ParamConfig(type="integer", default=-(2**63)).default == -(2**63)

    def test_number_default_too_large_for_float(self):
        with pytest.raises(ValidationError, match="not a valid number"):
            ParamConfig(type="number", default=10**400)

    def test_to_dict(self):
        param = ParamConfig(type="number", default=1.5)
        assert param.to_dict() == {"type": "number", "default": 1.5}


class TestOutputConfig:
    """Tests for OutputConfig model."""

    def test_default_prefix(self):
        assert OutputConfig().prefix == ""

    def test_prefix_whitespace_preserved(self):
        assert OutputConfig(prefix="Result: ").prefix == "Result: "


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_default_values(self):
        config = LoggingConfig()

        assert config.file is None
        assert config.level == "INFO"
        assert config.get_log_level_int() == logging.INFO

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", "DEBUG"),
            (" Error ", "ERROR"),
            ("warn", "WARNING"),
            ("", "INFO"),
            (None, "INFO"),
        ],
    )
    def test_level_normalization(self, level, expected):
        assert LoggingConfig(level=level).level == expected

    def test_invalid_level(self):
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(level="verbose")
        assert "Log level must be one of" in str(exc_info.value)

    def test_log_level_int(self):
        assert LoggingConfig(level="debug").get_log_level_int() == logging.DEBUG
        assert LoggingConfig(level="critical").get_log_level_int() == logging.CRITICAL

    def test_file_is_expanded(self):
        config = LoggingConfig(file="~/mcpshell.log")
        assert config.file == (Path.home() / "mcpshell.log").resolve()

    def test_empty_file_means_no_file(self):
        assert LoggingConfig(file="").file is None


class TestParamsConfig:
    """Tests for the ParamsConfig document model."""

    def test_empty_document(self):
        config = ParamsConfig()

        assert config.params == {}
        assert config.output.prefix == ""
        assert config.logging.level == "INFO"

    def test_full_document(self, sample_params_data):
        config = ParamsConfig.model_validate(sample_params_data)

        assert list(config.params) == ["name", "count", "ratio", "verbose"]
        assert config.params["count"].default == 3
        assert config.output.prefix == "Result: "
        assert config.required_params() == ["name"]

    def test_empty_sections_are_ignored(self):
        config = ParamsConfig.model_validate(
            {"params": {"flag": None}, "output": None, "logging": None}
        )

        assert config.params["flag"].param_type is ParamType.STRING
        assert config.output == OutputConfig()
        assert "logging" not in config.model_fields_set

    @pytest.mark.parametrize("name", ["bad name", "semi;colon", ""])
    def test_invalid_parameter_names(self, name):
        with pytest.raises(ValidationError, match="Invalid parameter names"):
            ParamsConfig.model_validate({"params": {name: {}}})

    def test_unknown_type_in_document(self):
        with pytest.raises(ValidationError) as exc_info:
            ParamsConfig.model_validate({"params": {"x": {"type": "list"}}})
        assert "list" in str(exc_info.value)
