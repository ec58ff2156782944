"""Loading of parameter configuration files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from mcpshell.config.models import ParamsConfig
from mcpshell.core.errors import ConfigError
from mcpshell.core.logging import get_logger


logger = get_logger(__name__)


def load_params_config(path: Path | str) -> ParamsConfig:
    """Load parameter declarations from a YAML file as a typed object.

    Args:
        path: Path to the YAML file

    Returns:
        Typed ParamsConfig object; an empty file gives an empty configuration

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    config_file = Path(path).expanduser()
    if not config_file.is_file():
        raise ConfigError(f"Configuration file not found: {config_file}")

    try:
        with config_file.open(encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing configuration file {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading configuration file {config_file}: {e}") from e

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            f"Invalid configuration format in {config_file}: expected a mapping"
        )

    try:
        config = ParamsConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

    logger.debug(
        "params_config_loaded", path=str(config_file), params=len(config.params)
    )
    return config


__all__ = ["load_params_config"]
