from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from log_unrotate.config.config_validator import validate_config
from log_unrotate.config.paths import default_config_path
from log_unrotate.core.errors import SetupError

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.config.config_type_hint import UnrotateConfig


def read_config(file_path: Path = default_config_path, /) -> UnrotateConfig:
    """
    Read and validate a YAML configuration file.

    :param file_path: The Path object of the configuration file.
    :raises SetupError: If the file is missing, is not valid YAML or fails validation.
    :return: The configuration.
    """
    if not file_path.exists():
        raise SetupError(f"Configuration file {file_path} does not exist.")

    with open(file_path, encoding="utf-8") as file:
        try:
            config = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise SetupError(f"Error reading YAML file {file_path}: {e}") from e

    errors = validate_config(config)
    if errors:
        details = "\n".join(f"  - {error}" for error in errors)
        raise SetupError(f"Invalid configuration {file_path}:\n{details}")

    return config


def dump_config(config: UnrotateConfig) -> str:
    return yaml.safe_dump(
        dict(config),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        indent=2,
    )
