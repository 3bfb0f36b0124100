# log_unrotate/config/logging_config.py

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.config.config_type_hint import LoggingConfig


def setup_logging(log_dir: Path, config: LoggingConfig) -> Path:
    """
    Send loguru output to a rotating file and warnings to stderr.

    :param log_dir: Directory of the log file, created if missing.
    :param config: Logging section of the configuration.
    :return: Path of the log file.
    """
    # Remove default handlers to start with a clean slate
    logger.remove()

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path: Path = log_dir.joinpath("unrotate.log")

    logger.add(
        log_path,
        level=config["level"].upper(),
        rotation=config.get("rotation", "10 MB"),
        compression=config.get("compression", "zip"),
        encoding="utf-8",
    )
    logger.add(
        sys.stderr,
        level="WARNING",  # Only shows WARNING, ERROR, CRITICAL
    )

    return log_path
