"""
Configuration validator.

Collects every structural problem of a loaded configuration instead of
stopping at the first, so one run of the validator reports them all.
"""

from __future__ import annotations

from typing import Any

VALID_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"},
)


def validate_config(config: Any) -> list[str]:
    """
    Validate a configuration loaded from YAML.

    :param config: Whatever ``yaml.safe_load`` returned.
    :return: List of error messages, empty if the configuration is valid.

    Example:
        >>> validate_config({"version": 1})
        ["Missing required 'source' section", ...]
    """
    if not isinstance(config, dict):
        return ["Config must be a dictionary"]

    errors: list[str] = []

    if "version" not in config:
        errors.append("Missing required 'version' key")

    base_dir = config.get("base_dir")
    if base_dir is not None and not isinstance(base_dir, str):
        errors.append("'base_dir' must be a string or null")

    for section in ("source", "collection", "scheduler", "logging"):
        if section not in config:
            errors.append(f"Missing required '{section}' section")
        elif not isinstance(config[section], dict):
            errors.append(f"'{section}' must be a mapping")

    if isinstance(config.get("source"), dict):
        errors.extend(_validate_source(config["source"]))
    if isinstance(config.get("collection"), dict):
        errors.extend(_validate_collection(config["collection"]))
    if isinstance(config.get("scheduler"), dict):
        errors.extend(_validate_scheduler(config["scheduler"]))
    if isinstance(config.get("logging"), dict):
        errors.extend(_validate_logging(config["logging"]))

    return errors


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _validate_source(source: dict[str, Any]) -> list[str]:
    """
    Check the watched directory components.

    Checks:
        - subpath is a non-empty list
        - every component is a non-empty string
    """
    subpath = source.get("subpath")
    if not isinstance(subpath, list) or not subpath:
        return ["'source.subpath' must be a non-empty list of directory names"]

    return [
        f"'source.subpath' item #{idx} must be a non-empty string"
        for idx, part in enumerate(subpath, 1)
        if not _is_name(part)
    ]


def _validate_collection(collection: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    for key in ("vendor", "app", "subpath"):
        if key not in collection:
            errors.append(f"'collection' missing '{key}'")
        elif not _is_name(collection[key]):
            errors.append(f"'collection.{key}' must be a non-empty string")
    return errors


def _validate_scheduler(scheduler: dict[str, Any]) -> list[str]:
    interval = scheduler.get("interval_seconds")
    # bool is an int subclass
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        return ["'scheduler.interval_seconds' must be a number"]
    if interval <= 0:
        return ["'scheduler.interval_seconds' must be greater than 0"]
    return []


def _validate_logging(logging: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    level = logging.get("level")
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid 'logging.level': {level}")

    for key in ("rotation", "compression"):
        if key in logging and not _is_name(logging[key]):
            errors.append(f"'logging.{key}' must be a non-empty string")

    return errors
