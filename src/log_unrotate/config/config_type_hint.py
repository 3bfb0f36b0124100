from __future__ import annotations

from typing import Optional

from typing_extensions import NotRequired, TypedDict


class SourceConfig(TypedDict):
    """
    Where the rotated logs live.

    :param subpath: Path components of the watched directory below the base directory.
    """

    subpath: list[str]


class CollectionConfig(TypedDict):
    """
    Where the partitioned links go: ``<base>/<vendor>/<app>/<subpath>``.

    :param vendor: Vendor directory name.
    :param app: Application directory name.
    :param subpath: Directory holding the date partitions.
    """

    vendor: str
    app: str
    subpath: str


class SchedulerConfig(TypedDict):
    """
    :param interval_seconds: Pause between two steps.
    """

    interval_seconds: float


class LoggingConfig(TypedDict):
    """
    Loguru file sink settings.

    :param level: Minimum level written to the log file.
    :param rotation: Loguru rotation condition (e.g. "10 MB").
    :param compression: Archive format for rotated files (e.g. "zip").
    """

    level: str
    rotation: str
    compression: str


class UnrotateConfig(TypedDict):
    """
    The whole configuration file.

    :param version: Configuration version number.
    :param base_dir: Optional override of the platform data directory.
    """

    version: int
    base_dir: NotRequired[Optional[str]]
    source: SourceConfig
    collection: CollectionConfig
    scheduler: SchedulerConfig
    logging: LoggingConfig
