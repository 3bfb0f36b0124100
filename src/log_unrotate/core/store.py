"""
Partitioned store.

Every recognised log gets a hard link under ``<root>/<YYYY>-<MM>/<DD>/`` named
like the source file. The store only ever adds directories and links.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from log_unrotate.core.errors import StoreError

if TYPE_CHECKING:
    from datetime import date

    from log_unrotate.core.models import DatedLogRecord


class PartitionedStore:
    """A date-partitioned tree of hard links rooted at ``collection_root``."""

    def __init__(self, collection_root: Path) -> None:
        self.collection_root = collection_root

    @classmethod
    def with_base_dir(
        cls,
        base_dir: Path,
        vendor: str,
        app: str,
        subpath: str,
    ) -> PartitionedStore:
        """
        Build a store rooted at ``<base_dir>/<vendor>/<app>/<subpath>``.

        :param base_dir: Platform data directory.
        :param vendor: Vendor directory name.
        :param app: Application directory name.
        :param subpath: Directory holding the partitions.
        :return: The store.
        """
        return cls(base_dir.joinpath(vendor, app, subpath))

    def partition_dir(self, log_date: date) -> Path:
        return self.collection_root.joinpath(
            f"{log_date.year:04d}-{log_date.month:02d}",
            f"{log_date.day:02d}",
        )

    def destination(self, record: DatedLogRecord) -> Path:
        return self.partition_dir(record.date).joinpath(record.filename)

    def create_link(self, record: DatedLogRecord) -> bool:
        """
        Hard-link a record's source file into its partition directory.

        Missing partition directories are created along with their ancestors.
        An existing destination entry counts as success and is left untouched.

        :param record: The dated log record to place.
        :raises StoreError: If the directory or the link cannot be created.
        :return: True if a new link was created, False if it already existed.
        """
        partition_dir = self.partition_dir(record.date)
        try:
            partition_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(
                f"Cannot create partition directory {partition_dir}: {e}",
                path=partition_dir,
            ) from e

        link_path = partition_dir.joinpath(record.filename)
        try:
            os.link(record.path, link_path)
        except FileExistsError:
            logger.debug(f"Already linked: {link_path}")
            return False
        except OSError as e:
            raise StoreError(
                f"Cannot link {record.path} to {link_path}: {e}",
                path=record.path,
            ) from e

        logger.success(f"Linked {record.filename} -> {link_path}")
        return True
