"""
One scan -> classify -> store pass over the watched directory.

A step is not transactional: the first failure stops it, and links created
before the failure stay in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from log_unrotate.core.classifier import classify
from log_unrotate.core.models import StepReport
from log_unrotate.core.scanner import SourceScanner
from log_unrotate.core.store import PartitionedStore

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.config.config_type_hint import UnrotateConfig


class Unrotate:
    """Couples a source scanner to a partitioned store."""

    def __init__(self, scanner: SourceScanner, store: PartitionedStore) -> None:
        self.scanner = scanner
        self.store = store

    @classmethod
    def from_config(cls, config: UnrotateConfig, base_dir: Path) -> Unrotate:
        """
        Build the collector from a validated configuration.

        :param config: Loaded configuration.
        :param base_dir: Resolved platform data directory.
        :return: The collector.
        """
        watched_dir = base_dir.joinpath(*config["source"]["subpath"])
        collection = config["collection"]
        store = PartitionedStore.with_base_dir(
            base_dir,
            collection["vendor"],
            collection["app"],
            collection["subpath"],
        )
        return cls(SourceScanner(watched_dir), store)

    @property
    def watched_dir(self) -> Path:
        return self.scanner.watched_dir

    @property
    def collection_root(self) -> Path:
        return self.store.collection_root

    def step(self) -> StepReport:
        """
        Link every recognised log file of the watched directory into the store.

        :raises StepError: On the first scan, classify or store failure.
        :return: Counters describing what the pass did.
        """
        report = StepReport()

        for path in self.scanner.list_logfile_paths():
            report.candidates += 1

            record = classify(path)
            if record is None:
                report.skipped += 1
                continue

            if self.store.create_link(record):
                report.linked += 1
            else:
                report.already_linked += 1

        if report.changed:
            logger.info(f"Step done: {report.as_dict()}")
        else:
            logger.debug(f"Step done, nothing new: {report.as_dict()}")

        return report
