from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date
    from pathlib import Path


@dataclass(frozen=True)
class DatedLogRecord:
    """
    A source log file whose date was confirmed from its header.

    :param path: Path of the log file in the watched directory.
    :param date: Date read from the first timestamped header line.
    """

    path: Path
    date: date

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def partition_key(self) -> tuple[int, int, int]:
        return self.date.year, self.date.month, self.date.day


@dataclass
class StepReport:
    """Counters for one scan/classify/store pass."""

    candidates: int = 0
    linked: int = 0
    already_linked: int = 0
    skipped: int = 0

    @property
    def changed(self) -> bool:
        return self.linked > 0

    def as_dict(self) -> dict[str, int]:
        return {
            "candidates": self.candidates,
            "linked": self.linked,
            "already_linked": self.already_linked,
            "skipped": self.skipped,
        }
