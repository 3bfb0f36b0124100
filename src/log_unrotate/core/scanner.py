"""
Source scanner.

Lists the rotated log files of the watched directory by name shape only.
Nothing is opened here; the header check belongs to the classifier.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from log_unrotate.core.constants import LOGFILE_NAME_PATTERN
from log_unrotate.core.errors import ScanError


def is_logfile_name(name: str) -> bool:
    """
    Check whether a filename has the shape ``output_log_NN-NN-NN.txt``.

    :param name: Bare filename, without directory.
    :return: True on an exact, case-sensitive match.
    """
    return LOGFILE_NAME_PATTERN.fullmatch(name) is not None


class SourceScanner:
    """Enumerates candidate log files in one watched directory."""

    def __init__(self, watched_dir: Path) -> None:
        self.watched_dir = watched_dir

    def list_logfile_paths(self) -> list[Path]:
        """
        List regular files in the watched directory whose name looks like a log.

        Symbolic links, directories and other entry types are left out even when
        their name matches. Any failure while listing, including a failure to
        read the type of a single entry, aborts the whole listing: a partial
        enumeration is not trusted.

        :raises ScanError: If the directory or one of its entries cannot be read.
        :return: Candidate paths, in directory order.
        """
        candidates: list[Path] = []

        try:
            with os.scandir(self.watched_dir) as entries:
                for entry in entries:
                    if not is_logfile_name(entry.name):
                        continue
                    if not entry.is_file(follow_symlinks=False):
                        logger.debug(f"Skipping non-regular entry: {entry.path}")
                        continue
                    candidates.append(Path(entry.path))
        except OSError as e:
            raise ScanError(
                f"Cannot list watched directory {self.watched_dir}: {e}",
                path=self.watched_dir,
            ) from e

        return candidates
