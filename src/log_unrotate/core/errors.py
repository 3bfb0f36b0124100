"""
Exception hierarchy of the collector.

Step errors are recoverable: the background loop reports them and keeps going.
Setup errors and defects are not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class UnrotateError(Exception):
    """Base class for every error raised by log_unrotate."""


class SetupError(UnrotateError):
    """The collector cannot be configured, the loop never starts."""


class StepError(UnrotateError):
    """
    A filesystem failure during one scan/classify/store pass.

    :param message: Human readable description.
    :param path: The path the failing operation was working on.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ScanError(StepError):
    """The watched directory or one of its entries could not be read."""


class ClassifyError(StepError):
    """A candidate log file could not be opened or its header read."""


class TruncatedHeaderError(ClassifyError):
    """The file is shorter than the header window."""


class InvalidLogDateError(ClassifyError):
    """The header carries digits that do not form a calendar date."""


class StoreError(StepError):
    """A partition directory or a link could not be created."""


class HeaderParseDefect(AssertionError):
    """Digits already matched by the header pattern failed to parse."""


class ChannelClosed(Exception):
    """The consumer of reported errors has gone away."""
