"""
Date classifier.

Decides whether a candidate file is a real log by looking for a timestamp at
the start of a line in its first bytes, and if so which day it belongs to.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from loguru import logger

from log_unrotate.core.constants import HEADER_DATE_PATTERN, HEADER_SIZE
from log_unrotate.core.errors import (
    ClassifyError,
    HeaderParseDefect,
    InvalidLogDateError,
    TruncatedHeaderError,
)
from log_unrotate.core.models import DatedLogRecord

if TYPE_CHECKING:
    from pathlib import Path


def read_header(path: Path, size: int = HEADER_SIZE) -> bytes:
    """
    Read exactly the first ``size`` bytes of a file.

    :param path: File to read, opened read-only.
    :param size: Number of bytes required.
    :raises TruncatedHeaderError: If the file holds fewer than ``size`` bytes.
    :raises ClassifyError: If the file cannot be opened or read.
    :return: The header bytes.
    """
    try:
        with open(path, "rb") as f:
            header = f.read(size)
    except OSError as e:
        raise ClassifyError(f"Cannot read header of {path}: {e}", path=path) from e

    if len(header) < size:
        raise TruncatedHeaderError(
            f"File too small to hold a log header ({len(header)}/{size} bytes): {path}",
            path=path,
        )
    return header


def _parse_digits(raw: bytes) -> int:
    try:
        return int(raw.decode("ascii"), 10)
    except (UnicodeDecodeError, ValueError) as e:
        raise HeaderParseDefect(f"matched header digits failed to parse: {raw!r}") from e


def extract_date(header: bytes) -> date | None:
    """
    Find the date of the first timestamped line in a header buffer.

    :param header: Leading bytes of a log file.
    :raises InvalidLogDateError: If the matched digits are not a calendar date.
    :raises HeaderParseDefect: If matched digits fail to parse as integers.
    :return: The date, or None when no line carries a timestamp.
    """
    match = HEADER_DATE_PATTERN.search(header)
    if match is None:
        return None

    year = _parse_digits(match.group("yyyy"))
    month = _parse_digits(match.group("MM"))
    day = _parse_digits(match.group("dd"))

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidLogDateError(
            f"Header date {year:04d}.{month:02d}.{day:02d} is not a calendar date: {e}",
        ) from e


def classify(path: Path) -> DatedLogRecord | None:
    """
    Resolve a candidate file to a dated log record.

    :param path: Candidate path produced by the scanner.
    :raises ClassifyError: On I/O failure, a truncated file or an invalid date.
    :return: The record, or None when the file is not a recognised log.
    """
    header = read_header(path)

    try:
        log_date = extract_date(header)
    except InvalidLogDateError as e:
        raise InvalidLogDateError(f"{e}: {path}", path=path) from e

    if log_date is None:
        logger.debug(f"No timestamp header, skipping: {path.name}")
        return None

    return DatedLogRecord(path=path, date=log_date)
