import os
from pathlib import Path

import pytest

from log_unrotate.core.errors import ScanError
from log_unrotate.core.scanner import SourceScanner, is_logfile_name


@pytest.mark.parametrize(
    "name",
    [
        "output_log_24-03-07.txt",
        "output_log_00-00-00.txt",
        "output_log_99-12-31.txt",
    ],
)
def test_logfile_names_are_selected(name: str) -> None:
    assert is_logfile_name(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "notalog.txt",
        "Output_log_24-03-07.txt",
        "output_log_24-03-07.TXT",
        "output_log_2024-03-07.txt",
        "output_log_24-3-07.txt",
        "output_log_24_03_07.txt",
        "output_log_24-03-07.txt.bak",
        "xoutput_log_24-03-07.txt",
        "output_log_24-03-07.txt\n",
        "output_log_24-03-07xtxt",
        "output_log_٢٤-03-07.txt",
        "",
    ],
)
def test_other_names_are_rejected(name: str) -> None:
    assert is_logfile_name(name) is False


def test_lists_only_matching_regular_files(watched_dir: Path, make_log) -> None:
    first = make_log("output_log_24-03-07.txt")
    second = make_log("output_log_24-03-08.txt")
    make_log("notalog.txt")
    make_log("output_log_24-03-09.txt.old")
    watched_dir.joinpath("output_log_24-03-10.txt").mkdir()

    paths = SourceScanner(watched_dir).list_logfile_paths()

    assert sorted(paths) == sorted([first, second])


def test_symlinks_with_matching_names_are_excluded(watched_dir: Path, make_log) -> None:
    target = make_log("notalog.txt")
    link = watched_dir.joinpath("output_log_24-03-07.txt")
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    assert SourceScanner(watched_dir).list_logfile_paths() == []


def test_empty_directory_yields_nothing(watched_dir: Path) -> None:
    assert SourceScanner(watched_dir).list_logfile_paths() == []


def test_missing_directory_is_a_scan_error(tmp_path: Path) -> None:
    missing = tmp_path.joinpath("nope")

    with pytest.raises(ScanError) as excinfo:
        SourceScanner(missing).list_logfile_paths()

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_file_instead_of_directory_is_a_scan_error(tmp_path: Path) -> None:
    not_a_dir = tmp_path.joinpath("file.txt")
    not_a_dir.write_text("x")

    with pytest.raises(ScanError):
        SourceScanner(not_a_dir).list_logfile_paths()


def test_scanner_does_not_touch_files(watched_dir: Path, make_log) -> None:
    path = make_log("output_log_24-03-07.txt")
    before = path.stat()

    SourceScanner(watched_dir).list_logfile_paths()

    after = path.stat()
    assert (before.st_size, before.st_mtime_ns) == (after.st_size, after.st_mtime_ns)
