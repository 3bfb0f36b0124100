from datetime import date
from pathlib import Path

import pytest

from log_unrotate.core.errors import ScanError, TruncatedHeaderError
from log_unrotate.core.scanner import SourceScanner
from log_unrotate.core.store import PartitionedStore
from log_unrotate.core.unrotate import Unrotate


class FixedScanner:
    """Scanner returning a fixed candidate order."""

    def __init__(self, watched_dir: Path, paths: list[Path]) -> None:
        self.watched_dir = watched_dir
        self.paths = paths

    def list_logfile_paths(self) -> list[Path]:
        return list(self.paths)


def snapshot(root: Path) -> list[str]:
    if not root.exists():
        return []
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


def make_unrotate(watched_dir: Path, collection_root: Path) -> Unrotate:
    return Unrotate(SourceScanner(watched_dir), PartitionedStore(collection_root))


def test_end_to_end_step(watched_dir: Path, collection_root: Path, make_log) -> None:
    make_log("output_log_24-03-07.txt")
    make_log("notalog.txt", "2024.03.07 00:00:01 but the name is wrong\n")
    unrotate = make_unrotate(watched_dir, collection_root)

    report = unrotate.step()

    assert report.as_dict() == {
        "candidates": 1,
        "linked": 1,
        "already_linked": 0,
        "skipped": 0,
    }
    assert snapshot(collection_root) == [
        "2024-03",
        str(Path("2024-03", "07")),
        str(Path("2024-03", "07", "output_log_24-03-07.txt")),
    ]


def test_second_step_changes_nothing(watched_dir: Path, collection_root: Path, make_log) -> None:
    make_log("output_log_24-03-07.txt")
    make_log("notalog.txt")
    unrotate = make_unrotate(watched_dir, collection_root)
    unrotate.step()
    before = snapshot(collection_root)

    report = unrotate.step()

    assert snapshot(collection_root) == before
    assert report.linked == 0
    assert report.already_linked == 1
    assert not report.changed


def test_files_without_header_are_skipped(watched_dir: Path, collection_root: Path, make_log) -> None:
    make_log("output_log_24-03-07.txt")
    make_log("output_log_24-03-08.txt", "no timestamp header in this file at all\n")

    report = make_unrotate(watched_dir, collection_root).step()

    assert (report.candidates, report.linked, report.skipped) == (2, 1, 1)


def test_logs_from_different_days_land_in_different_partitions(
    watched_dir: Path, collection_root: Path, make_log
) -> None:
    make_log("output_log_24-03-07.txt", "2024.03.07 23:59:58 late night session\n")
    make_log("output_log_24-03-08.txt", "2024.03.08 00:00:03 next morning....\n")

    make_unrotate(watched_dir, collection_root).step()

    assert collection_root.joinpath("2024-03", "07", "output_log_24-03-07.txt").exists()
    assert collection_root.joinpath("2024-03", "08", "output_log_24-03-08.txt").exists()


def test_earlier_links_survive_a_later_failure(
    watched_dir: Path, collection_root: Path, make_log
) -> None:
    good = make_log("output_log_24-03-07.txt")
    bad = make_log("output_log_24-03-08.txt", "2024.03.08 00")
    unrotate = Unrotate(
        FixedScanner(watched_dir, [good, bad]),
        PartitionedStore(collection_root),
    )

    with pytest.raises(TruncatedHeaderError):
        unrotate.step()

    assert collection_root.joinpath("2024-03", "07", good.name).exists()


def test_scan_failure_propagates(tmp_path: Path, collection_root: Path) -> None:
    unrotate = make_unrotate(tmp_path / "missing", collection_root)

    with pytest.raises(ScanError):
        unrotate.step()


def test_from_config_wires_paths(tmp_path: Path) -> None:
    config = {
        "version": 1,
        "source": {"subpath": ["VRChat", "VRChat"]},
        "collection": {"vendor": "KOBA789", "app": "VRCLogUnrotate", "subpath": "Logs"},
        "scheduler": {"interval_seconds": 60},
        "logging": {"level": "INFO"},
    }

    unrotate = Unrotate.from_config(config, tmp_path)

    assert unrotate.watched_dir == tmp_path / "VRChat" / "VRChat"
    assert unrotate.collection_root == tmp_path / "KOBA789" / "VRCLogUnrotate" / "Logs"
    assert unrotate.store.partition_dir(date(2024, 3, 7)).parts[-2:] == ("2024-03", "07")
