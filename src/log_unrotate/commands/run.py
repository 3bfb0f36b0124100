"""
Foreground shell around the background collector.

Starts the worker, then waits for its notices: pending step errors are drained
in one batch and shown one panel each, a crash is shown once and ends the
command with a non-zero exit code.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from loguru import logger

from log_unrotate.commands.options import BaseDirOption, ConfigOption
from log_unrotate.commands.setup import open_session
from log_unrotate.config.paths import default_config_path
from log_unrotate.core.worker import UnrotateWorker
from log_unrotate.shell.display import UnrotateDisplay

# How often the shell checks whether the worker is still alive
POLL_SECONDS = 1.0


def run(
    config_path: ConfigOption = default_config_path,
    base_dir: BaseDirOption = None,
    interval: Annotated[
        Optional[float],
        typer.Option(
            "--interval",
            help="Seconds between two scans. Overrides 'scheduler.interval_seconds'.",
            min=0.001,
        ),
    ] = None,
) -> None:
    """Mirror new log files into the dated collection until interrupted."""
    session = open_session(config_path, base_dir)

    if interval is None:
        interval = float(session.config["scheduler"]["interval_seconds"])

    display = UnrotateDisplay(session.config["collection"]["app"])
    worker = UnrotateWorker(session.unrotate, interval=interval).start()
    display.show_started(worker.watched_dir, worker.collection_root, interval)

    try:
        consume(worker, display)
    except KeyboardInterrupt:
        logger.info("Interrupted, closing the error channel")
        worker.stop()
        worker.join()
        show_pending_errors(worker, display)
        display.show_stopped()
        return

    if worker.crash_notice.is_set():
        display.show_crash()
        raise typer.Exit(1)

    display.show_stopped()


def consume(worker: UnrotateWorker, display: UnrotateDisplay) -> None:
    """
    Show reported errors until the worker thread ends.

    :param worker: A started worker.
    :param display: Where notifications go.
    """
    while worker.is_alive():
        if worker.error_notice.wait(POLL_SECONDS):
            show_pending_errors(worker, display)

    show_pending_errors(worker, display)


def show_pending_errors(worker: UnrotateWorker, display: UnrotateDisplay) -> None:
    # Clear before draining so an error sent meanwhile re-arms the notice
    worker.error_notice.clear()
    for error in worker.errors.drain():
        display.show_error(error)
