"""
Background scheduler and fault reporter.

A single daemon thread runs ``Unrotate.step`` every interval. Step errors go to
the error channel and the loop carries on. The loop only ends cleanly when the
consumer closes the channel; any other way out of the thread fires the crash
notice.
"""

from __future__ import annotations

import threading
from enum import Enum
from types import TracebackType
from typing import TYPE_CHECKING

from loguru import logger

from log_unrotate.core.channel import ErrorChannel, Notice
from log_unrotate.core.constants import DEFAULT_INTERVAL_SECONDS
from log_unrotate.core.errors import ChannelClosed, StepError

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.core.unrotate import Unrotate


class WorkerState(Enum):
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"


class CrashNotifier:
    """
    Guard that sends the crash notice when its block is left.

    ``disable`` disarms it; only the graceful exit path calls it. The notice is
    sent at most once.
    """

    def __init__(self, notice: Notice) -> None:
        self._notice: Notice | None = notice

    def disable(self) -> None:
        self._notice = None

    def __enter__(self) -> CrashNotifier:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._notice is not None:
            notice, self._notice = self._notice, None
            notice.notice()


class UnrotateWorker:
    """
    Owns the background thread, its error channel and its two notices.

    :param unrotate: The collector run on every tick.
    :param interval: Seconds between the end of one step and the next.
    :param errors: Channel for reported step errors, created if omitted.
    """

    def __init__(
        self,
        unrotate: Unrotate,
        *,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        errors: ErrorChannel | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.unrotate = unrotate
        self.interval = interval
        self.errors = errors if errors is not None else ErrorChannel()
        self.error_notice = Notice()
        self.crash_notice = Notice()

        self._state = WorkerState.CREATED
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def watched_dir(self) -> Path:
        return self.unrotate.watched_dir

    @property
    def collection_root(self) -> Path:
        return self.unrotate.collection_root

    def start(self) -> UnrotateWorker:
        if self._thread is not None:
            raise RuntimeError("worker already started")

        self._thread = threading.Thread(
            target=self._run,
            name="unrotate-worker",
            daemon=True,
        )
        self._state = WorkerState.RUNNING
        self._thread.start()
        logger.info(
            f"Collector started: {self.watched_dir} -> {self.collection_root} "
            f"every {self.interval:g}s",
        )
        return self

    def stop(self) -> None:
        """Close the error channel; the loop exits gracefully at its next check."""
        self.errors.close()

    def join(self, timeout: float | None = None) -> bool:
        """
        Wait for the background thread to finish.

        :param timeout: Seconds to wait, forever if None.
        :return: True if the thread has finished.
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @logger.catch(message="Collector thread crashed")
    def _run(self) -> None:
        try:
            with CrashNotifier(self.crash_notice) as crash_notifier:
                self._loop()
                crash_notifier.disable()
                logger.info("Error consumer gone, collector stopping")
        finally:
            self._state = WorkerState.STOPPED

    def _loop(self) -> None:
        while True:
            try:
                self.unrotate.step()
            except StepError as e:
                logger.warning(f"Step failed: {e}")
                try:
                    self.errors.send(e)
                except ChannelClosed:
                    return
                self.error_notice.notice()

            if self.errors.wait_closed(self.interval):
                return


def start_worker(
    unrotate: Unrotate,
    *,
    interval: float = DEFAULT_INTERVAL_SECONDS,
) -> UnrotateWorker:
    """
    Start collecting in the background.

    :param unrotate: The collector to run.
    :param interval: Seconds between steps.
    :return: The running worker.
    """
    return UnrotateWorker(unrotate, interval=interval).start()
