"""
Plumbing between the background worker and whoever consumes its errors.

``ErrorChannel`` carries reported step errors; ``Notice`` is a wake-up flag the
consumer waits on before draining the channel.
"""

from __future__ import annotations

import queue
import threading

from log_unrotate.core.errors import ChannelClosed


class Notice:
    """A resettable signal sent from the worker to the consumer."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def notice(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)

    def clear(self) -> None:
        self._event.clear()


class ErrorChannel:
    """
    Unbounded FIFO of reported errors with a consumer-side close.

    Once closed, ``send`` raises ``ChannelClosed``; this is how the worker
    learns that nobody is listening anymore.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[BaseException] = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, error: BaseException) -> None:
        """
        Queue an error for the consumer.

        :param error: The error to report.
        :raises ChannelClosed: If the consumer closed the channel.
        """
        if self._closed.is_set():
            raise ChannelClosed
        self._queue.put(error)

    def drain(self) -> list[BaseException]:
        """
        Take every pending error at once, oldest first.

        :return: The pending errors, possibly empty.
        """
        errors: list[BaseException] = []
        while True:
            try:
                errors.append(self._queue.get_nowait())
            except queue.Empty:
                return errors

    def close(self) -> None:
        self._closed.set()

    def wait_closed(self, timeout: float | None = None) -> bool:
        """
        Sleep until the channel is closed or the timeout elapses.

        :param timeout: Seconds to wait.
        :return: True if the channel is closed.
        """
        return self._closed.wait(timeout)
