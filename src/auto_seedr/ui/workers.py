"""Background worker objects used by the auto-seedr UI.

Currently provides:
- ApiWorker: runs one blocking Seedr call off the GUI thread and emits
  its return value (or an error string) when complete.
- JobRunner: owns the worker threads and hands every result back to the
  GUI thread, so menu state is only ever touched from one thread.
- exit_process: leaves without tearing down threads stuck in a request.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

logger = logging.getLogger(__name__)


class ApiWorker(QObject):
    """Worker that runs a single callable in a background thread.

    Signals:
        finished(object): emitted on success with the callable's result.
        error(str): emitted if the callable raised.
    """

    finished = pyqtSignal(object)
    error = pyqtSignal(str)

    def __init__(self, name: str, fn: Callable[[], Any]) -> None:
        super().__init__()
        self._name = name
        self._fn = fn

    @pyqtSlot()
    def run(self) -> None:
        try:
            result = self._fn()
        except Exception as exc:
            logger.exception("Background job %r failed", self._name)
            self.error.emit(str(exc))
        else:
            self.finished.emit(result)


class _Job(QObject):
    """GUI-thread side of one submitted call."""

    def __init__(
        self,
        runner: JobRunner,
        name: str,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None] | None,
        on_error: Callable[[str], None] | None,
    ) -> None:
        super().__init__(runner)
        self.name = name
        self._runner = runner
        self._on_done = on_done
        self._on_error = on_error

        self.thread = QThread(self)
        self.worker = ApiWorker(name, fn)
        self.worker.moveToThread(self.thread)

        self.thread.started.connect(self.worker.run)
        # Receivers live in the GUI thread, so these are queued connections.
        self.worker.finished.connect(self._deliver)
        self.worker.error.connect(self._fail)
        self.thread.finished.connect(self._cleanup)

    def start(self) -> None:
        self.thread.start()

    def abandon(self) -> None:
        """Drop the callbacks; the thread keeps running until its call returns."""
        self._on_done = None
        self._on_error = None

    @pyqtSlot(object)
    def _deliver(self, result: object) -> None:
        self.thread.quit()
        if self._on_done is not None:
            self._on_done(result)

    @pyqtSlot(str)
    def _fail(self, message: str) -> None:
        self.thread.quit()
        if self._on_error is not None:
            self._on_error(message)

    @pyqtSlot()
    def _cleanup(self) -> None:
        self.thread.wait()
        self._runner._forget(self)
        self.worker.deleteLater()
        self.deleteLater()


class JobRunner(QObject):
    """Run blocking callables on worker threads, one thread per job."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._jobs: set[_Job] = set()

    def submit(
        self,
        name: str,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        """Start *fn* in the background.

        ``on_done`` receives the return value and ``on_error`` the error
        message; both are called on the GUI thread. Exceptions are logged
        by the worker and never reach the event loop.
        """
        job = _Job(self, name, fn, on_done, on_error)
        self._jobs.add(job)
        logger.debug("Starting job %r", name)
        job.start()

    def pending(self) -> int:
        """Number of jobs whose thread has not finished yet."""
        return len(self._jobs)

    def _forget(self, job: _Job) -> None:
        self._jobs.discard(job)

    def shutdown(self) -> int:
        """Detach every running job and return how many are still in flight.

        A thread blocked inside a request cannot be interrupted, so nothing
        waits here. Callers that still have pending jobs must leave through
        ``exit_process`` instead of letting Qt destroy running threads.
        """
        for job in list(self._jobs):
            job.abandon()
            logger.info("Abandoning job %r at shutdown", job.name)
        return self.pending()


def exit_process(code: int, runner: JobRunner) -> int:
    """Return *code*, or end the process right away if jobs are still running.

    Qt aborts when a running QThread is destroyed, and a request without a
    timeout may never return, so the interpreter is not allowed to tear the
    worker threads down.
    """
    in_flight = runner.pending()
    if in_flight:
        logger.warning("Exiting with %d request(s) still in flight", in_flight)
        logging.shutdown()
        sys.stdout.flush()
        sys.stderr.flush()
        os._exit(code)
    return code
