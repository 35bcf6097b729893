"""Qt bridge to run advisor requests in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from rookie.advisor.client import AdvisorClient, AdvisorError


class AdvisorWorker(QObject):
    """Thread-affine worker that fetches advisor replies on demand.

    Move the worker to a ``QThread`` and drive :meth:`request_move` through a
    queued signal; results come back as signals on the owner thread, where the
    reply (or its absence) is handed to
    :func:`rookie.advisor.fallback.resolve_advisor_move`.
    """

    reply_ready = pyqtSignal(int, str)
    request_failed = pyqtSignal(int, str)
    request_cancelled = pyqtSignal(int)

    def __init__(self, client: AdvisorClient) -> None:
        super().__init__()
        self._client = client
        self._cancel_event = threading.Event()

    @pyqtSlot(str, int)
    def request_move(self, fen: str, request_id: int) -> None:
        """Ask the advisor for a move in *fen* and emit the outcome."""
        self._cancel_event.clear()
        try:
            reply = self._client.best_move(fen)
        except AdvisorError as exc:
            if self._cancel_event.is_set():
                self.request_cancelled.emit(request_id)
                return
            self.request_failed.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.request_cancelled.emit(request_id)
            return

        self.reply_ready.emit(request_id, reply)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the request in flight."""
        self._cancel_event.set()
