"""
In-memory receipt score store.
"""
from __future__ import annotations

import threading
import uuid

from fastapi import Request


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptStore:
    """Maps receipt ids to computed points for the life of the process.

    Reads and writes go through a single lock; request handlers run on a
    thread pool and may touch the store concurrently.
    """

    def __init__(self) -> None:
        self._points: dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock:
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> tuple[int, bool]:
        """Return ``(points, found)``; ``(0, False)`` for an unknown id."""
        with self._lock:
            if receipt_id in self._points:
                return self._points[receipt_id], True
            return 0, False

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)


def get_store(request: Request) -> ReceiptStore:
    """Store dependency: the instance owned by the running application."""
    return request.app.state.store
