"""A byte buffer that may be written from several threads at once."""

from __future__ import annotations

import threading


class ThreadSafeBuffer:
    """An append-only byte buffer guarded by a lock."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        """Append ``data`` and return the number of bytes written."""
        chunk = bytes(data)
        with self._lock:
            self._data.extend(chunk)
        return len(chunk)

    def __str__(self) -> str:
        with self._lock:
            return self._data.decode("utf-8", errors="replace")