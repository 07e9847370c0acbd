"""In-memory history store adapter."""

from __future__ import annotations

import threading
from collections import defaultdict

from devconvert.application.ports import HistoryEntry
from devconvert.errors import HistoryError


class InMemoryHistoryStore:
    """Process-local history store, newest entries first per user.

    Parameters
    ----------
    max_entries_per_user : int | None, default=None
        Oldest entries beyond this bound are discarded. ``None`` keeps
        everything.
    """

    def __init__(self, max_entries_per_user: int | None = None) -> None:
        if max_entries_per_user is not None and max_entries_per_user <= 0:
            raise HistoryError("max_entries_per_user must be positive.")
        self._max = max_entries_per_user
        self._entries: dict[str, list[HistoryEntry]] = defaultdict(list)
        self._lock = threading.Lock()

    def add(self, entry: HistoryEntry) -> None:
        """Persist one entry.

        Raises
        ------
        HistoryError
            If the entry has no user id.
        """
        if not entry.user_id:
            raise HistoryError("History entries require a user id.")
        with self._lock:
            entries = self._entries[entry.user_id]
            entries.append(entry)
            entries.sort(key=lambda item: item.created_at)
            if self._max is not None and len(entries) > self._max:
                del entries[: len(entries) - self._max]

    def recent(self, user_id: str, limit: int = 15) -> list[HistoryEntry]:
        """Return the newest ``limit`` entries for ``user_id``, newest first."""
        if limit <= 0:
            return []
        with self._lock:
            entries = list(self._entries.get(user_id, ()))
        return entries[::-1][:limit]

    def clear(self, user_id: str | None = None) -> None:
        """Drop history for one user, or for everyone."""
        with self._lock:
            if user_id is None:
                self._entries.clear()
            else:
                self._entries.pop(user_id, None)
