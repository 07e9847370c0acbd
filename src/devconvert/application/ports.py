"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class HistoryEntry:
    """Persisted record of a past conversion."""

    id: str
    created_at: datetime
    input_text: str
    output_text: str
    format_type: str
    user_id: str


@dataclass(frozen=True)
class Session:
    """Caller identity, as far as history recording is concerned."""

    user_id: str | None = None
    is_anonymous: bool = True

    @property
    def can_record(self) -> bool:
        return bool(self.user_id) and not self.is_anonymous


class HistoryStore(Protocol):
    """Store conversion history keyed by user and ordered by creation time."""

    def add(self, entry: HistoryEntry) -> None:
        """Persist one entry."""

    def recent(self, user_id: str, limit: int = 15) -> list[HistoryEntry]:
        """Return the newest ``limit`` entries for ``user_id``, newest first."""
