"""In-memory score sink for finished games."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import BoundaryMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    """One submitted final score."""

    username: str
    score: int
    mode: BoundaryMode
    entry_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "username": self.username,
            "score": self.score,
            "mode": self.mode.value,
            "timestamp": self.timestamp.isoformat(),
        }


class Leaderboard:
    """Keeps submitted scores and answers ranking queries."""

    def __init__(self) -> None:
        self._entries: list[LeaderboardEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def submit_score(
        self, username: str, score: int, mode: BoundaryMode | str,
    ) -> LeaderboardEntry:
        """Record a final score and return the stored entry."""
        if not username or not username.strip():
            raise InvalidArgumentError("A username is required to submit a score.")
        if score < 0:
            raise InvalidArgumentError("Score must be non-negative.")

        entry = LeaderboardEntry(
            username=username.strip(),
            score=score,
            mode=BoundaryMode.parse(mode),
        )
        self._entries.append(entry)
        logger.info(
            "Score %d submitted by '%s' (%s).",
            score, entry.username, entry.mode.value,
        )
        return entry

    def top(
        self,
        mode: BoundaryMode | str | None = None,
        limit: int | None = None,
    ) -> list[LeaderboardEntry]:
        """Return entries sorted by score, highest first.

        Ties keep submission order.
        """
        entries = self._entries
        if mode is not None:
            wanted = BoundaryMode.parse(mode)
            entries = [e for e in entries if e.mode is wanted]
        ranked = sorted(entries, key=lambda e: e.score, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked

    def best(
        self, username: str, mode: BoundaryMode | str | None = None,
    ) -> LeaderboardEntry | None:
        """Return the highest entry for *username*, if any."""
        for entry in self.top(mode):
            if entry.username == username:
                return entry
        return None
