# history.py
"""""
Session history of calculations.

Append-only and capped: once `limit` entries are stored, recording a new one evicts the
oldest. The history lives only as long as the window that owns it.
"""""

from collections import deque
from dataclasses import dataclass
from datetime import datetime

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: float
    note: str
    timestamp: str


class CalculationHistory:
    def __init__(self, limit=100):
        if limit <= 0:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._entries = deque(maxlen=limit)

    def record(self, expression, result, note="", now=None):
        """Store one calculation and return the new entry."""
        now = now or datetime.now()
        entry = HistoryEntry(expression=expression, result=result, note=note.strip(),
                             timestamp=now.strftime(TIME_FORMAT))
        self._entries.append(entry)
        return entry

    def entries(self):
        """All entries, newest first."""
        return list(reversed(self._entries))

    def latest(self):
        return self._entries[-1] if self._entries else None

    def resize(self, limit):
        """Change the cap, keeping the newest entries that still fit."""
        if limit <= 0:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._entries = deque(self._entries, maxlen=limit)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)
