"""
Feedback Store — append-only log of reviewer decisions.

Behavioral Contract:
- Append-only. No record is ever modified or deleted.
- A log, not a keyed table: repeated feedback for a case appends a new record.
- Reads return snapshots in insertion order; callers cannot mutate the log.
- Appends and reads are serialized so concurrent workers never lose or
  double count a record.
"""

import threading
from typing import List

from decision_oversight.models.feedback import FeedbackRecord


class FeedbackStore:
    """
    In-memory feedback log for the lifetime of the process.
    Production would back this with a durable table.
    """

    def __init__(self):
        self._records: List[FeedbackRecord] = []
        self._lock = threading.Lock()

    def append(self, record: FeedbackRecord) -> FeedbackRecord:
        """Append a record to the end of the log."""
        with self._lock:
            self._records.append(record)
        return record

    def read_all(self) -> List[FeedbackRecord]:
        """Snapshot of every record, oldest first."""
        with self._lock:
            return list(self._records)

    def query_by_case(self, case_id: str) -> List[FeedbackRecord]:
        """All feedback submitted for a given case."""
        return [r for r in self.read_all() if r.case_id == case_id]

    def query_recent(self, limit: int = 50) -> List[FeedbackRecord]:
        """The most recent records, oldest first."""
        if limit <= 0:
            return []
        return self.read_all()[-limit:]

    def count(self) -> int:
        """Total number of feedback records."""
        with self._lock:
            return len(self._records)
