"""Append-only audit trail of protection denials.

Records are plain dicts stamped with a UTC ISO-8601 ``timestamp`` and a
``session_id``.  With a ``log_path`` they are appended to a JSONL file;
without one they are kept in memory for the lifetime of the logger.

A threading.Lock guards both stores so one logger can be shared by several
policies.

Example
-------
>>> from pathlib import Path
>>> audit = AuditLogger(Path("/tmp/protection.jsonl"))
>>> audit.log({"event": "protection_denied", "category": "break_block"})
>>> audit.count()
1
"""
from __future__ import annotations

import json
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator


class AuditLogger:
    """Audit logger for denied events.

    Parameters
    ----------
    log_path:
        Path to a ``.jsonl`` file.  Parent directories are created on first
        write.  When ``None``, records are held in memory only.
    session_id:
        Identifier stamped on every record.  A random UUID is generated if
        not supplied.
    """

    def __init__(
        self,
        log_path: Path | None = None,
        session_id: str | None = None,
    ) -> None:
        self._log_path = log_path
        self._session_id: str = session_id or str(uuid.uuid4())
        self._lock = threading.Lock()
        self._memory: list[dict[str, object]] = []

    # ------------------------------------------------------------------
    # Write API
    # ------------------------------------------------------------------

    def log(self, entry: dict[str, object]) -> None:
        """Append a record.

        ``timestamp`` and ``session_id`` are always set by the logger and
        override any value supplied in *entry*.
        """
        record: dict[str, object] = {
            **entry,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
            "session_id": self._session_id,
        }
        self._write(record)

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def read_all(self) -> list[dict[str, object]]:
        """Return all records in chronological order."""
        return list(self._iter_records())

    def query(self, filters: dict[str, object]) -> list[dict[str, object]]:
        """Return records whose top-level fields equal every filter value.

        Example
        -------
        >>> audit.query({"category": "break_block", "actor": "steve"})
        [...]
        """
        return [
            record
            for record in self._iter_records()
            if all(record.get(k) == v for k, v in filters.items())
        ]

    def count(self) -> int:
        """Return the total number of records."""
        return sum(1 for _ in self._iter_records())

    def last_n(self, n: int) -> list[dict[str, object]]:
        """Return the ``n`` most recent records; none when ``n`` is not positive."""
        if n <= 0:
            return []
        all_records = list(self._iter_records())
        return all_records[-n:] if n < len(all_records) else all_records

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, record: dict[str, object]) -> None:
        with self._lock:
            if self._log_path is None:
                self._memory.append(record)
                return
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._log_path.open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(record, default=str) + "\n")

    def _iter_records(self) -> Iterator[dict[str, object]]:
        if self._log_path is None:
            with self._lock:
                snapshot = list(self._memory)
            yield from snapshot
            return
        if not self._log_path.exists():
            return
        with self._lock:
            with self._log_path.open("r", encoding="utf-8") as fh:
                lines = fh.readlines()
        for line in lines:
            line = line.strip()
            if line:
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    pass  # Skip malformed lines.

    @property
    def log_path(self) -> Path | None:
        """The JSONL file path, or ``None`` for an in-memory logger."""
        return self._log_path

    @property
    def session_id(self) -> str:
        return self._session_id
