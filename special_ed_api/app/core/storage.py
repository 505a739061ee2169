"""
In-memory student collection seeded from a JSON file.

``StudentStore`` owns the list of student records for the lifetime of
the process.  All access goes through a single re-entrant lock so that
request handlers running in different threads never observe a
half-applied mutation.  Services that need a check followed by a
mutation (for example "is this id free?" then "append") wrap both
steps in ``with store.locked():``.

The seed file is read once at startup.  When ``write_back`` is enabled
the file is rewritten after every mutation; this is best effort and a
failure to write is logged without affecting the in-memory state or
the previous contents of the file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .errors import SeedDataError


logger = logging.getLogger(__name__)

Student = Dict[str, Any]


class StudentStore:
    """Thread-safe ordered collection of student records."""

    def __init__(
        self,
        records: Optional[List[Student]] = None,
        *,
        path: Optional[str] = None,
        write_back: bool = False,
    ) -> None:
        self._records: List[Student] = list(records or [])
        self._lock = threading.RLock()
        self.path = Path(path) if path else None
        self.write_back = write_back

    @classmethod
    def from_file(cls, path: str, write_back: bool = False) -> "StudentStore":
        """Load the seed array from ``path``.

        A missing file gives an empty collection.  A file that is not
        valid JSON, or whose top level is not an array of objects,
        raises :class:`SeedDataError`.
        """
        seed_path = Path(path)
        if not seed_path.exists():
            logger.warning("Seed file %s not found; starting with no students", seed_path)
            return cls(path=str(seed_path), write_back=write_back)
        try:
            with seed_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise SeedDataError(f"Cannot read seed file {seed_path}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise SeedDataError(f"Seed file {seed_path} must contain a JSON array of objects")
        logger.info("Loaded %d students from %s", len(data), seed_path)
        return cls(data, path=str(seed_path), write_back=write_back)

    @contextmanager
    def locked(self) -> Iterator["StudentStore"]:
        """Hold the collection lock for a multi-step operation."""
        with self._lock:
            yield self

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> List[Student]:
        """Return a shallow copy of the records in stored order."""
        with self._lock:
            return list(self._records)

    def find_index(self, student_id: Any) -> Optional[int]:
        """Position of the first record whose ``id`` equals ``student_id``."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.get("id") == student_id:
                    return index
            return None

    def find(self, student_id: Any) -> Optional[Student]:
        with self._lock:
            index = self.find_index(student_id)
            return None if index is None else self._records[index]

    def append(self, record: Student) -> None:
        with self._lock:
            self._records.append(record)
            self._persist()

    def replace(self, index: int, record: Student) -> Student:
        """Swap the record at ``index`` for ``record`` and return the old one."""
        with self._lock:
            previous = self._records[index]
            self._records[index] = record
            self._persist()
            return previous

    def remove(self, index: int) -> Student:
        with self._lock:
            record = self._records.pop(index)
            self._persist()
            return record

    def _persist(self) -> None:
        if not (self.write_back and self.path):
            return
        # Write a sibling temp file and swap it in, so the seed file is
        # either the old or the new collection, never a partial one.
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(self._records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError) as exc:
            logger.error("Failed to write students to %s: %s", self.path, exc)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
