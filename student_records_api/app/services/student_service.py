"""
In-memory record store for students.

The store is a plain dictionary keyed by student ID, guarded by a
single lock.  Every operation holds the lock for its whole duration,
so concurrent requests are applied one at a time and a read never
sees half of an update.

New IDs are drawn at random from ``[id_min, id_max]``.  The draw is
not checked against existing IDs: on a collision the new record
replaces the old one.  This is logged as a warning but otherwise
treated as a normal create.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Dict, List, Optional

from student_records_api.app.schemas.student import StudentIn, StudentRead

logger = logging.getLogger(__name__)


class StudentStore:
    """Thread-safe in-memory mapping of student ID to record."""

    def __init__(self, id_min: int = 0, id_max: int = 999, rng: Optional[random.Random] = None) -> None:
        if id_min > id_max:
            raise ValueError(f"empty ID range [{id_min}, {id_max}]")
        self.id_min = id_min
        self.id_max = id_max
        self._rng = rng or random.Random()
        self._students: Dict[int, StudentRead] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def create(self, data: StudentIn) -> StudentRead:
        """Store a new student under a freshly drawn ID and return it."""
        with self._lock:
            student_id = self._rng.randint(self.id_min, self.id_max)
            if student_id in self._students:
                logger.warning("Student ID %s already in use; overwriting existing record", student_id)
            student = StudentRead(id=student_id, **data.model_dump())
            self._students[student_id] = student
            logger.info("Created student %s", student_id)
            return student

    def list_students(self) -> List[StudentRead]:
        """Return every stored student.  Order is not significant."""
        with self._lock:
            return list(self._students.values())

    def get(self, student_id: int) -> Optional[StudentRead]:
        with self._lock:
            return self._students.get(student_id)

    def update(self, student_id: int, data: StudentIn) -> Optional[StudentRead]:
        """Replace an existing student entirely.

        The stored ``id`` always equals ``student_id``.  Returns ``None``
        and leaves the store untouched if there is no such student.
        """
        with self._lock:
            if student_id not in self._students:
                return None
            student = StudentRead(id=student_id, **data.model_dump())
            self._students[student_id] = student
            logger.info("Updated student %s", student_id)
            return student

    def delete(self, student_id: int) -> bool:
        """Remove a student if present.

        Returns ``True`` if a record was removed.  Deleting an unknown
        ID is not an error.
        """
        with self._lock:
            removed = self._students.pop(student_id, None)
        if removed is not None:
            logger.info("Deleted student %s", student_id)
        return removed is not None

    def clear(self) -> None:
        with self._lock:
            self._students.clear()
