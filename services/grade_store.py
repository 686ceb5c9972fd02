"""
services/grade_store.py

Where a user's grade entries live.

- SimulationGradeStore: transient, in-process, per user ("what if" mode)
- DatabaseGradeStore: persisted in the grades table, keyed by (user, subject)
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict

from sqlalchemy.orm import Session

from models.grades import Grade as GradeModel
from schemas.grades import GradeEntries, GradeEntry

logger = logging.getLogger(__name__)


class GradeStore(ABC):
    @abstractmethod
    def load(self, user_id: str) -> GradeEntries: ...
    @abstractmethod
    def save(self, user_id: str, subject_id: int, entry: GradeEntry) -> None: ...


class SimulationGradeStore(GradeStore):
    """Lives on app.state for the lifetime of the process; cleared on shutdown."""

    def __init__(self):
        self._entries: Dict[str, Dict[int, GradeEntry]] = {}
        self._lock = threading.Lock()

    def load(self, user_id: str) -> GradeEntries:
        with self._lock:
            return dict(self._entries.get(user_id, {}))

    def save(self, user_id: str, subject_id: int, entry: GradeEntry) -> None:
        with self._lock:
            self._entries.setdefault(user_id, {})[subject_id] = entry

    def reset(self, user_id: str) -> None:
        with self._lock:
            self._entries.pop(user_id, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class DatabaseGradeStore(GradeStore):
    def __init__(self, db: Session):
        self.db = db

    def load(self, user_id: str) -> GradeEntries:
        rows = self.db.query(GradeModel).filter(GradeModel.user_id == user_id).all()
        entries = {}
        for r in rows:
            grade = r.grade or 0.0
            if not 0 <= grade <= 10:
                # written outside the API; treat as no grade yet
                logger.warning("Skipping out of range grade user=%s subject=%s grade=%s", user_id, r.subject_id, grade)
                continue
            entries[r.subject_id] = GradeEntry(grade=grade, completed=bool(r.completed))
        return entries

    def save(self, user_id: str, subject_id: int, entry: GradeEntry) -> None:
        row = (
            self.db.query(GradeModel)
            .filter(GradeModel.user_id == user_id, GradeModel.subject_id == subject_id)
            .first()
        )
        if row is None:
            row = GradeModel(user_id=user_id, subject_id=subject_id)
            self.db.add(row)
        row.grade = entry.grade
        row.completed = entry.completed
        self.db.commit()
        logger.info("Saved grade user=%s subject=%s grade=%s completed=%s",
                    user_id, subject_id, entry.grade, entry.completed)
