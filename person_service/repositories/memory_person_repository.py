# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: in-memory Person storage.
Same contract as the SQL store; state lives for the life of the process.
"""

import itertools
import threading
from typing import Optional

from person_service.core.logging import get_logger
from person_service.models.domain import Person
from person_service.repositories.base import PersonRepository

logger = get_logger(__name__)


class InMemoryPersonRepository(PersonRepository):
    """Dict-backed person storage, safe for concurrent handler threads."""

    def __init__(self) -> None:
        self._store: dict[int, Person] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    # ── Read ──

    def find_all(self) -> list[Person]:
        with self._lock:
            return [p.model_copy() for p in self._store.values()]

    def find_by_id(self, person_id: int) -> Optional[Person]:
        with self._lock:
            person = self._store.get(person_id)
        return person.model_copy() if person else None

    def exists_by_id(self, person_id: int) -> bool:
        with self._lock:
            return person_id in self._store

    # ── Write ──

    def save(self, person: Person) -> Person:
        with self._lock:
            if person.id is None:
                stored = person.model_copy(update={"id": self._next_id()})
                logger.info("Person created id=%s", stored.id)
            else:
                stored = person.model_copy()
                logger.info("Person saved id=%s", stored.id)
            self._store[stored.id] = stored
        return stored.model_copy()

    def delete_by_id(self, person_id: int) -> None:
        with self._lock:
            removed = self._store.pop(person_id, None)
        if removed is not None:
            logger.info("Person deleted id=%s", person_id)

    # ── Internal ──

    def _next_id(self) -> int:
        # skip ids already taken by caller-supplied saves
        new_id = next(self._ids)
        while new_id in self._store:
            new_id = next(self._ids)
        return new_id
