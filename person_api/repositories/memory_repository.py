"""Dict-backed repository, used by default and in tests."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from person_api.domain.person import Person
from person_api.repositories.base import DuplicatePersonError, PersonRepository

logger = logging.getLogger(__name__)


class InMemoryPersonRepository(PersonRepository):
    def __init__(self) -> None:
        self._persons: dict[str, Person] = {}
        self._lock = threading.Lock()

    def insert(self, person: Person) -> Person:
        with self._lock:
            if person.name in self._persons:
                raise DuplicatePersonError(person.name)
            self._persons[person.name] = person.copy()
        logger.debug("Inserted person %s", person.name)
        return person.copy()

    def update(self, person: Person) -> None:
        with self._lock:
            if person.name not in self._persons:
                return
            self._persons[person.name] = person.copy()
        logger.debug("Updated person %s", person.name)

    def delete(self, name: str) -> None:
        with self._lock:
            removed = self._persons.pop(name, None)
        if removed is not None:
            logger.debug("Deleted person %s", name)

    def get(self, name: str) -> Optional[Person]:
        with self._lock:
            person = self._persons.get(name)
        return person.copy() if person is not None else None

    def __len__(self) -> int:
        return len(self._persons)
