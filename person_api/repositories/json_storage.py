"""
JSON file persistence adapter.

The whole file is read on every call and rewritten on every write; this
suits scripts and small deployments, not concurrent writers.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from person_api.domain.person import Person
from person_api.repositories.base import DuplicatePersonError, PersonRepository

logger = logging.getLogger(__name__)


def load(path: Path) -> dict:
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            return db_defaults(json.load(f))
    return {"persons": {}}


def save(path: Path, db: dict) -> None:
    path.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")


def db_defaults(db: dict) -> dict:
    db.setdefault("persons", {})
    return db


class JsonPersonRepository(PersonRepository):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def insert(self, person: Person) -> Person:
        db = load(self.path)
        if person.name in db["persons"]:
            raise DuplicatePersonError(person.name)
        db["persons"][person.name] = person.to_dict()
        save(self.path, db)
        logger.debug("Inserted person %s into %s", person.name, self.path)
        return Person.from_dict(db["persons"][person.name])

    def update(self, person: Person) -> None:
        db = load(self.path)
        if person.name not in db["persons"]:
            return
        db["persons"][person.name] = person.to_dict()
        save(self.path, db)
        logger.debug("Updated person %s in %s", person.name, self.path)

    def delete(self, name: str) -> None:
        db = load(self.path)
        if db["persons"].pop(name, None) is None:
            return
        save(self.path, db)
        logger.debug("Deleted person %s from %s", name, self.path)

    def get(self, name: str) -> Optional[Person]:
        data = load(self.path)["persons"].get(name)
        return Person.from_dict(data) if data else None
