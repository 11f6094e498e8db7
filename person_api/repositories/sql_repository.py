"""Person repository backed by SQLAlchemy."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError

from person_api.db.models import PersonRecord
from person_api.db.session import get_session
from person_api.domain.person import Person
from person_api.repositories.base import DuplicatePersonError, PersonRepository

logger = logging.getLogger(__name__)


def _record_to_person(record: PersonRecord) -> Person:
    return Person(name=record.name, age=record.age, gender=record.gender)


class SQLPersonRepository(PersonRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    def insert(self, person: Person) -> Person:
        now = datetime.now(timezone.utc)
        record = PersonRecord(
            name=person.name,
            age=person.age,
            gender=person.gender,
            created_at=now,
            updated_at=now,
        )
        with get_session() as session:
            session.add(record)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicatePersonError(person.name) from exc
            session.refresh(record)
            logger.debug("Inserted person %s", person.name)
            return _record_to_person(record)

    def update(self, person: Person) -> None:
        with get_session() as session:
            stmt = (
                update(PersonRecord)
                .where(PersonRecord.name == person.name)
                .values(age=person.age, gender=person.gender, updated_at=datetime.now(timezone.utc))
            )
            session.execute(stmt)
            session.commit()
        logger.debug("Updated person %s", person.name)

    def delete(self, name: str) -> None:
        with get_session() as session:
            session.execute(delete(PersonRecord).where(PersonRecord.name == name))
            session.commit()
        logger.debug("Deleted person %s", name)

    def get(self, name: str) -> Optional[Person]:
        with get_session() as session:
            record = session.get(PersonRecord, name)
            return _record_to_person(record) if record else None
