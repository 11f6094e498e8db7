"""Validation-gated CRUD use cases for Person records."""

from __future__ import annotations

import logging
from typing import Optional

from person_api.domain.person import Person
from person_api.domain.validation import check_name, validate_person
from person_api.repositories.base import PersonRepository

logger = logging.getLogger(__name__)

ERROR_SEPARATOR = ";"


class PersonValidationError(Exception):
    """Raised when input fails validation. The repository was not called."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return ERROR_SEPARATOR.join(self.errors)

    def __str__(self) -> str:
        return self.message


class PersonService:
    """
    Runs the validation policy for each operation, then delegates to the
    injected repository. Holds no Person state of its own.

    Repository exceptions are not caught.
    """

    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository

    def _raise_if_invalid(self, operation: str, errors: list[str]) -> None:
        if errors:
            logger.info("Rejected %s: %s", operation, ERROR_SEPARATOR.join(errors))
            raise PersonValidationError(errors)

    def insert(self, person: Optional[Person]) -> Person:
        self._raise_if_invalid("insert", validate_person(person))
        logger.debug("Inserting person %s", person.name)
        return self.repository.insert(person)

    def update(self, person: Optional[Person]) -> None:
        name = person.name if person is not None else None
        self._raise_if_invalid("update", check_name(name))
        logger.debug("Updating person %s", name)
        self.repository.update(person)

    def delete(self, name: Optional[str]) -> None:
        self._raise_if_invalid("delete", check_name(name))
        logger.debug("Deleting person %s", name)
        self.repository.delete(name)

    def get(self, name: Optional[str]) -> Optional[Person]:
        self._raise_if_invalid("get", check_name(name))
        return self.repository.get(name)
