"""Abstract repository interface for Person storage."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from person_api.domain.person import Person


class RepositoryError(Exception):
    """Base class for storage-level failures."""


class DuplicatePersonError(RepositoryError):
    """Raised when inserting a name that is already stored."""

    def __init__(self, name: str):
        super().__init__(f"Person '{name}' already exists")
        self.name = name


class PersonRepository(ABC):
    """
    CRUD over a store of Person records keyed by name.

    Callers get copies back; mutating a returned Person does not change what
    is stored.
    """

    @abstractmethod
    def insert(self, person: Person) -> Person:
        """
        Persist a new person and return the stored form.

        Raises:
            DuplicatePersonError: if a person with the same name exists
        """

    @abstractmethod
    def update(self, person: Person) -> None:
        """Replace the stored record whose name matches. Unknown names are ignored."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove the record with that name. Unknown names are ignored."""

    @abstractmethod
    def get(self, name: str) -> Optional[Person]:
        """Return the stored record, or None."""
