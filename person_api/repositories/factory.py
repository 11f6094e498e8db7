"""Build the repository selected by settings."""
from __future__ import annotations

from person_api.core.config import Settings
from person_api.repositories.base import PersonRepository
from person_api.repositories.json_storage import JsonPersonRepository
from person_api.repositories.memory_repository import InMemoryPersonRepository
from person_api.repositories.sql_repository import SQLPersonRepository


def build_repository(settings: Settings) -> PersonRepository:
    backend = settings.person_backend
    if backend == "memory":
        return InMemoryPersonRepository()
    if backend == "json":
        return JsonPersonRepository(settings.data_file)
    if backend == "sql":
        return SQLPersonRepository()
    raise ValueError(f"Unknown PERSON_BACKEND '{backend}'")
