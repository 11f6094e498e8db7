"""Schema creation for the SQL backend (used by ``person-cli init-db``)."""
from __future__ import annotations

from .session import Base, get_engine
from . import models  # noqa: F401  # registers PersonRecord on Base.metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())
