"""Field checks applied before any repository call."""
from __future__ import annotations

from typing import Optional

from person_api.domain.person import Gender, Person

NAME_REQUIRED = "Name is required"
GENDER_REQUIRED = "Gender is required"


def check_name(name: Optional[str]) -> list[str]:
    """Absent, empty and whitespace-only names all fail the same way."""
    if name is None or not name.strip():
        return [NAME_REQUIRED]
    return []


def check_gender(gender: Optional[Gender]) -> list[str]:
    if gender is None:
        return [GENDER_REQUIRED]
    return []


def validate_person(person: Optional[Person]) -> list[str]:
    """Full validation used on insert. Name errors always come first."""
    if person is None:
        return [NAME_REQUIRED, GENDER_REQUIRED]
    return check_name(person.name) + check_gender(person.gender)
