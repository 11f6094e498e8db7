"""SQLAlchemy models backing the SQL repository."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Enum, Integer, String, func

from person_api.domain.person import Gender

from .session import Base


class PersonRecord(Base):
    __tablename__ = "persons"

    name = Column(String(255), primary_key=True)
    age = Column(Integer, nullable=True)
    gender = Column(Enum(Gender, name="gender"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
