from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from person_api import cli  # noqa: E402
from person_api.core import config as core_config  # noqa: E402
from person_api.db import session as db_session  # noqa: E402
from person_api.domain.person import Gender, Person  # noqa: E402
from person_api.repositories.memory_repository import InMemoryPersonRepository  # noqa: E402
from person_api.repositories.sql_repository import SQLPersonRepository  # noqa: E402
from person_api.services.person_service import PersonService  # noqa: E402


@pytest.fixture()
def service():
    return PersonService(InMemoryPersonRepository())


def test_add_then_get(service, capsys):
    assert cli.run(["add", "--name", "Ana", "--age", "30", "--gender", "F"], service) == 0
    assert cli.run(["get", "Ana"], service) == 0

    out = capsys.readouterr().out
    assert "OK: Ana inserted" in out
    assert "Gender: F" in out


def test_add_without_fields_prints_errors(service, capsys):
    assert cli.run(["add"], service) == 1

    err = capsys.readouterr().err
    assert "Name is required;Gender is required" in err


def test_delete_blank_name_fails(service, capsys):
    assert cli.run(["delete", " "], service) == 1
    assert "Name is required" in capsys.readouterr().err


def test_get_unknown_person(service, capsys):
    assert cli.run(["get", "Ghost"], service) == 1
    assert "not found" in capsys.readouterr().err


def test_add_duplicate_reports_repository_error(service, capsys):
    cli.run(["add", "--name", "Ana", "--gender", "F"], service)

    assert cli.run(["add", "--name", "Ana", "--gender", "F"], service) == 1
    assert "already exists" in capsys.readouterr().err


def test_init_db_creates_tables(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        assert cli.run(["init-db"]) == 0
        SQLPersonRepository().insert(Person(name="Ana", age=1, gender=Gender.F))
        assert SQLPersonRepository().get("Ana") is not None
    finally:
        db_session.get_engine().dispose()
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    assert "created successfully" in capsys.readouterr().out


def test_get_after_update_without_gender(service, capsys):
    cli.run(["add", "--name", "Ana", "--age", "1", "--gender", "F"], service)
    service.update(Person(name="Ana", age=2, gender=None))

    assert cli.run(["get", "Ana"], service) == 0

    out = capsys.readouterr().out
    assert "Age: 2" in out
    assert "Gender: -" in out


def test_init_db_without_database_url_fails_cleanly(monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", "")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    try:
        assert cli.run(["init-db"]) == 1
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()

    assert "DATABASE_URL" in capsys.readouterr().err


def test_get_before_tables_exist_reports_database_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'empty.db'}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        assert cli.run(["get", "Ana"], PersonService(SQLPersonRepository())) == 1
    finally:
        db_session.get_engine().dispose()
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    assert "Database error" in capsys.readouterr().err
