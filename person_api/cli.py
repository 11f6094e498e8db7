"""
Manage Person records from the command line using the configured backend.

Usage:
  person-cli init-db
  person-cli add --name Ana --age 30 --gender F
  person-cli get Ana
  person-cli delete Ana
"""
from __future__ import annotations

import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from person_api.core.config import get_settings
from person_api.core.logging_config import setup_logging
from person_api.db.create_tables import create_all
from person_api.domain.person import Gender, Person
from person_api.repositories.base import RepositoryError
from person_api.repositories.factory import build_repository
from person_api.services.person_service import PersonService, PersonValidationError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage Person records")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the SQL tables (needs DATABASE_URL)")

    add = sub.add_parser("add", help="Insert a new person")
    add.add_argument("--name", help="Unique name")
    add.add_argument("--age", type=int, help="Age (any integer)")
    add.add_argument("--gender", choices=[g.value for g in Gender], help="M or F")

    get = sub.add_parser("get", help="Show a person")
    get.add_argument("name")

    delete = sub.add_parser("delete", help="Remove a person")
    delete.add_argument("name")
    return ap


def run(argv: list[str] | None = None, service: PersonService | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "init-db":
        try:
            create_all()
        except (SQLAlchemyError, RuntimeError) as exc:
            print(f"Failed to create tables: {exc}", file=sys.stderr)
            return 1
        print("Database tables created successfully.")
        return 0
    if service is None:
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_file or None)
        service = PersonService(build_repository(settings))

    try:
        if args.command == "add":
            gender = Gender(args.gender) if args.gender else None
            stored = service.insert(Person(name=args.name, age=args.age, gender=gender))
            print(f"OK: {stored.name} inserted")
        elif args.command == "get":
            person = service.get(args.name)
            if person is None:
                print(f"Person '{args.name}' not found", file=sys.stderr)
                return 1
            print(f"  Name: {person.name}")
            print(f"  Age: {person.age if person.age is not None else '-'}")
            print(f"  Gender: {person.gender.value if person.gender is not None else '-'}")
        elif args.command == "delete":
            service.delete(args.name)
            print(f"OK: {args.name} deleted")
    except PersonValidationError as exc:
        print(f"Invalid input: {exc.message}", file=sys.stderr)
        return 1
    except RepositoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (SQLAlchemyError, RuntimeError) as exc:
        # RuntimeError: DATABASE_URL missing for the sql backend
        print(f"Database error: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
