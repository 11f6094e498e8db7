"""FastAPI application exposing the Person service over HTTP."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from person_api.core.config import get_settings
from person_api.core.logging_config import setup_logging
from person_api.repositories.factory import build_repository
from person_api.routers import persons as persons_router
from person_api.services.person_service import PersonService


def create_app(service: Optional[PersonService] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    application = FastAPI(title="Person API")
    application.state.person_service = service or PersonService(build_repository(settings))
    application.include_router(persons_router.router)
    return application
