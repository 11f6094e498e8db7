from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from person_api.domain.person import Gender, Person
from person_api.repositories.base import DuplicatePersonError
from person_api.services.person_service import PersonService, PersonValidationError

router = APIRouter(prefix="/persons", tags=["persons"])


class PersonPayload(BaseModel):
    # all optional: the service decides what is required
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[Gender] = None

    def to_person(self) -> Person:
        return Person(name=self.name, age=self.age, gender=self.gender)


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService not configured")
    return svc


def _validation_response(exc: PersonValidationError) -> JSONResponse:
    return JSONResponse({"detail": exc.message, "errors": exc.errors}, status_code=422)


@router.post("", status_code=201)
def create_person(request: Request, payload: Optional[PersonPayload] = Body(None)):
    svc = _get_person_service(request)
    person = payload.to_person() if payload is not None else None
    try:
        stored = svc.insert(person)
    except PersonValidationError as exc:
        return _validation_response(exc)
    except DuplicatePersonError as exc:
        raise HTTPException(409, str(exc))
    return stored.to_dict()


@router.put("", status_code=204)
def update_person(request: Request, payload: Optional[PersonPayload] = Body(None)):
    svc = _get_person_service(request)
    person = payload.to_person() if payload is not None else None
    try:
        svc.update(person)
    except PersonValidationError as exc:
        return _validation_response(exc)
    return Response(status_code=204)


@router.get("/{name}")
def get_person(name: str, request: Request):
    svc = _get_person_service(request)
    try:
        person = svc.get(name)
    except PersonValidationError as exc:
        return _validation_response(exc)
    if person is None:
        raise HTTPException(404, "Person not found")
    return person.to_dict()


@router.delete("/{name}", status_code=204)
def delete_person(name: str, request: Request):
    svc = _get_person_service(request)
    try:
        svc.delete(name)
    except PersonValidationError as exc:
        return _validation_response(exc)
    return Response(status_code=204)
