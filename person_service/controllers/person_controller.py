# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Person CRUD under /api/persons.
Pure HTTP layer — each route is one repository call. Missing records
answer 404 with an empty body.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path
from starlette.responses import Response

from person_service.core.dependencies import get_person_repo
from person_service.models.domain import Person
from person_service.repositories import PersonRepository
from person_service.schemas import PersonIn, PersonOut

router = APIRouter(prefix="/api/persons", tags=["Persons"])

_NOT_FOUND = {404: {"description": "Person not found (empty body)"}}

# ids outside the store's BIGINT range are rejected with 422 before any query runs
PersonId = Annotated[int, Path(ge=-(2 ** 63), le=2 ** 63 - 1)]


@router.get("", response_model=List[PersonOut])
def list_persons(repo: PersonRepository = Depends(get_person_repo)):
    return repo.find_all()


@router.get("/{person_id}", response_model=PersonOut, responses=_NOT_FOUND)
def get_person(person_id: PersonId, repo: PersonRepository = Depends(get_person_repo)):
    person = repo.find_by_id(person_id)
    if person is None:
        return Response(status_code=404)
    return person


@router.post("", response_model=PersonOut)
def create_person(body: PersonIn, repo: PersonRepository = Depends(get_person_repo)):
    return repo.save(Person(name=body.name, email=body.email))


@router.put("/{person_id}", response_model=PersonOut, responses=_NOT_FOUND)
def update_person(person_id: PersonId, body: PersonIn,
                  repo: PersonRepository = Depends(get_person_repo)):
    current = repo.find_by_id(person_id)
    if current is None:
        return Response(status_code=404)
    # name and email are always overwritten, even with empty values
    updated = current.model_copy(update={"name": body.name, "email": body.email})
    return repo.save(updated)


@router.delete("/{person_id}", status_code=204, response_class=Response, responses=_NOT_FOUND)
def delete_person(person_id: PersonId, repo: PersonRepository = Depends(get_person_repo)):
    if not repo.exists_by_id(person_id):
        return Response(status_code=404)
    repo.delete_by_id(person_id)
    return Response(status_code=204)
