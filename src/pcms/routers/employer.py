"""Employer endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from pcms.dependencies import DB, Page
from pcms.results import map_success
from pcms.routers.common import respond
from pcms.schemas.employer import EmployerDTO, EmployerRequest
from pcms.schemas.pagination import PaginatedResponse
from pcms.schemas.result import DataResult
from pcms.services import employer as employer_service

router = APIRouter(prefix="/employers", tags=["employers"])

EmployerPage = PaginatedResponse[EmployerDTO]


@router.get("", response_model=DataResult[EmployerPage])
async def list_employers(db: DB, page: Page, response: Response) -> DataResult[EmployerPage]:
    outcome = await employer_service.retrieve_all_employers(db, page.page_index, page.page_size)
    return respond(response, map_success(outcome, EmployerPage.model_validate))


# Declared before /{employer_id} so "by-status" is not taken for an id.
@router.get("/by-status", response_model=DataResult[EmployerPage])
async def list_employers_by_status(
    is_active: Annotated[bool, Query(alias="isActive")],
    db: DB,
    page: Page,
    response: Response,
) -> DataResult[EmployerPage]:
    outcome = await employer_service.retrieve_employers_by_status(
        db, is_active, page.page_index, page.page_size
    )
    return respond(response, map_success(outcome, EmployerPage.model_validate))


@router.get("/{employer_id}", response_model=DataResult[EmployerDTO])
async def get_employer(employer_id: str, db: DB, response: Response) -> DataResult[EmployerDTO]:
    outcome = await employer_service.retrieve_employer_by_id(db, employer_id)
    return respond(response, outcome)


@router.post("", response_model=DataResult[EmployerDTO], status_code=status.HTTP_201_CREATED)
async def register_employer(
    body: EmployerRequest, db: DB, response: Response
) -> DataResult[EmployerDTO]:
    outcome = await employer_service.create_employer(db, body)
    return respond(response, outcome, status.HTTP_201_CREATED)


@router.put("/{employer_id}", response_model=DataResult[EmployerDTO])
async def update_employer(
    employer_id: str, body: EmployerRequest, db: DB, response: Response
) -> DataResult[EmployerDTO]:
    outcome = await employer_service.update_employer(db, employer_id, body)
    return respond(response, outcome)


@router.delete("/{employer_id}", response_model=DataResult[None])
async def delete_employer(employer_id: str, db: DB, response: Response) -> DataResult[None]:
    outcome = await employer_service.soft_delete_employer(db, employer_id)
    return respond(response, outcome)
