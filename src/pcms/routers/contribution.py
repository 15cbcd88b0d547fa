"""Contribution endpoints."""

from fastapi import APIRouter, Response, status

from pcms.dependencies import DB, AppSettings, Page
from pcms.results import map_success
from pcms.routers.common import respond
from pcms.schemas.contribution import (
    ContributionDTO,
    ContributionSummaryDTO,
    NewContributionRequest,
)
from pcms.schemas.pagination import PaginatedResponse
from pcms.schemas.result import DataResult
from pcms.services import contribution as contribution_service

router = APIRouter(prefix="/contributions", tags=["contributions"])

ContributionPage = PaginatedResponse[ContributionDTO]


@router.post("", response_model=DataResult[ContributionDTO], status_code=status.HTTP_201_CREATED)
async def add_contribution(
    body: NewContributionRequest, db: DB, config: AppSettings, response: Response
) -> DataResult[ContributionDTO]:
    """Credit a pension account and record the matching transaction."""
    outcome = await contribution_service.add_contribution(db, body, config)
    return respond(response, outcome, status.HTTP_201_CREATED)


@router.get("/member/{member_id}", response_model=DataResult[ContributionPage])
async def list_member_contributions(
    member_id: str, db: DB, page: Page, response: Response
) -> DataResult[ContributionPage]:
    outcome = await contribution_service.retrieve_contributions_for_member(
        db, member_id, page.page_index, page.page_size
    )
    return respond(response, map_success(outcome, ContributionPage.model_validate))


@router.get("/summary/{member_id}", response_model=DataResult[ContributionSummaryDTO])
async def get_contribution_summary(
    member_id: str, db: DB, response: Response
) -> DataResult[ContributionSummaryDTO]:
    outcome = await contribution_service.retrieve_contribution_summary(db, member_id)
    return respond(response, outcome)


@router.get("/{contribution_id}", response_model=DataResult[ContributionDTO])
async def get_contribution(
    contribution_id: str, db: DB, response: Response
) -> DataResult[ContributionDTO]:
    outcome = await contribution_service.retrieve_contribution_by_id(db, contribution_id)
    return respond(response, outcome)
