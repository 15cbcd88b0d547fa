"""Member endpoints."""

from fastapi import APIRouter, Response, status

from pcms.dependencies import DB, AppSettings, Page
from pcms.models import MembershipType
from pcms.results import map_success
from pcms.routers.common import respond
from pcms.schemas.member import MemberDTO, MemberRequest
from pcms.schemas.pagination import PaginatedResponse
from pcms.schemas.result import DataResult
from pcms.services import member as member_service

router = APIRouter(prefix="/members", tags=["members"])

MemberPage = PaginatedResponse[MemberDTO]


@router.get("", response_model=DataResult[MemberPage])
async def list_members(db: DB, page: Page, response: Response) -> DataResult[MemberPage]:
    """List members. pageIndex=0 returns all of them as one page."""
    outcome = await member_service.retrieve_all_members(db, page.page_index, page.page_size)
    return respond(response, map_success(outcome, MemberPage.model_validate))


@router.get("/type/{membership_type}", response_model=DataResult[MemberPage])
async def list_members_by_type(
    membership_type: MembershipType, db: DB, page: Page, response: Response
) -> DataResult[MemberPage]:
    outcome = await member_service.retrieve_members_by_type(
        db, membership_type, page.page_index, page.page_size
    )
    return respond(response, map_success(outcome, MemberPage.model_validate))


@router.get("/{member_id}", response_model=DataResult[MemberDTO])
async def get_member(member_id: str, db: DB, response: Response) -> DataResult[MemberDTO]:
    outcome = await member_service.retrieve_member_by_id(db, member_id)
    return respond(response, outcome)


@router.post("", response_model=DataResult[MemberDTO], status_code=status.HTTP_201_CREATED)
async def create_member(
    body: MemberRequest, db: DB, config: AppSettings, response: Response
) -> DataResult[MemberDTO]:
    outcome = await member_service.create_member(db, body, config)
    return respond(response, outcome, status.HTTP_201_CREATED)


@router.put("/{member_id}", response_model=DataResult[MemberDTO])
async def update_member(
    member_id: str, body: MemberRequest, db: DB, config: AppSettings, response: Response
) -> DataResult[MemberDTO]:
    outcome = await member_service.update_member(db, member_id, body, config)
    return respond(response, outcome)


@router.delete("/{member_id}", response_model=DataResult[None])
async def delete_member(member_id: str, db: DB, response: Response) -> DataResult[None]:
    """Soft delete: the row stays, with status DELETED and deletedDate set."""
    outcome = await member_service.soft_delete_member(db, member_id)
    return respond(response, outcome)
