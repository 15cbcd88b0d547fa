"""Pension account endpoints."""

from fastapi import APIRouter, Response, status

from pcms.dependencies import DB, Page
from pcms.results import map_success
from pcms.routers.common import respond
from pcms.schemas.account import AccountDTO, NewAccountRequest
from pcms.schemas.pagination import PaginatedResponse
from pcms.schemas.result import DataResult
from pcms.services import account as account_service

router = APIRouter(tags=["accounts"])

AccountPage = PaginatedResponse[AccountDTO]


@router.get("/accounts", response_model=DataResult[AccountPage])
async def list_accounts(db: DB, page: Page, response: Response) -> DataResult[AccountPage]:
    outcome = await account_service.retrieve_all_accounts(db, page.page_index, page.page_size)
    return respond(response, map_success(outcome, AccountPage.model_validate))


@router.get("/accounts/{account_id}", response_model=DataResult[AccountDTO])
async def get_account(account_id: str, db: DB, response: Response) -> DataResult[AccountDTO]:
    outcome = await account_service.retrieve_account_by_id(db, account_id)
    return respond(response, outcome)


@router.post(
    "/accounts", response_model=DataResult[AccountDTO], status_code=status.HTTP_201_CREATED
)
async def create_account(
    body: NewAccountRequest, db: DB, response: Response
) -> DataResult[AccountDTO]:
    outcome = await account_service.add_new_account(db, body)
    return respond(response, outcome, status.HTTP_201_CREATED)


@router.get("/members/{member_id}/accounts", response_model=DataResult[list[AccountDTO]])
async def list_member_accounts(
    member_id: str, db: DB, response: Response
) -> DataResult[list[AccountDTO]]:
    outcome = await account_service.retrieve_accounts_for_member(db, member_id)
    return respond(response, outcome)
