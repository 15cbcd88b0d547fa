"""Transaction endpoints."""

from fastapi import APIRouter, Response

from pcms.dependencies import DB, Page
from pcms.results import map_success
from pcms.routers.common import respond
from pcms.schemas.pagination import PaginatedResponse
from pcms.schemas.result import DataResult
from pcms.schemas.transaction import TransactionDTO
from pcms.services import transaction as transaction_service

router = APIRouter(tags=["transactions"])

TransactionPage = PaginatedResponse[TransactionDTO]


@router.get("/members/{member_id}/transactions", response_model=DataResult[TransactionPage])
async def list_member_transactions(
    member_id: str, db: DB, page: Page, response: Response
) -> DataResult[TransactionPage]:
    outcome = await transaction_service.retrieve_transactions_for_member(
        db, member_id, page.page_index, page.page_size
    )
    return respond(response, map_success(outcome, TransactionPage.model_validate))


@router.get("/transactions/{transaction_id}", response_model=DataResult[TransactionDTO])
async def get_transaction(
    transaction_id: str, db: DB, response: Response
) -> DataResult[TransactionDTO]:
    outcome = await transaction_service.retrieve_transaction_by_id(db, transaction_id)
    return respond(response, outcome)
