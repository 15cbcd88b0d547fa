"""Transaction queries."""

from sqlalchemy.ext.asyncio import AsyncSession

from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.repositories.member import MemberRepository
from pcms.repositories.transaction import TransactionRepository
from pcms.results import Failure, Outcome, Success
from pcms.schemas.pagination import PaginatedList
from pcms.schemas.transaction import TransactionDTO

logger = get_logger(__name__)


async def retrieve_transactions_for_member(
    db: AsyncSession, member_id: str, page_index: int, page_size: int
) -> Outcome[PaginatedList[TransactionDTO]]:
    """Page through a member's transactions, oldest first."""
    if await MemberRepository(db).get_by_id(member_id) is None:
        logger.warning("member_not_found", member_id=member_id)
        return Failure(ResponseCode.MEMBER_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)

    page = await TransactionRepository(db).list_for_member(member_id, page_index, page_size)
    logger.info(
        "member_transactions_retrieved",
        member_id=member_id,
        total_count=page.total_count,
        page_index=page.page_index,
    )
    return Success(page.project(TransactionDTO.model_validate))


async def retrieve_transaction_by_id(
    db: AsyncSession, transaction_id: str
) -> Outcome[TransactionDTO]:
    transaction = await TransactionRepository(db).get_by_id(transaction_id)
    if transaction is None:
        logger.warning("transaction_not_found", transaction_id=transaction_id)
        return Failure(ResponseCode.TRANSACTION_NOT_FOUND, ResponseMessage.TRANSACTION_NOT_FOUND)
    return Success(TransactionDTO.model_validate(transaction))
