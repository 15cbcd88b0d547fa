"""Pension account business logic."""

import secrets

from sqlalchemy.ext.asyncio import AsyncSession

from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.models import Account
from pcms.repositories.account import AccountRepository
from pcms.repositories.member import MemberRepository
from pcms.results import Failure, Outcome, Success
from pcms.schemas.account import AccountDTO, NewAccountRequest
from pcms.schemas.pagination import PaginatedList

logger = get_logger(__name__)

# Pension account numbers are 10-digit numbers in this range.
ACCOUNT_NUMBER_MIN = 1_000_000_000
ACCOUNT_NUMBER_MAX = 2_147_483_647
ACCOUNT_NUMBER_ATTEMPTS = 5
NO_EMPLOYER = "N/A"


def generate_pension_account_number() -> str:
    return str(ACCOUNT_NUMBER_MIN + secrets.randbelow(ACCOUNT_NUMBER_MAX - ACCOUNT_NUMBER_MIN))


async def _unused_account_number(repository: AccountRepository) -> str:
    for _ in range(ACCOUNT_NUMBER_ATTEMPTS):
        number = generate_pension_account_number()
        if not await repository.pension_account_number_exists(number):
            return number
    raise RuntimeError("could not allocate an unused pension account number")


async def retrieve_all_accounts(
    db: AsyncSession, page_index: int, page_size: int
) -> Outcome[PaginatedList[AccountDTO]]:
    logger.info("accounts_requested", page_index=page_index, page_size=page_size)
    page = await AccountRepository(db).list_page(page_index=page_index, page_size=page_size)
    return Success(page.project(AccountDTO.model_validate))


async def retrieve_account_by_id(db: AsyncSession, account_id: str) -> Outcome[AccountDTO]:
    account = await AccountRepository(db).get_by_id(account_id)
    if account is None:
        logger.warning("account_not_found", account_id=account_id)
        return Failure(ResponseCode.ACCOUNT_NOT_FOUND, ResponseMessage.ACCOUNT_NOT_FOUND)
    return Success(AccountDTO.model_validate(account))


async def retrieve_accounts_for_member(
    db: AsyncSession, member_id: str
) -> Outcome[list[AccountDTO]]:
    if await MemberRepository(db).get_by_id(member_id) is None:
        logger.warning("member_not_found", member_id=member_id)
        return Failure(ResponseCode.MEMBER_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)
    accounts = await AccountRepository(db).list_for_member(member_id)
    return Success([AccountDTO.model_validate(account) for account in accounts])


async def add_new_account(db: AsyncSession, request: NewAccountRequest) -> Outcome[AccountDTO]:
    member = await MemberRepository(db).get_by_id(request.member_id)
    if member is None:
        logger.warning("member_not_found", member_id=request.member_id)
        return Failure(ResponseCode.MEMBER_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)

    repository = AccountRepository(db)
    account = await repository.add(
        Account(
            member_id=member.member_id,
            employer_id=member.employer_id or NO_EMPLOYER,
            pension_account_number=await _unused_account_number(repository),
            account_type=request.account_type,
        )
    )
    logger.info("account_created", account_id=account.account_id, member_id=member.member_id)
    return Success(AccountDTO.model_validate(account))
