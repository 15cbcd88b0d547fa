"""Contribution business logic.

A contribution credits one of the member's pension accounts. Posting it
records the contribution, a completed CONTRIBUTION transaction moving the
money from the payer's bank account into the fund collection account, and
the new account totals, all in the request's unit of work.
"""

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from pcms.config import Settings
from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.models import (
    AccountType,
    Contribution,
    ContributionType,
    Member,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from pcms.repositories.account import AccountRepository
from pcms.repositories.contribution import ContributionRepository
from pcms.repositories.employer import EmployerRepository
from pcms.repositories.member import MemberRepository
from pcms.repositories.transaction import TransactionRepository
from pcms.results import Failure, Outcome, Success
from pcms.schemas.contribution import (
    ContributionDTO,
    ContributionSummaryDTO,
    NewContributionRequest,
)
from pcms.schemas.pagination import PaginatedList
from pcms.services.member import MEMBER_NOT_FOUND
from pcms.utils.datetime import utc_now
from pcms.utils.generators import generate_ulid

logger = get_logger(__name__)


@dataclass(frozen=True)
class PostingAccounts:
    debit_account: str
    debit_bank: str | None
    credit_account: str
    credit_bank: str


async def _posting_accounts(
    db: AsyncSession, member: Member, account_type: AccountType, config: Settings
) -> Outcome[PostingAccounts]:
    """Bank accounts to debit and credit for a contribution of ``account_type``.

    Employer-sponsored contributions are paid by the member's employer,
    individual ones by the member.
    """
    if account_type == AccountType.EMPLOYER_SPONSORED_PENSION:
        employer = None
        if member.employer_id is not None:
            employer = await EmployerRepository(db).get_by_id(member.employer_id)
        if employer is None:
            return Failure(ResponseCode.EMPLOYER_NOT_FOUND, ResponseMessage.EMPLOYER_NOT_FOUND)
        debit_account, debit_bank = employer.bank_account_number, employer.bank_name
    else:
        debit_account, debit_bank = member.bank_account_number, member.bank_name

    if not debit_account:
        return Failure(
            ResponseCode.TRANSACTION_PROCESSING_FAILED,
            ResponseMessage.TRANSACTION_PROCESSING_FAILED,
        )
    return Success(
        PostingAccounts(
            debit_account=debit_account,
            debit_bank=debit_bank,
            credit_account=config.fund_account_number,
            credit_bank=config.fund_bank_name,
        )
    )


async def add_contribution(
    db: AsyncSession, request: NewContributionRequest, config: Settings
) -> Outcome[ContributionDTO]:
    member = await MemberRepository(db).get_by_id(request.member_id)
    if member is None:
        logger.warning("member_not_found", member_id=request.member_id)
        return Failure(ResponseCode.MEMBER_ACCOUNT_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)

    accounts = AccountRepository(db)
    pension_account = await accounts.first_for_member(member.member_id, request.account_type)
    if pension_account is None:
        logger.warning(
            "pension_account_not_found",
            member_id=member.member_id,
            account_type=request.account_type.name,
        )
        return Failure(
            ResponseCode.PENSION_ACCOUNT_NOT_FOUND, ResponseMessage.PENSION_ACCOUNT_NOT_FOUND
        )

    posting = await _posting_accounts(db, member, request.account_type, config)
    if isinstance(posting, Failure):
        logger.warning("contribution_posting_failed", member_id=member.member_id, code=posting.code)
        return posting

    contribution = await ContributionRepository(db).add(
        Contribution(
            member_id=member.member_id,
            amount=request.amount,
            pension_account_number=pension_account.pension_account_number,
            contribution_type=request.contribution_type,
        )
    )
    now = utc_now()
    await TransactionRepository(db).add(
        Transaction(
            member_id=member.member_id,
            contribution_id=contribution.contribution_id,
            debit_account_id=posting.data.debit_account,
            debit_account_bank_code=posting.data.debit_bank,
            credit_account_id=posting.data.credit_account,
            credit_account_bank_code=posting.data.credit_bank,
            transaction_type=TransactionType.CONTRIBUTION,
            amount=request.amount,
            transaction_status=TransactionStatus.COMPLETED,
            reference_number=generate_ulid(),
            description=f"{request.account_type.name} contribution",
            transaction_date=now,
            processed_date=now,
        )
    )

    pension_account.total_contributions += request.amount
    pension_account.current_balance += request.amount
    await accounts.update(pension_account)

    logger.info(
        "contribution_added",
        contribution_id=contribution.contribution_id,
        member_id=member.member_id,
        amount=str(request.amount),
    )
    return Success(ContributionDTO.model_validate(contribution))


async def retrieve_contribution_by_id(
    db: AsyncSession, contribution_id: str
) -> Outcome[ContributionDTO]:
    contribution = await ContributionRepository(db).get_by_id(contribution_id)
    if contribution is None:
        logger.warning("contribution_not_found", contribution_id=contribution_id)
        return Failure(ResponseCode.CONTRIBUTION_NOT_FOUND, ResponseMessage.CONTRIBUTION_NOT_FOUND)
    return Success(ContributionDTO.model_validate(contribution))


async def retrieve_contributions_for_member(
    db: AsyncSession, member_id: str, page_index: int, page_size: int
) -> Outcome[PaginatedList[ContributionDTO]]:
    if await MemberRepository(db).get_by_id(member_id) is None:
        logger.warning("member_not_found", member_id=member_id)
        return MEMBER_NOT_FOUND

    page = await ContributionRepository(db).list_for_member(member_id, page_index, page_size)
    return Success(page.project(ContributionDTO.model_validate))


async def retrieve_contribution_summary(
    db: AsyncSession, member_id: str
) -> Outcome[ContributionSummaryDTO]:
    """Totals by contribution type, with the date of the latest contribution."""
    if await MemberRepository(db).get_by_id(member_id) is None:
        logger.warning("member_not_found", member_id=member_id)
        return MEMBER_NOT_FOUND

    contributions = await ContributionRepository(db).all_for_member(member_id)
    return Success(
        ContributionSummaryDTO(
            member_id=member_id,
            total_contributions=sum((c.amount for c in contributions), start=Decimal(0)),
            monthly_contributions=_total_of(contributions, ContributionType.MONTHLY),
            voluntary_contributions=_total_of(contributions, ContributionType.VOLUNTARY),
            last_contribution_date=max((c.created_date for c in contributions), default=None),
            contribution_count=len(contributions),
        )
    )


def _total_of(contributions: list[Contribution], contribution_type: ContributionType) -> Decimal:
    return sum(
        (c.amount for c in contributions if c.contribution_type == contribution_type),
        start=Decimal(0),
    )
