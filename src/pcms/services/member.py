"""Member business logic.

Every function returns an Outcome: business-rule failures (unknown member,
duplicate email, age out of range) come back as Failure values with a
response code, never as exceptions. Pages of entities are projected to pages
of DTOs without recounting.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from pcms.config import Settings
from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.models import Member, MembershipType
from pcms.repositories.employer import EmployerRepository
from pcms.repositories.member import MemberRepository
from pcms.results import Failure, Outcome, Success
from pcms.schemas.member import MemberDTO, MemberRequest
from pcms.schemas.pagination import PaginatedList

logger = get_logger(__name__)

MEMBER_NOT_FOUND = Failure(ResponseCode.MEMBER_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)


def age_on(date_of_birth: date, today: date) -> int:
    """Completed years between ``date_of_birth`` and ``today``."""
    had_birthday = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (0 if had_birthday else 1)


async def _check_request(
    db: AsyncSession, request: MemberRequest, config: Settings, member_id: str | None = None
) -> Failure | None:
    """Business checks shared by create and update. None means the request is acceptable."""
    age = age_on(request.date_of_birth, date.today())
    if not config.min_member_age <= age <= config.max_member_age:
        return Failure(
            ResponseCode.FAILED_INPUT_VALIDATION,
            f"Age must be between {config.min_member_age} and {config.max_member_age}.",
        )

    if request.employer_id is not None:
        employer = await EmployerRepository(db).get_by_id(request.employer_id)
        if employer is None:
            return Failure(ResponseCode.EMPLOYER_NOT_FOUND, ResponseMessage.EMPLOYER_NOT_FOUND)

    existing = await MemberRepository(db).get_by_email(request.email)
    if existing is not None and existing.member_id != member_id:
        return Failure(ResponseCode.MEMBER_ALREADY_EXISTS, ResponseMessage.MEMBER_ALREADY_EXISTS)
    return None


async def retrieve_all_members(
    db: AsyncSession, page_index: int, page_size: int
) -> Outcome[PaginatedList[MemberDTO]]:
    logger.info("members_requested", page_index=page_index, page_size=page_size)
    page = await MemberRepository(db).list_page(page_index=page_index, page_size=page_size)
    return Success(page.project(MemberDTO.model_validate))


async def retrieve_members_by_type(
    db: AsyncSession, membership_type: MembershipType, page_index: int, page_size: int
) -> Outcome[PaginatedList[MemberDTO]]:
    logger.info(
        "members_by_type_requested",
        membership_type=membership_type.name,
        page_index=page_index,
        page_size=page_size,
    )
    page = await MemberRepository(db).list_by_type(membership_type, page_index, page_size)
    return Success(page.project(MemberDTO.model_validate))


async def retrieve_member_by_id(db: AsyncSession, member_id: str) -> Outcome[MemberDTO]:
    member = await MemberRepository(db).get_by_id(member_id)
    if member is None:
        logger.warning("member_not_found", member_id=member_id)
        return MEMBER_NOT_FOUND
    return Success(MemberDTO.model_validate(member))


async def create_member(
    db: AsyncSession, request: MemberRequest, config: Settings
) -> Outcome[MemberDTO]:
    failure = await _check_request(db, request, config)
    if failure is not None:
        logger.warning("member_creation_rejected", code=failure.code, reason=failure.description)
        return failure

    member = await MemberRepository(db).add(Member(**request.model_dump()))
    logger.info("member_created", member_id=member.member_id)
    return Success(MemberDTO.model_validate(member))


async def update_member(
    db: AsyncSession, member_id: str, request: MemberRequest, config: Settings
) -> Outcome[MemberDTO]:
    repository = MemberRepository(db)
    member = await repository.get_by_id(member_id)
    if member is None:
        logger.warning("member_not_found", member_id=member_id)
        return MEMBER_NOT_FOUND

    failure = await _check_request(db, request, config, member_id=member_id)
    if failure is not None:
        logger.warning("member_update_rejected", member_id=member_id, code=failure.code)
        return failure

    for field, value in request.model_dump().items():
        setattr(member, field, value)
    await repository.update(member)
    logger.info("member_updated", member_id=member_id)
    return Success(MemberDTO.model_validate(member))


async def soft_delete_member(db: AsyncSession, member_id: str) -> Outcome[None]:
    deleted = await MemberRepository(db).soft_delete(member_id)
    if not deleted:
        logger.warning("member_not_found", member_id=member_id)
        return MEMBER_NOT_FOUND
    logger.info("member_deleted", member_id=member_id)
    return Success(None, ResponseMessage.MEMBER_DELETED)
