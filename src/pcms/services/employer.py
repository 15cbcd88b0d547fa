"""Employer business logic.

Employers are looked up by members (EMPLOYEE membership) and by the
contribution flow, which debits the employer's bank account for
employer-sponsored pension contributions.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pcms.literals import ResponseCode, ResponseMessage
from pcms.logging import get_logger
from pcms.models import Employer
from pcms.repositories.employer import EmployerRepository
from pcms.results import Failure, Outcome, Success
from pcms.schemas.employer import EmployerDTO, EmployerRequest
from pcms.schemas.pagination import PaginatedList

logger = get_logger(__name__)

EMPLOYER_NOT_FOUND = Failure(ResponseCode.EMPLOYER_NOT_FOUND, ResponseMessage.EMPLOYER_NOT_FOUND)
EMPLOYER_ALREADY_EXISTS = Failure(
    ResponseCode.EMPLOYER_ALREADY_EXISTS, ResponseMessage.EMPLOYER_ALREADY_EXISTS
)


async def retrieve_all_employers(
    db: AsyncSession, page_index: int, page_size: int
) -> Outcome[PaginatedList[EmployerDTO]]:
    logger.info("employers_requested", page_index=page_index, page_size=page_size)
    page = await EmployerRepository(db).list_page(page_index=page_index, page_size=page_size)
    return Success(page.project(EmployerDTO.model_validate))


async def retrieve_employers_by_status(
    db: AsyncSession, is_active: bool, page_index: int, page_size: int
) -> Outcome[PaginatedList[EmployerDTO]]:
    logger.info(
        "employers_by_status_requested",
        is_active=is_active,
        page_index=page_index,
        page_size=page_size,
    )
    page = await EmployerRepository(db).list_by_status(is_active, page_index, page_size)
    return Success(page.project(EmployerDTO.model_validate))


async def retrieve_employer_by_id(db: AsyncSession, employer_id: str) -> Outcome[EmployerDTO]:
    employer = await EmployerRepository(db).get_by_id(employer_id)
    if employer is None:
        logger.warning("employer_not_found", employer_id=employer_id)
        return EMPLOYER_NOT_FOUND
    return Success(EmployerDTO.model_validate(employer))


async def create_employer(db: AsyncSession, request: EmployerRequest) -> Outcome[EmployerDTO]:
    repository = EmployerRepository(db)
    if await repository.find_conflicting(request.contact_email, request.registration_number):
        logger.warning("employer_already_exists", contact_email=request.contact_email)
        return EMPLOYER_ALREADY_EXISTS

    employer = await repository.add(Employer(**request.model_dump()))
    logger.info("employer_created", employer_id=employer.employer_id)
    return Success(EmployerDTO.model_validate(employer))


async def update_employer(
    db: AsyncSession, employer_id: str, request: EmployerRequest
) -> Outcome[EmployerDTO]:
    repository = EmployerRepository(db)
    employer = await repository.get_by_id(employer_id)
    if employer is None:
        logger.warning("employer_not_found", employer_id=employer_id)
        return EMPLOYER_NOT_FOUND

    conflict = await repository.find_conflicting(
        request.contact_email, request.registration_number, exclude_id=employer_id
    )
    if conflict is not None:
        logger.warning("employer_update_rejected", employer_id=employer_id)
        return EMPLOYER_ALREADY_EXISTS

    for field, value in request.model_dump().items():
        setattr(employer, field, value)
    await repository.update(employer)
    logger.info("employer_updated", employer_id=employer_id)
    return Success(EmployerDTO.model_validate(employer))


async def soft_delete_employer(db: AsyncSession, employer_id: str) -> Outcome[None]:
    deleted = await EmployerRepository(db).soft_delete(employer_id)
    if not deleted:
        logger.warning("employer_not_found", employer_id=employer_id)
        return EMPLOYER_NOT_FOUND
    logger.info("employer_deleted", employer_id=employer_id)
    return Success(None, ResponseMessage.EMPLOYER_DELETED)
