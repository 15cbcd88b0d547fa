"""Employer data-access layer."""

from sqlalchemy import or_

from pcms.models import Employer
from pcms.repositories.base import GenericRepository
from pcms.schemas.pagination import DEFAULT_PAGE_SIZE, UNPAGED, PaginatedList


class EmployerRepository(GenericRepository[Employer]):
    model = Employer

    async def find_conflicting(
        self, contact_email: str, registration_number: str, exclude_id: str | None = None
    ) -> Employer | None:
        """Another employer (deleted ones included) using this email or registration number."""
        stmt = self.query(
            or_(
                Employer.contact_email == contact_email.lower(),
                Employer.registration_number == registration_number,
            ),
            include_deleted=True,
        )
        if exclude_id is not None:
            stmt = stmt.where(Employer.employer_id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalars().first()

    async def list_by_status(
        self,
        is_active: bool,
        page_index: int = UNPAGED,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedList[Employer]:
        return await self.list_page(
            Employer.is_active == is_active,
            page_index=page_index,
            page_size=page_size,
        )
