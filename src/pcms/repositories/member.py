"""Member data-access layer."""

from pcms.models import Member, MembershipType
from pcms.repositories.base import GenericRepository
from pcms.schemas.pagination import DEFAULT_PAGE_SIZE, UNPAGED, PaginatedList


class MemberRepository(GenericRepository[Member]):
    model = Member

    async def get_by_email(self, email: str) -> Member | None:
        return await self.get(Member.email == email.lower(), include_deleted=True)

    async def list_by_type(
        self,
        membership_type: MembershipType,
        page_index: int = UNPAGED,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedList[Member]:
        return await self.list_page(
            Member.membership_type == membership_type,
            page_index=page_index,
            page_size=page_size,
        )
