"""Contribution data-access layer."""

from pcms.models import Contribution
from pcms.repositories.base import GenericRepository
from pcms.schemas.pagination import DEFAULT_PAGE_SIZE, UNPAGED, PaginatedList


class ContributionRepository(GenericRepository[Contribution]):
    model = Contribution

    async def list_for_member(
        self,
        member_id: str,
        page_index: int = UNPAGED,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedList[Contribution]:
        return await self.list_page(
            Contribution.member_id == member_id,
            page_index=page_index,
            page_size=page_size,
        )

    async def all_for_member(self, member_id: str) -> list[Contribution]:
        return await self.list_all(Contribution.member_id == member_id)
