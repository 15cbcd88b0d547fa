"""Transaction data-access layer."""

from pcms.models import Transaction
from pcms.repositories.base import GenericRepository
from pcms.schemas.pagination import DEFAULT_PAGE_SIZE, UNPAGED, PaginatedList


class TransactionRepository(GenericRepository[Transaction]):
    model = Transaction

    async def list_for_member(
        self,
        member_id: str,
        page_index: int = UNPAGED,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedList[Transaction]:
        return await self.list_page(
            Transaction.member_id == member_id,
            page_index=page_index,
            page_size=page_size,
        )
