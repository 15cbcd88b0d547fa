"""Pension account data-access layer."""

from sqlalchemy import select

from pcms.models import Account, AccountType
from pcms.repositories.base import GenericRepository


class AccountRepository(GenericRepository[Account]):
    model = Account

    async def list_for_member(self, member_id: str) -> list[Account]:
        return await self.list_all(Account.member_id == member_id)

    async def pension_account_number_exists(self, number: str) -> bool:
        stmt = select(Account.account_id).where(Account.pension_account_number == number)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def first_for_member(
        self, member_id: str, account_type: AccountType
    ) -> Account | None:
        """The member's oldest live account of the given type."""
        stmt = self.query(Account.member_id == member_id, Account.account_type == account_type)
        result = await self.db.execute(stmt.limit(1))
        return result.scalars().first()
