"""Pension account request and response schemas."""

from decimal import Decimal

from pydantic import Field

from pcms.models import AccountType
from pcms.schemas.common import CamelModel, UtcDatetime


class NewAccountRequest(CamelModel):
    member_id: str = Field(min_length=1)
    account_type: AccountType


class AccountDTO(CamelModel):
    account_id: str
    member_id: str
    employer_id: str
    pension_account_number: str
    account_type: AccountType
    total_contributions: Decimal
    current_balance: Decimal
    is_restricted: bool
    is_closed: bool
    created_date: UtcDatetime
