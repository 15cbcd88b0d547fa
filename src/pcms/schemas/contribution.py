"""Contribution request and response schemas."""

from decimal import Decimal

from pydantic import Field

from pcms.models import AccountType, ContributionType
from pcms.schemas.common import CamelModel, UtcDatetime


class NewContributionRequest(CamelModel):
    member_id: str = Field(min_length=1)
    # Which pension account is credited, and so who pays: the member or the employer.
    account_type: AccountType
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    contribution_type: ContributionType


class ContributionDTO(CamelModel):
    contribution_id: str
    member_id: str
    pension_account_number: str
    amount: Decimal
    contribution_type: ContributionType
    is_validated: bool
    created_date: UtcDatetime


class ContributionSummaryDTO(CamelModel):
    member_id: str
    total_contributions: Decimal
    monthly_contributions: Decimal
    voluntary_contributions: Decimal
    last_contribution_date: UtcDatetime | None
    contribution_count: int

