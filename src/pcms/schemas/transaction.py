"""Transaction response schemas."""

from decimal import Decimal

from pcms.models import TransactionStatus, TransactionType
from pcms.schemas.common import CamelModel, UtcDatetime


class TransactionDTO(CamelModel):
    transaction_id: str
    member_id: str
    contribution_id: str | None
    debit_account_id: str
    credit_account_id: str
    transaction_type: TransactionType
    amount: Decimal
    transaction_status: TransactionStatus
    reference_number: str | None
    description: str | None
    transaction_date: UtcDatetime
    processed_date: UtcDatetime | None
    is_reversed: bool
