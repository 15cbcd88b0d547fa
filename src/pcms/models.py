"""SQLAlchemy models.

Every persisted record inherits from ``Entity``, which owns the lifecycle
columns (status and audit timestamps) and the construction-time identity
assignment. Models must inherit from Base (through Entity) so that
``Base.metadata`` knows about them.
"""

import enum
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pcms.db.session import Base
from pcms.utils.datetime import utc_now
from pcms.utils.generators import generate_ulid

ID_LENGTH = 26  # ULID


class Status(enum.IntEnum):
    PASSIVE = 1
    ACTIVE = 2
    DELETED = 3


class MembershipType(enum.IntEnum):
    EMPLOYER = 1
    EMPLOYEE = 2
    INDIVIDUAL = 3


class AccountType(enum.IntEnum):
    INDIVIDUAL_CONTRIBUTION = 1
    EMPLOYER_SPONSORED_PENSION = 2


class ContributionType(enum.IntEnum):
    MONTHLY = 1
    VOLUNTARY = 2


class TransactionType(enum.IntEnum):
    CONTRIBUTION = 1
    WITHDRAWAL = 2
    INTEREST = 3
    REFUND = 4


class TransactionStatus(enum.IntEnum):
    PENDING = 1
    COMPLETED = 2
    FAILED = 3
    REVERSED = 4


def _enum_column(enum_type: type[enum.Enum]) -> Enum:
    return Enum(enum_type, native_enum=False, length=32)


class LifecycleColumns:
    """Status and audit timestamp columns shared by every entity."""

    status: Mapped[Status] = mapped_column(_enum_column(Status), default=Status.ACTIVE)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    modified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    deleted_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class Entity(LifecycleColumns, Base):
    """Base class for persisted records.

    On construction an entity receives a fresh ULID through
    ``assign_identifier``, ``created_date`` set to now (UTC) and ``status``
    set to ACTIVE. Keyword arguments are applied afterwards, so explicit
    values win. Rows loaded from the database bypass ``__init__``; the
    identifier and creation date are therefore assigned exactly once.

    ``modified_date`` and ``deleted_date`` stay unset until the repository
    calls ``mark_modified`` or ``mark_deleted``.
    """

    __abstract__ = True

    def __init__(self, **kwargs: Any) -> None:
        self.assign_identifier(generate_ulid())
        self.created_date = utc_now()
        self.status = Status.ACTIVE
        super().__init__(**kwargs)

    def assign_identifier(self, identifier: str) -> None:
        """Store a newly generated identifier on the entity.

        Entities with a string ``<name>_id`` key override this. The default
        leaves identity to the concrete type.
        """

    def mark_modified(self) -> None:
        self.modified_date = utc_now()

    def mark_deleted(self) -> None:
        now = utc_now()
        self.status = Status.DELETED
        self.deleted_date = now
        self.modified_date = now

    @property
    def is_deleted(self) -> bool:
        return self.deleted_date is not None


class Employer(Entity):
    __tablename__ = "employers"

    employer_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    company_name: Mapped[str] = mapped_column(String(200))
    registration_number: Mapped[str] = mapped_column(String(50), unique=True)
    tax_identification_number: Mapped[str | None] = mapped_column(String(50))
    industry: Mapped[str | None] = mapped_column(String(100))
    contact_email: Mapped[str] = mapped_column(String(254), unique=True)
    contact_phone: Mapped[str | None] = mapped_column(String(30))
    website_url: Mapped[str | None] = mapped_column(String(200))
    address: Mapped[str | None] = mapped_column(String(300))
    country: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    city: Mapped[str | None] = mapped_column(String(100))
    bank_account_number: Mapped[str] = mapped_column(String(20))
    bank_name: Mapped[str] = mapped_column(String(100))
    number_of_employees: Mapped[int] = mapped_column(default=0)
    pension_contribution_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    is_active: Mapped[bool] = mapped_column(default=True)

    employees: Mapped[list["Member"]] = relationship(back_populates="employer")

    def assign_identifier(self, identifier: str) -> None:
        self.employer_id = identifier


class Member(Entity):
    __tablename__ = "members"

    member_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(254), unique=True)
    phone_number: Mapped[str | None] = mapped_column(String(30))
    date_of_birth: Mapped[date]
    national_identification_number: Mapped[str | None] = mapped_column(String(30))
    address: Mapped[str | None] = mapped_column(String(300))
    bank_account_number: Mapped[str | None] = mapped_column(String(20))
    bank_name: Mapped[str | None] = mapped_column(String(100))
    employer_id: Mapped[str | None] = mapped_column(
        ForeignKey("employers.employer_id"), index=True
    )
    membership_type: Mapped[MembershipType] = mapped_column(_enum_column(MembershipType))
    is_eligible_for_benefits: Mapped[bool] = mapped_column(default=False)

    employer: Mapped["Employer"] = relationship(back_populates="employees")
    accounts: Mapped[list["Account"]] = relationship(back_populates="member")

    def assign_identifier(self, identifier: str) -> None:
        self.member_id = identifier


class Account(Entity):
    __tablename__ = "accounts"

    account_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    member_id: Mapped[str] = mapped_column(ForeignKey("members.member_id"), index=True)
    # Employer reference, or "N/A" for individual accounts.
    employer_id: Mapped[str] = mapped_column(String(ID_LENGTH), default="N/A")
    pension_account_number: Mapped[str] = mapped_column(String(20), unique=True)
    account_type: Mapped[AccountType] = mapped_column(_enum_column(AccountType))
    total_contributions: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0"))
    current_balance: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0"))
    is_restricted: Mapped[bool] = mapped_column(default=False)
    is_closed: Mapped[bool] = mapped_column(default=False)

    member: Mapped["Member"] = relationship(back_populates="accounts")

    def assign_identifier(self, identifier: str) -> None:
        self.account_id = identifier


class Transaction(Entity):
    __tablename__ = "transactions"

    transaction_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    member_id: Mapped[str] = mapped_column(ForeignKey("members.member_id"), index=True)
    contribution_id: Mapped[str | None] = mapped_column(String(ID_LENGTH))
    debit_account_id: Mapped[str] = mapped_column(String(20))
    debit_account_bank_code: Mapped[str | None] = mapped_column(String(20))
    credit_account_id: Mapped[str] = mapped_column(String(20))
    credit_account_bank_code: Mapped[str | None] = mapped_column(String(20))
    transaction_type: Mapped[TransactionType] = mapped_column(_enum_column(TransactionType))
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    transaction_status: Mapped[TransactionStatus] = mapped_column(
        _enum_column(TransactionStatus), default=TransactionStatus.PENDING
    )
    reference_number: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(String(300))
    transaction_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    processed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    attempts: Mapped[int] = mapped_column(default=0)
    is_reversed: Mapped[bool] = mapped_column(default=False)

    def assign_identifier(self, identifier: str) -> None:
        self.transaction_id = identifier


class Contribution(Entity):
    __tablename__ = "contributions"

    contribution_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    member_id: Mapped[str] = mapped_column(ForeignKey("members.member_id"), index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    pension_account_number: Mapped[str] = mapped_column(String(20))
    contribution_type: Mapped[ContributionType] = mapped_column(_enum_column(ContributionType))
    is_validated: Mapped[bool] = mapped_column(default=False)

    def assign_identifier(self, identifier: str) -> None:
        self.contribution_id = identifier
