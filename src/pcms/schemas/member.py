"""Member request and response schemas."""

from datetime import date

from pydantic import Field, model_validator

from pcms.models import MembershipType, Status
from pcms.schemas.common import CamelModel, Email, UtcDatetime


class MemberRequest(CamelModel):
    """Body of POST /members and PUT /members/{member_id}."""

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: Email
    phone_number: str | None = Field(default=None, max_length=30)
    date_of_birth: date
    national_identification_number: str = Field(pattern=r"^\d{11,20}$")
    address: str = Field(min_length=1, max_length=300)
    bank_account_number: str | None = Field(default=None, max_length=20)
    bank_name: str | None = Field(default=None, max_length=100)
    employer_id: str | None = None
    membership_type: MembershipType

    @model_validator(mode="after")
    def employee_requires_employer(self) -> "MemberRequest":
        if self.membership_type == MembershipType.EMPLOYEE and not self.employer_id:
            raise ValueError("EmployerId is required when MembershipType is Employee.")
        return self


class MemberDTO(CamelModel):
    member_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    date_of_birth: date
    national_identification_number: str | None
    address: str | None
    bank_account_number: str | None
    bank_name: str | None
    employer_id: str | None
    membership_type: MembershipType
    is_eligible_for_benefits: bool
    status: Status
    created_date: UtcDatetime
    modified_date: UtcDatetime | None
    deleted_date: UtcDatetime | None
