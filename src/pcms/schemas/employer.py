"""Employer request and response schemas."""

from decimal import Decimal

from pydantic import Field

from pcms.models import Status
from pcms.schemas.common import CamelModel, Email, UtcDatetime


class EmployerRequest(CamelModel):
    """Body of POST /employers and PUT /employers/{employer_id}."""

    company_name: str = Field(min_length=2, max_length=200)
    registration_number: str = Field(min_length=1, max_length=50)
    tax_identification_number: str = Field(min_length=1, max_length=50)
    industry: str = Field(min_length=1, max_length=100)
    contact_email: Email
    contact_phone: str = Field(pattern=r"^\+?[0-9]{10,15}$")
    website_url: str | None = Field(default=None, max_length=200)
    address: str = Field(min_length=1, max_length=300)
    country: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=100)
    bank_account_number: str = Field(min_length=1, max_length=20)
    bank_name: str = Field(min_length=1, max_length=100)
    number_of_employees: int = Field(default=0, ge=0)
    pension_contribution_rate: Decimal = Field(ge=0, le=100, max_digits=5, decimal_places=2)
    is_active: bool = True


class EmployerDTO(CamelModel):
    employer_id: str
    company_name: str
    registration_number: str
    tax_identification_number: str | None
    industry: str | None
    contact_email: str
    contact_phone: str | None
    website_url: str | None
    address: str | None
    country: str | None
    state: str | None
    city: str | None
    bank_account_number: str
    bank_name: str
    number_of_employees: int
    pension_contribution_rate: Decimal
    is_active: bool
    status: Status
    created_date: UtcDatetime
    modified_date: UtcDatetime | None
