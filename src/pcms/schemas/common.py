"""Shared schema building blocks."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pcms.utils.datetime import ensure_utc

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _normalize_email(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


# SQLite returns naive datetimes; normalize everything leaving the API to aware UTC.
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]

# Trimmed and lower-cased before the pattern check runs.
Email = Annotated[
    str, BeforeValidator(_normalize_email), Field(pattern=EMAIL_PATTERN, max_length=254)
]


class CamelModel(BaseModel):
    """Base for request and response bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
