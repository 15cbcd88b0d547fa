"""Result envelope schemas.

Every response body uses the same envelope::

    {"responseCode": "00", "responseDescription": "Request Successful.", "data": {...}}

``Result`` is the bare envelope, ``DataResult[T]`` adds a payload. Instances
are immutable. Build them with the factories below, never by hand, so the
success code cannot be paired with an arbitrary description by accident.
Error envelopes never carry trustworthy data: the error factories always
leave ``data`` as None.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pcms.literals import ResponseCode, ResponseMessage
from pcms.results import Outcome, Success


class Result(BaseModel):
    """Outcome of an operation as a machine-checkable code and a message."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    response_code: str
    response_description: str

    @property
    def is_success(self) -> bool:
        return self.response_code == ResponseCode.SUCCESS


class DataResult[T](Result):
    """Result envelope carrying a payload. ``data`` is only meaningful on success."""

    data: T | None = None


def _require_text(name: str, value: str) -> None:
    if not value:
        raise ValueError(f"{name} must be a non-empty string")


def success_result(description: str | None = None) -> Result:
    return Result(
        response_code=ResponseCode.SUCCESS,
        response_description=description or ResponseMessage.SUCCESS,
    )


def success_data_result[T](data: T, description: str | None = None) -> DataResult[T]:
    return DataResult(
        response_code=ResponseCode.SUCCESS,
        response_description=description or ResponseMessage.SUCCESS,
        data=data,
    )


def error_result(code: str, description: str) -> Result:
    _require_text("code", code)
    _require_text("description", description)
    return Result(response_code=code, response_description=description)


def error_data_result(code: str, description: str) -> DataResult[Any]:
    _require_text("code", code)
    _require_text("description", description)
    return DataResult(response_code=code, response_description=description, data=None)


def to_envelope[T](outcome: Outcome[T]) -> DataResult[T]:
    """Convert a service-layer outcome into the wire envelope."""
    if isinstance(outcome, Success):
        return success_data_result(outcome.data, outcome.description)
    return error_data_result(outcome.code, outcome.description)
