"""Unit tests for result envelopes and the service-layer outcome type."""

import pytest
from pydantic import ValidationError

from pcms.exceptions import InvalidStateError
from pcms.literals import ResponseCode, ResponseMessage
from pcms.results import Failure, Success, map_success
from pcms.schemas.result import (
    DataResult,
    Result,
    error_data_result,
    error_result,
    success_data_result,
    success_result,
    to_envelope,
)


# ---------------------------------------------------------------------------
# 1. Success factories
# ---------------------------------------------------------------------------
def test_success_result_uses_fixed_code_and_default_message() -> None:
    result = success_result()

    assert result.response_code == "00"
    assert result.response_description == "Request Successful."
    assert result.is_success


def test_success_result_keeps_custom_description() -> None:
    result = success_result("Member deleted successfully")

    assert result.response_code == ResponseCode.SUCCESS
    assert result.response_description == "Member deleted successfully"


def test_success_data_result_carries_payload() -> None:
    result = success_data_result({"memberId": "01J"})

    assert result.response_code == "00"
    assert result.data == {"memberId": "01J"}
    assert result.is_success


def test_success_data_result_accepts_none_payload() -> None:
    assert success_data_result(None).data is None


# ---------------------------------------------------------------------------
# 2. Error factories
# ---------------------------------------------------------------------------
def test_error_result_keeps_code_and_description() -> None:
    result = error_result("19", "Member not found.")

    assert result.response_code == "19"
    assert result.response_description == "Member not found."
    assert not result.is_success


def test_error_data_result_never_carries_data() -> None:
    result = error_data_result(ResponseCode.ACCOUNT_NOT_FOUND, ResponseMessage.ACCOUNT_NOT_FOUND)

    assert result.data is None
    assert not result.is_success


def test_caller_defined_codes_are_not_validated() -> None:
    assert error_result("XYZ-42", "Anything goes").response_code == "XYZ-42"


@pytest.mark.parametrize(
    "code, description",
    [("", "Member not found."), ("19", "")],
)
def test_error_factories_reject_empty_text(code: str, description: str) -> None:
    with pytest.raises(ValueError):
        error_result(code, description)
    with pytest.raises(ValueError):
        error_data_result(code, description)


# ---------------------------------------------------------------------------
# 3. Immutability and wire shape
# ---------------------------------------------------------------------------
def test_envelopes_are_immutable() -> None:
    result = success_result()

    with pytest.raises(ValidationError):
        result.response_code = "19"  # type: ignore[misc]


def test_result_serializes_camel_case() -> None:
    body = error_result("19", "Member not found.").model_dump(by_alias=True)

    assert body == {"responseCode": "19", "responseDescription": "Member not found."}


def test_data_result_serializes_data_key() -> None:
    body = success_data_result([1, 2]).model_dump(mode="json", by_alias=True)

    assert body == {
        "responseCode": "00",
        "responseDescription": "Request Successful.",
        "data": [1, 2],
    }


def test_data_result_is_a_result() -> None:
    assert isinstance(error_data_result("06", "Request Failed"), Result)


# ---------------------------------------------------------------------------
# 4. Outcome variant
# ---------------------------------------------------------------------------
def test_success_outcome() -> None:
    outcome = Success(42)

    assert outcome.is_success()
    assert outcome.code == "00"
    assert outcome.description == "Request Successful."
    assert outcome.data == 42


def test_failure_outcome_has_no_data() -> None:
    outcome = Failure("19", "Member not found.")

    assert not outcome.is_success()
    with pytest.raises(InvalidStateError):
        outcome.data


def test_failure_requires_code_and_description() -> None:
    with pytest.raises(ValueError):
        Failure("", "Member not found.")
    with pytest.raises(ValueError):
        Failure("19", "")


def test_map_success_transforms_payload_and_keeps_description() -> None:
    mapped = map_success(Success(3, "Counted."), lambda n: n * 2)

    assert mapped == Success(6, "Counted.")


def test_map_success_passes_failure_through() -> None:
    failure = Failure("19", "Member not found.")

    assert map_success(failure, lambda n: n * 2) is failure


# ---------------------------------------------------------------------------
# 5. Outcome → envelope
# ---------------------------------------------------------------------------
def test_to_envelope_from_success() -> None:
    envelope = to_envelope(Success(["a"], "Listed."))

    assert isinstance(envelope, DataResult)
    assert envelope.response_code == "00"
    assert envelope.response_description == "Listed."
    assert envelope.data == ["a"]


def test_to_envelope_from_failure_drops_data() -> None:
    envelope = to_envelope(Failure("47", "No payment account found"))

    assert envelope.response_code == "47"
    assert envelope.response_description == "No payment account found"
    assert envelope.data is None
