"""Helpers shared by all routers."""

from fastapi import Response, status

from pcms.literals import CONFLICT_CODES, NOT_FOUND_CODES
from pcms.results import Outcome, Success
from pcms.schemas.result import DataResult, to_envelope


def http_status_for(outcome: Outcome[object], success_status: int = status.HTTP_200_OK) -> int:
    if isinstance(outcome, Success):
        return success_status
    if outcome.code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if outcome.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def respond[T](
    response: Response, outcome: Outcome[T], success_status: int = status.HTTP_200_OK
) -> DataResult[T]:
    """Set the HTTP status for ``outcome`` and return its envelope."""
    response.status_code = http_status_for(outcome, success_status)
    return to_envelope(outcome)
