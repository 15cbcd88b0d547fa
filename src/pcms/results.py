"""Service-layer outcome type.

Services return an ``Outcome[T]``: either ``Success[T]`` carrying a payload
or ``Failure`` carrying only a code and description. Routers turn outcomes
into wire envelopes with ``pcms.schemas.result.to_envelope``.

Plain dataclasses rather than Pydantic models because services shouldn't
know about serialization::

    async def retrieve_member_by_id(db, member_id) -> Outcome[MemberDTO]:
        member = await MemberRepository(db).get_by_id(member_id)
        if member is None:
            return Failure(ResponseCode.MEMBER_NOT_FOUND, ResponseMessage.MEMBER_NOT_FOUND)
        return Success(MemberDTO.model_validate(member))
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, NoReturn

from pcms.exceptions import InvalidStateError
from pcms.literals import ResponseCode, ResponseMessage


def _require_text(name: str, value: str) -> None:
    if not value:
        raise ValueError(f"{name} must be a non-empty string")


@dataclass(frozen=True)
class Success[T]:
    """Successful outcome. ``code`` is always the success code."""

    data: T
    description: str = ResponseMessage.SUCCESS

    def __post_init__(self) -> None:
        _require_text("description", self.description)

    @property
    def code(self) -> str:
        return ResponseCode.SUCCESS

    def is_success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome. Carries no payload."""

    code: str
    description: str

    def __post_init__(self) -> None:
        _require_text("code", self.code)
        _require_text("description", self.description)

    @property
    def data(self) -> NoReturn:
        raise InvalidStateError(f"Failure ({self.code}) carries no data: {self.description}")

    def is_success(self) -> Literal[False]:
        return False


type Outcome[T] = Success[T] | Failure


def map_success[T, U](outcome: Outcome[T], mapper: Callable[[T], U]) -> Outcome[U]:
    """Transform the payload of a Success; pass a Failure through untouched."""
    if isinstance(outcome, Success):
        return Success(mapper(outcome.data), outcome.description)
    return outcome
