"""Domain exceptions.

Expected business outcomes are returned as Failure values (see pcms.results),
not raised. These exceptions cover contract violations and the few
conditions a repository cannot express as a value. Exception handlers in
main.py translate whatever reaches the HTTP boundary into the standard
result envelope: {"responseCode": "...", "responseDescription": "...", "data": null}.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidStateError(DomainError):
    """Raised when a value is read in a state where it has no meaning.

    Accessing ``data`` on a Failure outcome is the canonical case.
    """

