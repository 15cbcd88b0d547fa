"""Response codes and default messages carried by result envelopes.

Codes are plain strings on the wire. Only SUCCESS and FAILED_INPUT_VALIDATION
have fixed meaning inside the core; the rest are owned by the services that
return them.
"""

from enum import StrEnum


class ResponseCode(StrEnum):
    SUCCESS = "00"
    MEMBER_ACCOUNT_NOT_FOUND = "01"
    BAD_REQUEST = "03"
    EXCEPTION_ERROR = "09"
    CONTRIBUTION_NOT_FOUND = "13"
    FAILED_INPUT_VALIDATION = "14"
    MEMBER_NOT_FOUND = "19"
    PENSION_ACCOUNT_NOT_FOUND = "20"
    EMPLOYER_NOT_FOUND = "31"
    EMPLOYER_ALREADY_EXISTS = "32"
    TRANSACTION_PROCESSING_FAILED = "33"
    TRANSACTION_NOT_FOUND = "34"
    ACCOUNT_NOT_FOUND = "47"
    MEMBER_ALREADY_EXISTS = "48"


class ResponseMessage(StrEnum):
    SUCCESS = "Request Successful."
    WRONG_INPUT = "Wrong Input Supplied."
    INTERNAL_ERROR = "Internal server error"
    MEMBER_NOT_FOUND = "Member not found."
    MEMBER_ALREADY_EXISTS = "A member with this email already exists"
    MEMBER_DELETED = "Member deleted successfully"
    EMPLOYER_NOT_FOUND = "Employer not found"
    EMPLOYER_ALREADY_EXISTS = "Employer Already Exists"
    EMPLOYER_DELETED = "Employer deleted successfully"
    CONTRIBUTION_NOT_FOUND = "Contribution not found"
    PENSION_ACCOUNT_NOT_FOUND = "Pension account not found"
    TRANSACTION_PROCESSING_FAILED = "Transaction processing failed"
    TRANSACTION_NOT_FOUND = "Transaction Information Not Found"
    ACCOUNT_NOT_FOUND = "No payment account found"


# Failure codes that the router boundary reports with a specific HTTP status.
NOT_FOUND_CODES = frozenset(
    {
        ResponseCode.MEMBER_NOT_FOUND,
        ResponseCode.MEMBER_ACCOUNT_NOT_FOUND,
        ResponseCode.EMPLOYER_NOT_FOUND,
        ResponseCode.CONTRIBUTION_NOT_FOUND,
        ResponseCode.PENSION_ACCOUNT_NOT_FOUND,
        ResponseCode.TRANSACTION_NOT_FOUND,
        ResponseCode.ACCOUNT_NOT_FOUND,
    }
)
CONFLICT_CODES = frozenset(
    {
        ResponseCode.EMPLOYER_ALREADY_EXISTS,
        ResponseCode.MEMBER_ALREADY_EXISTS,
    }
)
