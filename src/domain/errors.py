"""
Error codes used by use cases.

NOT_FOUND, EXPIRED and ALREADY_CONSUMED keep the precise reason a token was
rejected for logs and tests. The API layer collapses them into one generic
"invalid or expired" response so callers cannot tell them apart.
"""

from enum import Enum


class ErrorCode(str, Enum):
    not_found = "NOT_FOUND"
    expired = "EXPIRED"
    already_consumed = "ALREADY_CONSUMED"
    conflict = "CONFLICT"
    validation_error = "VALIDATION_ERROR"
    dependency_failure = "DEPENDENCY_FAILURE"
    invalid_credentials = "INVALID_CREDENTIALS"
    unauthorized = "UNAUTHORIZED"


TOKEN_REJECTIONS = frozenset(
    {ErrorCode.not_found.value, ErrorCode.expired.value, ErrorCode.already_consumed.value}
)
