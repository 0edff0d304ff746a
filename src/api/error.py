import logging

from fastapi import status
from libs.result import Error
from src.domain.errors import TOKEN_REJECTIONS, ErrorCode

logger = logging.getLogger(__name__)

INVALID_OR_EXPIRED_CODE = "INVALID_OR_EXPIRED_CODE"
INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_redeem_error(error: Error, generic_code: str, generic_message: str):
    """
    Translate a use case error from redeeming a code or token.

    NOT_FOUND, EXPIRED and ALREADY_CONSUMED all become the same generic 400
    so clients cannot tell which codes exist. The specific reason is logged.
    """
    if error.code in TOKEN_REJECTIONS:
        logger.info(f"Rejected {generic_code.lower()}: {error.code}")
        raise ClientError(Error(generic_code, generic_message))
    raise_for_error(error)


def raise_for_error(error: Error):
    """Map a use case error to the matching HTTP error"""
    if error.code == ErrorCode.not_found.value:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == ErrorCode.conflict.value:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    if error.code == ErrorCode.validation_error.value:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in (ErrorCode.invalid_credentials.value, ErrorCode.unauthorized.value):
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    raise ServerError(error)
