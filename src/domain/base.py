from datetime import UTC, datetime
from typing import Optional

from .errors import ErrorCode


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def redeem_failure(
    expires_at: datetime, consumed: bool, now: datetime
) -> Optional[ErrorCode]:
    """
    Validity predicate shared by every code and token.

    A token is redeemable at ``now`` iff it is not consumed and
    ``now < expires_at``. ``expires_at == now`` counts as expired.

    Returns:
        None when redeemable, otherwise the specific failure code
    """
    if consumed:
        return ErrorCode.already_consumed
    if not now < expires_at:
        return ErrorCode.expired
    return None
