import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.fixtures.fakes import FixedClock


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.clinics = _repository(
        "get_by_id", "get_by_email", "list_all", "create", "update", "delete"
    )
    uow.check_in_codes = _repository(
        "get_valid_by_code",
        "get_latest_by_code",
        "get_active_by_clinic_id",
        "list_by_clinic_id",
        "create",
        "deactivate_all_by_clinic_id",
        "deactivate",
        "delete",
        "delete_by_clinic_id",
        "delete_stale",
    )
    uow.signup_codes = _repository(
        "get_by_code", "create", "consume", "delete_by_clinic_email", "delete_stale"
    )
    uow.password_reset_tokens = _repository(
        "create", "get_by_token_hash", "consume", "list_all", "delete_by_clinic_id", "delete_stale"
    )
    uow.admins = _repository("get_by_email", "create", "update")
    uow.admin_reset_tokens = _repository(
        "add", "get", "consume", "delete", "sweep", "list_all"
    )
    return uow


@pytest.fixture
def clock():
    return FixedClock()
