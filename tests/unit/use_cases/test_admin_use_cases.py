"""
Unit tests for the admin use cases
"""

import hashlib
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.admin import (
    AdminLoginUseCase,
    CleanupResetTokensUseCase,
    ConfirmAdminPasswordResetUseCase,
    DeleteClinicUseCase,
    EnsureAdminUseCase,
    ListClinicsUseCase,
    ListResetTokensUseCase,
    RequestAdminPasswordResetUseCase,
    VerifyAdminResetTokenUseCase,
    mask_token,
)
from src.domain.entities import (
    Admin,
    AdminResetToken,
    Clinic,
    PasswordResetToken,
    ResetTokenStorage,
)
from src.domain.errors import ErrorCode
from tests.fixtures.fakes import SequenceTokenGenerator

TOKEN = "abcdefghijklmnopqrstuvwxyz012xyz"
TOKEN_HASH = hashlib.sha256(TOKEN.encode()).hexdigest()


def make_admin(password="admin-pass"):
    return Admin(id=uuid4(), email="admin@example.com", password=password)


def make_admin_token(now, used=False, ttl=timedelta(hours=1)):
    return AdminResetToken(
        id=uuid4(),
        token_hash=TOKEN_HASH,
        email="admin@example.com",
        used=used,
        created_at=now,
        expires_at=now + ttl,
    )


async def passthrough(entity):
    return entity


# ============================================================================
# Login / bootstrap
# ============================================================================


@pytest.mark.asyncio
async def test_admin_login(mock_uow):
    admin = make_admin()
    mock_uow.admins.get_by_email.return_value = admin

    result = await AdminLoginUseCase(mock_uow).execute("admin@example.com", "admin-pass")

    assert result.value.id == str(admin.id)
    assert result.value.email == "admin@example.com"


@pytest.mark.asyncio
async def test_admin_login_wrong_password(mock_uow):
    mock_uow.admins.get_by_email.return_value = make_admin()

    result = await AdminLoginUseCase(mock_uow).execute("admin@example.com", "wrong")

    assert result.error.code == ErrorCode.invalid_credentials.value


@pytest.mark.asyncio
async def test_ensure_admin_creates_missing_admin(mock_uow):
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.admins.create.side_effect = passthrough

    result = await EnsureAdminUseCase(mock_uow).execute("Admin@Example.com", "admin-pass")

    assert result.value.created is True
    assert result.value.email == "admin@example.com"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_ensure_admin_keeps_existing_password(mock_uow):
    admin = make_admin(password="changed-by-reset")
    mock_uow.admins.get_by_email.return_value = admin

    result = await EnsureAdminUseCase(mock_uow).execute("admin@example.com", "admin-pass")

    assert result.value.created is False
    assert admin.password == "changed-by-reset"
    mock_uow.admins.create.assert_not_called()


# ============================================================================
# Admin password reset
# ============================================================================


@pytest.mark.asyncio
async def test_request_admin_reset(mock_uow, clock):
    mock_uow.admins.get_by_email.return_value = make_admin()
    mock_uow.admin_reset_tokens.add.side_effect = passthrough

    use_case = RequestAdminPasswordResetUseCase(
        mock_uow, clock=clock, token_generator=SequenceTokenGenerator(TOKEN)
    )
    result = await use_case.execute("admin@example.com")

    assert result.value.token == TOKEN
    assert result.value.valid_hours == 1
    stored = mock_uow.admin_reset_tokens.add.call_args.args[0]
    assert stored.token_hash == TOKEN_HASH
    assert stored.email == "admin@example.com"
    assert stored.expires_at == clock.now() + timedelta(hours=1)


@pytest.mark.asyncio
async def test_request_admin_reset_unknown_email(mock_uow, clock):
    mock_uow.admins.get_by_email.return_value = None

    use_case = RequestAdminPasswordResetUseCase(
        mock_uow, clock=clock, token_generator=SequenceTokenGenerator(TOKEN)
    )
    result = await use_case.execute("someone@example.com")

    assert result.is_ok()
    assert result.value.token is None
    assert result.value.message == "If the email exists, a password reset link has been sent"
    mock_uow.admin_reset_tokens.add.assert_not_called()


@pytest.mark.asyncio
async def test_verify_admin_token_deletes_expired(mock_uow, clock):
    mock_uow.admin_reset_tokens.get.return_value = make_admin_token(
        clock.now() - timedelta(hours=1)
    )

    result = await VerifyAdminResetTokenUseCase(mock_uow, clock=clock).execute(TOKEN)

    assert result.error.code == ErrorCode.expired.value
    mock_uow.admin_reset_tokens.delete.assert_called_once_with(TOKEN_HASH)


@pytest.mark.asyncio
async def test_verify_admin_token_valid(mock_uow, clock):
    mock_uow.admin_reset_tokens.get.return_value = make_admin_token(clock.now())

    result = await VerifyAdminResetTokenUseCase(mock_uow, clock=clock).execute(TOKEN)

    assert result.value.email == "admin@example.com"
    mock_uow.admin_reset_tokens.delete.assert_not_called()
    mock_uow.admin_reset_tokens.consume.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_admin_reset(mock_uow, clock):
    admin = make_admin()
    mock_uow.admin_reset_tokens.get.return_value = make_admin_token(clock.now())
    mock_uow.admins.get_by_email.return_value = admin
    mock_uow.admin_reset_tokens.consume.return_value = True
    mock_uow.admins.update.side_effect = passthrough

    result = await ConfirmAdminPasswordResetUseCase(mock_uow, clock=clock).execute(
        TOKEN, "newpass"
    )

    assert result.value.status == "success"
    assert admin.password == "newpass"
    mock_uow.admin_reset_tokens.consume.assert_called_once_with(TOKEN_HASH, clock.now())
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_admin_reset_second_submit(mock_uow, clock):
    mock_uow.admin_reset_tokens.get.return_value = None

    result = await ConfirmAdminPasswordResetUseCase(mock_uow, clock=clock).execute(
        TOKEN, "again"
    )

    assert result.error.code == ErrorCode.not_found.value
    assert result.error.message == "Invalid or expired password reset token"


# ============================================================================
# Reset token listing / cleanup
# ============================================================================


def test_mask_token():
    assert mask_token(TOKEN) == "abc...xyz"
    assert mask_token("short") == "***"


@pytest.mark.asyncio
async def test_list_reset_tokens_masks_hashes(mock_uow, clock):
    now = clock.now()
    clinic_id = uuid4()
    mock_uow.admin_reset_tokens.storage = ResetTokenStorage.memory
    mock_uow.admin_reset_tokens.list_all.return_value = [make_admin_token(now)]
    mock_uow.password_reset_tokens.list_all.return_value = [
        PasswordResetToken(
            id=uuid4(),
            clinic_id=clinic_id,
            token_hash="0123456789abcdefghij0123456789zz",
            used=True,
            created_at=now,
            expires_at=now + timedelta(hours=24),
        )
    ]

    result = await ListResetTokensUseCase(mock_uow, clock=clock).execute()

    data = result.value
    assert data.admin_storage == "memory"
    assert [(t.kind, t.token_hash, t.status) for t in data.tokens] == [
        ("admin", f"{TOKEN_HASH[:3]}...{TOKEN_HASH[-3:]}", "valid"),
        ("clinic", "012...9zz", "used"),
    ]
    assert data.tokens[1].clinic_id == str(clinic_id)
    assert TOKEN not in data.model_dump_json()
    assert TOKEN_HASH not in data.model_dump_json()


@pytest.mark.asyncio
async def test_cleanup_reset_tokens(mock_uow, clock):
    mock_uow.admin_reset_tokens.sweep.return_value = 1
    mock_uow.password_reset_tokens.delete_stale.return_value = 5

    result = await CleanupResetTokensUseCase(mock_uow, clock=clock).execute()

    assert result.value.admin_removed == 1
    assert result.value.clinic_removed == 5
    mock_uow.admin_reset_tokens.sweep.assert_called_once_with(clock.now())
    mock_uow.commit.assert_called_once()


# ============================================================================
# Clinic management
# ============================================================================


@pytest.mark.asyncio
async def test_list_clinics(mock_uow):
    mock_uow.clinics.list_all.return_value = [
        Clinic(id=uuid4(), name="A", email="a@example.com", password="x"),
        Clinic(id=uuid4(), name="B", email="b@example.com", password="y"),
    ]

    result = await ListClinicsUseCase(mock_uow).execute()

    assert [c.email for c in result.value.clinics] == ["a@example.com", "b@example.com"]


@pytest.mark.asyncio
async def test_delete_clinic_cascades(mock_uow):
    clinic = Clinic(id=uuid4(), name="A", email="a@example.com", password="x")
    mock_uow.clinics.get_by_id.return_value = clinic
    mock_uow.check_in_codes.delete_by_clinic_id.return_value = 3
    mock_uow.password_reset_tokens.delete_by_clinic_id.return_value = 1
    mock_uow.signup_codes.delete_by_clinic_email.return_value = 1

    result = await DeleteClinicUseCase(mock_uow).execute(clinic.id)

    data = result.value
    assert data.status == "deleted"
    assert data.check_in_codes_removed == 3
    assert data.reset_tokens_removed == 1
    assert data.signup_codes_removed == 1
    mock_uow.signup_codes.delete_by_clinic_email.assert_called_once_with("a@example.com")
    mock_uow.clinics.delete.assert_called_once_with(clinic)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_unknown_clinic(mock_uow):
    mock_uow.clinics.get_by_id.return_value = None

    result = await DeleteClinicUseCase(mock_uow).execute(uuid4())

    assert result.error.code == ErrorCode.not_found.value
    mock_uow.check_in_codes.delete_by_clinic_id.assert_not_called()
