"""
Unit tests for clinic login and the clinic password reset use cases
"""

import hashlib
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.auth import (
    ClinicLoginUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
    VerifyPasswordResetTokenUseCase,
)
from src.domain.entities import Clinic, PasswordResetToken
from src.domain.errors import ErrorCode
from tests.fixtures.fakes import SequenceTokenGenerator

TOKEN = "k3j5h7g9f1d3s5a7q9w1e3r5t7y9u1i3"
TOKEN_HASH = hashlib.sha256(TOKEN.encode()).hexdigest()


def make_clinic(password="old-password"):
    return Clinic(id=uuid4(), name="Happy Paws", email="paws@example.com", password=password)


def make_token(clinic_id, now, used=False, ttl=timedelta(hours=24)):
    return PasswordResetToken(
        id=uuid4(),
        clinic_id=clinic_id,
        token_hash=TOKEN_HASH,
        used=used,
        created_at=now,
        expires_at=now + ttl,
    )


async def passthrough(entity):
    return entity


# ============================================================================
# Login
# ============================================================================


@pytest.mark.asyncio
async def test_clinic_login(mock_uow):
    clinic = make_clinic(password="secret")
    mock_uow.clinics.get_by_email.return_value = clinic

    result = await ClinicLoginUseCase(mock_uow).execute("paws@example.com", "secret")

    assert result.is_ok()
    assert result.value.id == str(clinic.id)
    assert "password" not in result.value.model_dump()


@pytest.mark.asyncio
async def test_clinic_login_wrong_password(mock_uow):
    mock_uow.clinics.get_by_email.return_value = make_clinic(password="secret")

    result = await ClinicLoginUseCase(mock_uow).execute("paws@example.com", "nope")

    assert result.error.code == ErrorCode.invalid_credentials.value
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_clinic_login_unknown_email(mock_uow):
    mock_uow.clinics.get_by_email.return_value = None

    result = await ClinicLoginUseCase(mock_uow).execute("nobody@example.com", "secret")

    assert result.error.code == ErrorCode.invalid_credentials.value


# ============================================================================
# Request
# ============================================================================


@pytest.mark.asyncio
async def test_request_reset_issues_token(mock_uow, clock):
    clinic = make_clinic()
    mock_uow.clinics.get_by_email.return_value = clinic
    mock_uow.password_reset_tokens.create.side_effect = passthrough

    use_case = RequestPasswordResetUseCase(
        mock_uow, clock=clock, token_generator=SequenceTokenGenerator(TOKEN)
    )
    result = await use_case.execute("paws@example.com")

    assert result.is_ok()
    data = result.value
    assert data.message == "If the email exists, a password reset link has been sent"
    assert data.token == TOKEN
    assert data.email == "paws@example.com"
    assert data.valid_hours == 24

    created = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert created.clinic_id == clinic.id
    assert created.token_hash == TOKEN_HASH
    assert created.token_hash != data.token
    assert created.used is False
    assert created.expires_at == clock.now() + timedelta(hours=24)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_request_reset_unknown_email_same_message(mock_uow, clock):
    mock_uow.clinics.get_by_email.return_value = None

    use_case = RequestPasswordResetUseCase(
        mock_uow, clock=clock, token_generator=SequenceTokenGenerator(TOKEN)
    )
    result = await use_case.execute("nobody@example.com")

    assert result.is_ok()
    assert result.value.message == "If the email exists, a password reset link has been sent"
    assert result.value.token is None
    mock_uow.password_reset_tokens.create.assert_not_called()
    mock_uow.commit.assert_not_called()


# ============================================================================
# Verify
# ============================================================================


@pytest.mark.asyncio
async def test_verify_reset_token(mock_uow, clock):
    clinic = make_clinic()
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(clinic.id, clock.now())
    mock_uow.clinics.get_by_id.return_value = clinic

    result = await VerifyPasswordResetTokenUseCase(mock_uow, clock=clock).execute(TOKEN)

    assert result.value.email == "paws@example.com"
    mock_uow.password_reset_tokens.get_by_token_hash.assert_called_once_with(TOKEN_HASH)
    mock_uow.password_reset_tokens.consume.assert_not_called()


@pytest.mark.asyncio
async def test_verify_expired_reset_token(mock_uow, clock):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        uuid4(), clock.now() - timedelta(hours=25)
    )

    result = await VerifyPasswordResetTokenUseCase(mock_uow, clock=clock).execute(TOKEN)

    assert result.error.code == ErrorCode.expired.value


# ============================================================================
# Confirm
# ============================================================================


@pytest.mark.asyncio
async def test_confirm_reset_changes_password(mock_uow, clock):
    clinic = make_clinic()
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(clinic.id, clock.now())
    mock_uow.clinics.get_by_id.return_value = clinic
    mock_uow.password_reset_tokens.consume.return_value = True
    mock_uow.clinics.update.side_effect = passthrough

    result = await ConfirmPasswordResetUseCase(mock_uow, clock=clock).execute(TOKEN, "newpass")

    assert result.is_ok()
    assert result.value.status == "success"
    assert clinic.password == "newpass"
    mock_uow.password_reset_tokens.consume.assert_called_once_with(TOKEN_HASH, clock.now())
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_reset_empty_password(mock_uow, clock):
    result = await ConfirmPasswordResetUseCase(mock_uow, clock=clock).execute(TOKEN, "")

    assert result.error.code == ErrorCode.validation_error.value
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_reset_used_token(mock_uow, clock):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        uuid4(), clock.now(), used=True
    )

    result = await ConfirmPasswordResetUseCase(mock_uow, clock=clock).execute(TOKEN, "again")

    assert result.error.code == ErrorCode.already_consumed.value
    mock_uow.clinics.update.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_reset_lost_claim_keeps_password(mock_uow, clock):
    clinic = make_clinic()
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(clinic.id, clock.now())
    mock_uow.clinics.get_by_id.return_value = clinic
    mock_uow.password_reset_tokens.consume.return_value = False

    result = await ConfirmPasswordResetUseCase(mock_uow, clock=clock).execute(TOKEN, "newpass")

    assert result.error.code == ErrorCode.already_consumed.value
    assert clinic.password == "old-password"
    mock_uow.clinics.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_reset_unknown_token(mock_uow, clock):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = None

    result = await ConfirmPasswordResetUseCase(mock_uow, clock=clock).execute("nope", "newpass")

    assert result.error.code == ErrorCode.not_found.value
    assert result.error.message == "Invalid or expired password reset token"
