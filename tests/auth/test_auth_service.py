"""
Tests for the refresh token lifecycle and credential checks.
"""
from datetime import datetime, timedelta, timezone

import pytest

from health_diary.auth.exceptions import (
    InvalidCredentialsException,
    RefreshTokenExpiredException,
    RefreshTokenNotFoundException,
    RefreshTokenRevokedException,
)
from health_diary.auth import service as auth_service
from health_diary.auth.models import RefreshToken
from health_diary.auth.service import (
    issue_refresh_token,
    login_user,
    revoke_all_user_tokens,
    revoke_refresh_token,
    sweep_expired_tokens,
    validate_refresh_token,
)
from health_diary.core.security import as_utc

PASSWORD = "secret123"


def _expire(db, token):
    row = db.query(RefreshToken).filter(RefreshToken.token == token).one()
    row.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
    db.commit()


def test_login_user_checks_password(db, patient):
    assert login_user(db, patient.email, PASSWORD).id == patient.id

    with pytest.raises(InvalidCredentialsException) as wrong_password:
        login_user(db, patient.email, "not-the-password")
    with pytest.raises(InvalidCredentialsException) as unknown_email:
        login_user(db, "nobody@example.com", PASSWORD)

    assert wrong_password.value.detail == unknown_email.value.detail


def test_login_user_verifies_a_hash_for_unknown_email(db, monkeypatch):
    checked = []

    def fake_verify(plain_password, hashed_password):
        checked.append(hashed_password)
        return True

    monkeypatch.setattr(auth_service, "verify_password", fake_verify)

    with pytest.raises(InvalidCredentialsException):
        login_user(db, "nobody@example.com", PASSWORD)
    assert checked == [auth_service._DUMMY_PASSWORD_HASH]


def test_issued_token_expires_in_ninety_days(db, patient):
    token = issue_refresh_token(db, patient.id)
    row = db.query(RefreshToken).filter(RefreshToken.token == token).one()

    assert row.revoked is False
    lifetime = as_utc(row.expires_at) - datetime.now(timezone.utc)
    assert timedelta(days=89, hours=23) < lifetime <= timedelta(days=90)


def test_validate_returns_owner(db, patient):
    token = issue_refresh_token(db, patient.id)
    assert validate_refresh_token(db, token).id == patient.id


def test_validate_unknown_token(db):
    with pytest.raises(RefreshTokenNotFoundException):
        validate_refresh_token(db, "0" * 128)


def test_revoked_token_stays_invalid(db, patient):
    token = issue_refresh_token(db, patient.id)
    validate_refresh_token(db, token)

    assert revoke_refresh_token(db, token) == 1

    for _ in range(2):
        with pytest.raises(RefreshTokenRevokedException):
            validate_refresh_token(db, token)


def test_revoke_unknown_token_is_noop(db):
    assert revoke_refresh_token(db, "does-not-exist") == 0


def test_expired_token_rejected_without_revocation(db, patient):
    token = issue_refresh_token(db, patient.id)
    _expire(db, token)

    with pytest.raises(RefreshTokenExpiredException):
        validate_refresh_token(db, token)


def test_revoke_all_only_touches_owner(db, doctor, patient):
    patient_tokens = [issue_refresh_token(db, patient.id) for _ in range(3)]
    doctor_token = issue_refresh_token(db, doctor.id)
    revoke_refresh_token(db, patient_tokens[0])

    assert revoke_all_user_tokens(db, patient.id) == 2

    for token in patient_tokens:
        with pytest.raises(RefreshTokenRevokedException):
            validate_refresh_token(db, token)
    assert validate_refresh_token(db, doctor_token).id == doctor.id


def test_sweep_deletes_only_expired_rows(db, patient):
    live = issue_refresh_token(db, patient.id)
    stale = issue_refresh_token(db, patient.id)
    _expire(db, stale)

    assert sweep_expired_tokens(db) == 1

    remaining = [row.token for row in db.query(RefreshToken).all()]
    assert remaining == [live]
