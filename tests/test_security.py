"""
Tests for password hashing and session tokens
"""
from datetime import timedelta

import jwt
import pytest

from ytclone.config import DEFAULT_JWT_SECRET, Settings
from ytclone.core.security import (
    check_signing_key,
    create_access_token,
    get_password_hash,
    verify_access_token,
    verify_password,
)


class TestPasswordHashing:
    """Tests for the credential hash helpers"""

    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("pw")
        assert hashed != "pw"

    def test_hashes_are_salted(self):
        assert get_password_hash("pw") != get_password_hash("pw")

    def test_verify_only_exact_password(self):
        hashed = get_password_hash("correct horse")
        assert verify_password("correct horse", hashed) is True
        assert verify_password("correct horse ", hashed) is False
        assert verify_password("Correct horse", hashed) is False
        assert verify_password("", hashed) is False

    def test_verify_against_empty_hash(self):
        assert verify_password("pw", "") is False


class TestSessionTokens:
    """Tests for issuing and verifying session tokens"""

    def test_round_trip_returns_claims(self):
        token = create_access_token({"id": 1, "username": "a", "email": "a@x.com"})
        result = verify_access_token(token)

        assert result.valid is True
        assert result.claims == {"id": 1, "username": "a", "email": "a@x.com"}
        assert result.reason is None

    def test_token_expires_after_24_hours(self):
        token = create_access_token({"id": 1, "username": "a", "email": "a@x.com"})
        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_expired_token_fails(self):
        token = create_access_token(
            {"id": 1, "username": "a", "email": "a@x.com"},
            expires_delta=timedelta(seconds=-1),
        )
        result = verify_access_token(token)

        assert result.valid is False
        assert result.reason == "expired"
        assert result.claims == {}

    def test_token_signed_with_other_key_fails(self):
        token = jwt.encode({"id": 1, "exp": 9999999999}, "another-secret-key-of-decent-length", algorithm="HS256")
        result = verify_access_token(token)
        assert result.valid is False
        assert result.reason == "invalid"

    def test_garbage_token_fails(self):
        result = verify_access_token("not-a-token")
        assert result.valid is False
        assert result.reason == "invalid"

    def test_extra_claims_are_not_signed(self):
        token = create_access_token({"id": 2, "username": "b", "email": "b@x.com", "password": "pw"})
        payload = jwt.decode(token, options={"verify_signature": False})
        assert "password" not in payload


class TestSigningKeyCheck:
    """Tests for the startup check of JWT_SECRET"""

    def test_default_key_rejected_in_production(self):
        with pytest.raises(RuntimeError):
            check_signing_key(Settings(ENVIRONMENT="production", JWT_SECRET=DEFAULT_JWT_SECRET))

    def test_empty_key_rejected(self):
        with pytest.raises(RuntimeError):
            check_signing_key(Settings(JWT_SECRET=""))

    def test_default_key_allowed_in_development(self):
        check_signing_key(Settings(ENVIRONMENT="development", JWT_SECRET=DEFAULT_JWT_SECRET))

    def test_custom_key_allowed_in_production(self):
        check_signing_key(Settings(ENVIRONMENT="production", JWT_SECRET="x" * 48))
