"""
Unit tests for storefront.core.security
"""
import time

import jwt
import pytest
from storefront.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)
from storefront.domain.exceptions import AuthenticationError


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_rounds(self, mock_settings):
        mock_settings.bcrypt_rounds = 5
        assert hash_password("secret123").startswith("$2b$05$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_empty_hash_returns_false(self):
        assert verify_password("anything", "") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        token = create_jwt_token("user-123", {"email": "test@example.com"})
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 1440 * 60

    def test_extra_claims_cannot_override_subject(self, mock_settings):
        token = create_jwt_token("user-1", {"sub": "user-2"})
        assert decode_jwt_token(token)["sub"] == "user-1"

    def test_valid_until_expiry(self, mock_settings):
        issued = 1_700_000_000
        token = create_jwt_token("user-1", expires_minutes=60, now=issued)
        assert decode_jwt_token(token, now=issued + 3599)["sub"] == "user-1"

    def test_expired_token_raises(self, mock_settings):
        issued = 1_700_000_000
        token = create_jwt_token("user-1", expires_minutes=60, now=issued)
        with pytest.raises(AuthenticationError, match="expired"):
            decode_jwt_token(token, now=issued + 3600)
        with pytest.raises(AuthenticationError):
            decode_jwt_token(token)  # long past in real time

    def test_missing_token_raises(self, mock_settings):
        with pytest.raises(AuthenticationError):
            decode_jwt_token(None)
        with pytest.raises(AuthenticationError):
            decode_jwt_token("")

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(AuthenticationError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in exc_info.value.message

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token("user-1")
        tampered = token[:-5] + ("aaaaa" if not token.endswith("aaaaa") else "bbbbb")
        with pytest.raises(AuthenticationError):
            decode_jwt_token(tampered)

    def test_token_signed_with_other_secret_rejected(self, mock_settings):
        forged = jwt.encode(
            {"sub": "user-1", "exp": int(time.time()) + 600},
            "some-other-secret",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError):
            decode_jwt_token(forged)

    def test_token_without_subject_rejected(self, mock_settings):
        token = jwt.encode({"exp": int(time.time()) + 600}, mock_settings.jwt_secret_key, algorithm="HS256")
        with pytest.raises(AuthenticationError):
            decode_jwt_token(token)

    def test_create_without_secret_fails(self, mock_settings):
        mock_settings.jwt_secret_key = ""
        with pytest.raises(RuntimeError):
            create_jwt_token("user-1")
