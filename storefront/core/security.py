# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt

# Local application imports
from .config import get_settings
from ..domain.exceptions import AuthenticationError

# bcrypt only looks at the first 72 bytes of a password; newer releases refuse longer input
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    The work factor comes from ``BCRYPT_ROUNDS`` (default 10). A fresh salt
    is generated for every call, so hashing the same password twice yields
    different strings.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    settings = get_settings()
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False


def create_jwt_token(
    subject: str,
    extra_claims: Optional[Dict[str, Any]] = None,
    expires_minutes: Optional[int] = None,
    now: Optional[int] = None,
) -> str:
    """
    Create a signed JWT access token

    Args:
        subject: User ID stored in the ``sub`` claim
        extra_claims: Additional non-sensitive claims (e.g. email)
        expires_minutes: Lifetime override; defaults to ACCESS_TOKEN_EXPIRE_MINUTES
        now: Issue time as a unix timestamp; defaults to the current time

    Returns:
        Encoded JWT token string

    Raises:
        RuntimeError: If no signing secret is configured
    """
    settings = get_settings()
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not configured")

    issued_at = int(time.time()) if now is None else int(now)
    lifetime = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    expires_at = issued_at + (lifetime * 60)

    token_payload = {
        **(extra_claims or {}),
        "sub": subject,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: Optional[str], now: Optional[float] = None) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Expiry is checked against ``now`` rather than inside the JWT library so
    the result depends only on the token, the secret and the given clock.

    Args:
        token: The JWT token string to decode
        now: Unix timestamp to check expiry against; defaults to the current time

    Returns:
        Dictionary containing decoded token claims

    Raises:
        AuthenticationError: If the token is missing, malformed, badly signed,
            expired or has no subject
    """
    if not token:
        raise AuthenticationError("No bearer token supplied", user_message="No token, authorization denied")

    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"], "verify_exp": False},
        )
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}", user_message="Token is not valid")

    current_time = time.time() if now is None else now
    try:
        expires_at = int(payload["exp"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token: exp claim is not a timestamp", user_message="Token is not valid")
    if expires_at <= current_time:
        raise AuthenticationError("Token has expired", user_message="Token has expired")

    if not payload.get("sub"):
        raise AuthenticationError("Invalid token: missing subject", user_message="Token is not valid")

    return payload
