"""
Exception hierarchy for the storefront domain.

Use cases and repositories raise these; the API layer maps each type to an
HTTP status and a uniform ``{"success": false, "message": ...}`` envelope.
``message`` is for logs, ``user_message`` is what the client sees.
"""

# Standard library imports
from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    default_user_message = "An error occurred. Please try again later."

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


class ValidationError(StorefrontError):
    """Raised when client input is well-formed JSON but breaks a business rule."""

    def __init__(self, message: str, user_message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, user_message or message, details)


class AuthenticationError(StorefrontError):
    """Raised for missing, malformed, invalid or expired credentials."""

    default_user_message = "Not authenticated"


class NotFoundError(StorefrontError):
    """Raised when a requested resource does not exist (or is not visible to the caller)."""

    def __init__(self, message: str, user_message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, user_message or message, details)


class ConflictError(StorefrontError):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(self, message: str, user_message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, user_message or message, details)


class UpstreamError(StorefrontError):
    """Raised when the payment processor (or another remote service) fails."""

    default_user_message = "Payment could not be processed. Please try again later."


class InternalError(StorefrontError):
    """Raised for unexpected store or hashing failures."""
