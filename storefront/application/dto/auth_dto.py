# Standard library imports
from typing import Optional

# External package imports
from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

# Local application imports
from ...core.config import get_settings
from ...core.security import BCRYPT_MAX_PASSWORD_BYTES
from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(max_length=200)
    email: EmailStr
    password: str = Field(max_length=256)
    phone_number: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("phoneNumber", "phone_number", "phone"),
    )
    city: Optional[str] = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Name must be at least 2 characters long")
        return value

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        min_length = get_settings().password_min_length
        if len(value) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters long")
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value

    @field_validator("phone_number")
    @classmethod
    def _check_phone_number(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if len(value) != 10 or not value.isdigit():
            raise ValueError("Please enter a valid 10-digit phone number")
        return value

    @field_validator("city")
    @classmethod
    def _check_city(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if len(value) < 2:
            raise ValueError("City must be at least 2 characters long")
        return value


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    # No length rule here: a short wrong password must still get the uniform 401
    password: str = Field(min_length=1, max_length=256)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class AuthResponse(BaseModel):
    """DTO returned by register and login: the access token plus the public profile"""
    success: bool = True
    message: str
    token: str
    user: UserResponse
