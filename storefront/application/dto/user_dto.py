from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    phone_number: Optional[str] = Field(default=None, serialization_alias="phoneNumber")
    city: Optional[str] = None


class UserProfile(BaseModel):
    """Public profile fields returned by the user lookup route"""
    name: str
    email: str
    city: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, serialization_alias="phoneNumber")


class UserProfileResponse(BaseModel):
    success: bool = True
    data: UserProfile


class CurrentUserResponse(BaseModel):
    success: bool = True
    data: UserResponse


def to_user_response(user: User) -> UserResponse:
    """Build the outward user DTO from a domain User; the password hash never leaves the domain"""
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        phone_number=user.phone_number,
        city=user.city,
    )
