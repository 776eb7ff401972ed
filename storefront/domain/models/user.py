from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    phone_number: Optional[str] = None
    city: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.name or len(self.name.strip()) < 2:
            raise ValueError("Name must be at least 2 characters long")
        if not self.email or "@" not in self.email:
            raise ValueError("Please enter a valid email address")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        self.name = self.name.strip()
        self.email = normalize_email(self.email)


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; store and query them lower-cased."""
    return email.strip().lower()
