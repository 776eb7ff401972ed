# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class PaymentStatus:
    """Allowed payment states"""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    ALL = (PENDING, COMPLETED, FAILED)


@dataclass
class Payment:
    """A single charge attempt made by a user. Amount is in minor currency units."""
    id: Optional[str]
    user_id: str
    amount: int
    currency: str
    status: str = PaymentStatus.PENDING
    charge_id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int) or self.amount <= 0:
            raise ValueError("Amount must be a positive integer")
        if self.status not in PaymentStatus.ALL:
            raise ValueError(f"Unknown payment status: {self.status}")
