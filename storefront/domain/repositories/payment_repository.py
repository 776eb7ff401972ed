from abc import ABC, abstractmethod
from ..models.payment import Payment


class PaymentRepository(ABC):
    """Repository interface - defines contract for payment record access"""

    @abstractmethod
    async def save(self, payment: Payment) -> Payment:
        """Save payment (create or update)"""
        pass
