from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Contract for the external payment processor"""

    @abstractmethod
    async def create_charge(self, source_token: str, amount: int, currency: str, description: str) -> str:
        """
        Charge ``amount`` (minor units) against a processor-issued source token.

        Returns:
            The processor's charge ID

        Raises:
            UpstreamError: If the processor rejects the charge or is unreachable
        """
        pass
