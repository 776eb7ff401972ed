from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.payment_gateway import PaymentGateway
from ...domain.repositories.payment_repository import PaymentRepository
from ...application.use_cases.payment.create_payment import CreatePaymentUseCase
from ...infrastructure.external.stripe_client import StripePaymentGateway

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PaymentProvider:
    """Payment provider - registers the processor client and payment use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the payment gateway (singleton) and payment use cases.
        """
        if not container.is_registered(PaymentGateway):
            container.register_singleton(PaymentGateway, StripePaymentGateway())

        settings = get_settings()
        container.register_factory(
            CreatePaymentUseCase,
            lambda: CreatePaymentUseCase(
                payment_repository=container.get(PaymentRepository),
                payment_gateway=container.get(PaymentGateway),
                currency=settings.payment_currency,
                description=settings.payment_description,
            )
        )
