from .create_payment import CreatePaymentUseCase

__all__ = ["CreatePaymentUseCase"]
