"""External service clients for communicating with external systems"""

from .stripe_client import StripePaymentGateway

__all__ = ["StripePaymentGateway"]
