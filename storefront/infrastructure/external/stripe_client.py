# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.payment_gateway import PaymentGateway
from ...domain.exceptions import UpstreamError
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """
    HTTP client for the Stripe charges API.

    Talks to ``POST /v1/charges`` directly over httpx (form-encoded body,
    secret key as the basic-auth username).
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize Stripe client.

        Args:
            secret_key: Stripe secret API key. If None, reads STRIPE_SECRET_KEY.
            api_base: Stripe API base URL. If None, reads STRIPE_API_BASE.
            http_client: Client to send requests with. If None, the shared pooled client is used.
        """
        settings = get_settings()
        self.secret_key = secret_key if secret_key is not None else settings.stripe_secret_key
        self.api_base = (api_base or settings.stripe_api_base).rstrip("/")
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    async def create_charge(self, source_token: str, amount: int, currency: str, description: str) -> str:
        """
        Create a charge and return its ID.

        Args:
            source_token: Token ID produced by Stripe.js / Checkout
            amount: Amount in the currency's minor unit
            currency: ISO currency code (lower-case)
            description: Charge description shown in the Stripe dashboard

        Returns:
            Stripe charge ID (``ch_...``)

        Raises:
            UpstreamError: On missing configuration, network failure, or a rejected charge
        """
        if not self.secret_key:
            raise UpstreamError("STRIPE_SECRET_KEY is not configured")

        try:
            response = await self.http_client.post(
                f"{self.api_base}/v1/charges",
                data={
                    "amount": str(amount),
                    "currency": currency,
                    "source": source_token,
                    "description": description,
                },
                auth=(self.secret_key, ""),
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while creating Stripe charge: {e}")
            raise UpstreamError(f"Stripe request timed out: {e}")
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Stripe rejected charge: {e.response.status_code} - {self._error_message(e.response)}"
            )
            raise UpstreamError(
                f"Stripe returned {e.response.status_code}",
                details={"status_code": e.response.status_code},
            )
        except httpx.HTTPError as e:
            logger.error(f"HTTP error talking to Stripe: {e}")
            raise UpstreamError(f"Stripe request failed: {e}")

        try:
            charge_id = response.json()["id"]
        except (ValueError, KeyError, TypeError):
            raise UpstreamError("Stripe response did not contain a charge id")

        logger.info(f"Created Stripe charge {charge_id} for {amount} {currency}")
        return charge_id

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text
