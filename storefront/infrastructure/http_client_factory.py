# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Outbound calls go to a single payment processor, so a small pool is enough
POOL_LIMITS = httpx.Limits(max_keepalive_connections=10, max_connections=50, keepalive_expiry=30.0)
CONNECT_TIMEOUT_SECONDS = 5.0

_shared_client: Optional[httpx.AsyncClient] = None


def build_http_client(request_timeout_seconds: float) -> httpx.AsyncClient:
    """
    Create an AsyncClient for payment processor calls.

    Connecting is bounded separately from the overall request so an
    unreachable processor fails fast while a slow charge still has the full
    PAYMENT_TIMEOUT_SECONDS to complete.
    """
    timeout = httpx.Timeout(request_timeout_seconds, connect=min(CONNECT_TIMEOUT_SECONDS, request_timeout_seconds))
    return httpx.AsyncClient(timeout=timeout, limits=POOL_LIMITS, http2=True)


def get_shared_http_client() -> httpx.AsyncClient:
    """Return the process-wide pooled client, creating it on first use."""
    global _shared_client

    if _shared_client is None:
        timeout_seconds = get_settings().payment_timeout_seconds
        _shared_client = build_http_client(timeout_seconds)
        logger.info(f"Created pooled HTTP client (timeout {timeout_seconds}s)")
    return _shared_client


async def close_shared_http_client() -> None:
    """Close the pooled client on shutdown; the next lookup starts a new one."""
    global _shared_client

    client, _shared_client = _shared_client, None
    if client is not None:
        await client.aclose()
        logger.info("Closed pooled HTTP client")
