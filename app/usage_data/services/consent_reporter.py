"""
Reports consent state changes to the usage data gateway.
"""

import logging
from typing import Optional

import httpx

from app.usage_data.consent_state import ConsentState
from app.usage_data.services.shop_id_provider import ShopIdProvider
from config.usage_data_config import GATEWAY_CONSENT_PATH, GATEWAY_DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class ConsentReporter:
    """
    Sends the current consent state (and fresh credentials on acceptance)
    to the usage data gateway.
    """

    def __init__(
        self,
        shop_id_provider: ShopIdProvider,
        gateway_url: str,
        app_url: str,
        app_version: str,
        timeout: float = GATEWAY_DEFAULT_TIMEOUT,
        enabled: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize ConsentReporter.

        Args:
            shop_id_provider: Source of the shop id
            gateway_url: Gateway base URL
            app_url: Public URL of this shop
            app_version: Running application version
            timeout: Request timeout in seconds
            enabled: If False, reports are only logged
            transport: Optional httpx transport (tests)
        """
        self._shop_id_provider = shop_id_provider
        self._gateway_url = gateway_url.rstrip("/")
        self._app_url = app_url
        self._app_version = app_version
        self._timeout = timeout
        self._enabled = enabled
        self._transport = transport

    async def report(
        self,
        consent_state: ConsentState,
        access_keys: Optional[dict] = None
    ) -> None:
        """
        Report a consent state to the gateway.

        Args:
            consent_state: State that was just stored
            access_keys: {"accessKey", "secretAccessKey"} when consent was accepted

        Raises:
            httpx.HTTPError: Gateway unreachable or non-2xx response
        """
        if not self._enabled:
            logger.info(f"Usage data reporting disabled, not reporting consent state {consent_state.value}")
            return

        payload = {
            "consent_state": consent_state.value,
            "shop_id": await self._shop_id_provider.get_shop_id(),
            "app_url": self._app_url,
            "app_version": self._app_version,
        }
        if access_keys is not None:
            payload["access_keys"] = access_keys

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self._gateway_url}{GATEWAY_CONSENT_PATH}",
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            response.raise_for_status()

        logger.info(f"Reported consent state {consent_state.value} to usage data gateway")
