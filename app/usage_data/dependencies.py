"""
FastAPI dependencies for the Usage Data system.

Provides dependency injection for consent-related services.
"""

from typing import Optional

import httpx
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.usage_data.services.consent_reporter import ConsentReporter
from app.usage_data.services.consent_service import ConsentService
from app.usage_data.services.integration_repository import IntegrationRepository
from app.usage_data.services.shop_id_provider import ShopIdProvider
from app.usage_data.services.system_config_service import SystemConfigService
from app.usage_data.services.user_config_repository import UserConfigRepository


_consent_service: ConsentService | None = None


def init_usage_data_services(
    db: AsyncIOMotorDatabase,
    gateway_url: str,
    app_url: str,
    app_version: str,
    gateway_timeout: float,
    reporting_enabled: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """
    Initialize usage data services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        gateway_url: Usage data gateway base URL
        app_url: Public URL of this shop
        app_version: Running application version
        gateway_timeout: Gateway request timeout in seconds
        reporting_enabled: Whether consent changes are sent to the gateway
        transport: Optional httpx transport for the reporter
    """
    global _consent_service

    system_config = SystemConfigService(db=db)

    reporter = ConsentReporter(
        shop_id_provider=ShopIdProvider(system_config),
        gateway_url=gateway_url,
        app_url=app_url,
        app_version=app_version,
        timeout=gateway_timeout,
        enabled=reporting_enabled,
        transport=transport,
    )

    _consent_service = ConsentService(
        system_config=system_config,
        integration_repository=IntegrationRepository(db=db),
        user_config_repository=UserConfigRepository(db=db),
        reporter=reporter,
    )


def get_consent_service() -> ConsentService:
    """Get consent service instance."""
    if _consent_service is None:
        raise RuntimeError("Usage data services not initialized. Call init_usage_data_services first.")
    return _consent_service
