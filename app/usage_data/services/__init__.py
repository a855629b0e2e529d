"""
Usage data services.
"""

from app.usage_data.services.system_config_service import SystemConfigService
from app.usage_data.services.integration_repository import AccessKeyGenerator, IntegrationRepository
from app.usage_data.services.user_config_repository import UserConfigRepository
from app.usage_data.services.shop_id_provider import ShopIdProvider
from app.usage_data.services.consent_reporter import ConsentReporter
from app.usage_data.services.consent_service import ConsentService

__all__ = [
    "SystemConfigService",
    "AccessKeyGenerator",
    "IntegrationRepository",
    "UserConfigRepository",
    "ShopIdProvider",
    "ConsentReporter",
    "ConsentService",
]
