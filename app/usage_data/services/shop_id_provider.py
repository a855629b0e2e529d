"""
Stable shop identifier sent along with usage data reports.
"""

import logging
import secrets

from app.usage_data.services.system_config_service import SystemConfigService
from config.usage_data_config import SYSTEM_CONFIG_KEY_SHOP_ID

logger = logging.getLogger(__name__)


class ShopIdProvider:
    """
    Reads the shop id from system config, generating it on first use.
    """

    def __init__(self, system_config: SystemConfigService):
        self._system_config = system_config

    async def get_shop_id(self) -> str:
        """
        Get the shop id.

        Returns:
            16-character hex id, persisted in system config
        """
        shop_id = await self._system_config.get_string(SYSTEM_CONFIG_KEY_SHOP_ID)
        if shop_id:
            return shop_id

        shop_id = secrets.token_hex(8)
        await self._system_config.set(SYSTEM_CONFIG_KEY_SHOP_ID, shop_id)

        logger.info(f"Generated shop id {shop_id}")
        return shop_id
