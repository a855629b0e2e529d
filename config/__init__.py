"""
Configuration module - Fixed usage data constants.
"""

from config.usage_data_config import (
    SYSTEM_CONFIG_KEY_CONSENT_STATE,
    SYSTEM_CONFIG_KEY_INTEGRATION_ID,
    SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED,
    SYSTEM_CONFIG_KEY_SHOP_ID,
    USER_CONFIG_KEY_HIDE_CONSENT_BANNER,
)

__all__ = [
    "SYSTEM_CONFIG_KEY_CONSENT_STATE",
    "SYSTEM_CONFIG_KEY_INTEGRATION_ID",
    "SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED",
    "SYSTEM_CONFIG_KEY_SHOP_ID",
    "USER_CONFIG_KEY_HIDE_CONSENT_BANNER",
]
