"""
Usage data configuration constants.

These are fixed values that don't change per environment.
Environment-specific values (gateway URL, app URL) are loaded from env vars.
"""

# System config keys (process-wide)
SYSTEM_CONFIG_KEY_CONSENT_STATE = "core.usageData.consentState"
SYSTEM_CONFIG_KEY_INTEGRATION_ID = "core.usageData.integrationId"
SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED = "core.usageData.dataPushDisabled"
SYSTEM_CONFIG_KEY_SHOP_ID = "core.app.shopId"

# User config keys (per admin user)
USER_CONFIG_KEY_HIDE_CONSENT_BANNER = "core.usageData.hideConsentBanner"

# Usage data gateway
GATEWAY_CONSENT_PATH = "/v1/consent"
GATEWAY_DEFAULT_TIMEOUT = 5.0

# Integration created for usage data uploads
INTEGRATION_LABEL = "Usage Data Integration"
INTEGRATION_ACCESS_KEY_PREFIX = "SWIA"
