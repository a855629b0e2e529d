"""
Collection names used by the usage data services.
"""

# ─────────────────────────────────────────────────────────────────
# Main Database Collections
# ─────────────────────────────────────────────────────────────────

SYSTEM_CONFIG_COLLECTION = "systemConfig"
USER_CONFIG_COLLECTION = "userConfig"
INTEGRATIONS_COLLECTION = "integrations"
