"""
Shop-specific database utilities.
"""

from app.database.collections import (
    SYSTEM_CONFIG_COLLECTION,
    USER_CONFIG_COLLECTION,
    INTEGRATIONS_COLLECTION,
)

__all__ = [
    "SYSTEM_CONFIG_COLLECTION",
    "USER_CONFIG_COLLECTION",
    "INTEGRATIONS_COLLECTION",
]
