"""
Process-wide key/value configuration backed by MongoDB.

Each key is one document in the ``systemConfig`` collection:

    {
        "configurationKey": "core.usageData.consentState",
        "configurationValue": {"_value": "accepted"},
        "createdAt": datetime,
        "updatedAt": datetime,
    }
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.collections import SYSTEM_CONFIG_COLLECTION

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class SystemConfigService:
    """
    Reads and writes scalar configuration values.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize SystemConfigService.

        Args:
            db: MongoDB database connection
        """
        self._collection = db[SYSTEM_CONFIG_COLLECTION]

    async def get(self, key: str) -> Optional[Any]:
        """
        Get the raw value stored under a key.

        Args:
            key: Configuration key

        Returns:
            Stored scalar, or None if the key is not set
        """
        doc = await self._collection.find_one(
            {"configurationKey": key},
            {"configurationValue": 1}
        )
        if not doc:
            return None

        value = doc.get("configurationValue") or {}
        return value.get("_value")

    async def get_string(self, key: str) -> Optional[str]:
        """Get a value as string, None if not set."""
        value = await self.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    async def get_bool(self, key: str) -> bool:
        """Get a value as bool, False if not set."""
        return bool(await self.get(key))

    async def set(self, key: str, value: Any) -> None:
        """
        Store a value under a key (upsert).

        Setting None removes the key.

        Args:
            key: Configuration key
            value: Scalar value to store
        """
        if value is None:
            await self.delete(key)
            return

        now = _utcnow()
        await self._collection.update_one(
            {"configurationKey": key},
            {
                "$set": {
                    "configurationValue": {"_value": value},
                    "updatedAt": now,
                },
                "$setOnInsert": {
                    "_id": str(ObjectId()),
                    "createdAt": now,
                },
            },
            upsert=True
        )
        logger.debug(f"System config {key} set")

    async def delete(self, key: str) -> None:
        """Remove a key."""
        await self._collection.delete_one({"configurationKey": key})
        logger.debug(f"System config {key} deleted")

    async def find_record(self, key: str, value: Optional[Any] = None) -> Optional[dict]:
        """
        Get the full config document for a key.

        Args:
            key: Configuration key
            value: Only match if the stored value equals this

        Returns:
            Config document (with UTC-aware createdAt/updatedAt), or None
        """
        query: dict = {"configurationKey": key}
        if value is not None:
            query["configurationValue._value"] = value

        doc = await self._collection.find_one(query)
        if not doc:
            return None

        # BSON dates come back naive unless the client is tz_aware
        for field in ("createdAt", "updatedAt"):
            stamp = doc.get(field)
            if isinstance(stamp, datetime) and stamp.tzinfo is None:
                doc[field] = stamp.replace(tzinfo=timezone.utc)

        return doc
