"""
Per-admin-user configuration records.

Documents in ``userConfig`` hold one key per user:

    {"userId": str, "key": str, "value": {"_value": Any}, "createdAt", "updatedAt"}
"""

import logging
from datetime import datetime, timezone
from typing import Any, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.collections import USER_CONFIG_COLLECTION

logger = logging.getLogger(__name__)


class UserConfigRepository:
    """
    Search and upsert user config records.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserConfigRepository.

        Args:
            db: MongoDB database connection
        """
        self._collection = db[USER_CONFIG_COLLECTION]

    async def search(self, user_id: str, key: str, limit: int = 1) -> List[dict]:
        """
        Find config records of a user for a key.

        Args:
            user_id: Admin user ID
            key: Config key
            limit: Maximum number of records

        Returns:
            Matching records, possibly empty
        """
        cursor = self._collection.find({"userId": user_id, "key": key}).limit(limit)
        return await cursor.to_list(length=limit)

    async def upsert(self, user_id: str, key: str, value: Any) -> None:
        """
        Store a config value for a user.

        Args:
            user_id: Admin user ID
            key: Config key
            value: Scalar value
        """
        now = datetime.now(timezone.utc)
        await self._collection.update_one(
            {"userId": user_id, "key": key},
            {
                "$set": {"value": {"_value": value}, "updatedAt": now},
                "$setOnInsert": {"_id": str(ObjectId()), "createdAt": now},
            },
            upsert=True
        )
        logger.debug(f"User config {key} stored for user {user_id}")

    async def delete_by_key(self, key: str) -> int:
        """
        Remove a config key for all users.

        Returns:
            Number of records removed
        """
        result = await self._collection.delete_many({"key": key})
        return result.deleted_count
