"""
Integration credentials for usage data uploads.

An integration is an access key / secret pair the usage data gateway uses to
authenticate against this shop. Only a hash of the secret is persisted.
"""

import base64
import hashlib
import logging
import secrets
from datetime import datetime, timezone
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.collections import INTEGRATIONS_COLLECTION
from app.usage_data.exceptions import EntityNotFoundException
from config.usage_data_config import INTEGRATION_ACCESS_KEY_PREFIX

logger = logging.getLogger(__name__)


class AccessKeyGenerator:
    """
    Generates integration credentials.
    """

    @staticmethod
    def generate_access_key() -> str:
        """
        Generate a public access key.

        Returns:
            Prefix followed by 24 upper-case base32 characters
        """
        random_part = base64.b32encode(secrets.token_bytes(15)).decode("ascii")
        return f"{INTEGRATION_ACCESS_KEY_PREFIX}{random_part}"

    @staticmethod
    def generate_secret_access_key() -> str:
        """Generate a URL-safe secret (shown to the gateway once, never stored)."""
        return secrets.token_urlsafe(48)

    @staticmethod
    def hash_secret(secret: str) -> str:
        """SHA-256 hex digest of a secret for storage."""
        return hashlib.sha256(secret.encode()).hexdigest()


class IntegrationRepository:
    """
    Creates and deletes integration records.
    """

    ENTITY_NAME = "integration"

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize IntegrationRepository.

        Args:
            db: MongoDB database connection
        """
        self._collection = db[INTEGRATIONS_COLLECTION]

    async def create(self, record: dict) -> str:
        """
        Insert one integration record.

        Args:
            record: Integration document, must contain "_id"

        Returns:
            The integration id
        """
        doc = {"createdAt": datetime.now(timezone.utc), **record}
        await self._collection.insert_one(doc)

        logger.info(f"Integration {doc['_id']} created")
        return doc["_id"]

    async def delete(self, ids: List[str]) -> None:
        """
        Delete integration records by id.

        Args:
            ids: Integration ids

        Raises:
            EntityNotFoundException: If any id matched no record
        """
        result = await self._collection.delete_many({"_id": {"$in": list(ids)}})

        if result.deleted_count < len(ids):
            raise EntityNotFoundException(self.ENTITY_NAME, ", ".join(ids))

        logger.info(f"Deleted {result.deleted_count} integration(s)")
