"""Unit tests for IntegrationRepository and AccessKeyGenerator."""

import hashlib
import pytest
from unittest.mock import MagicMock

from app.usage_data.exceptions import EntityNotFoundException
from app.usage_data.services.integration_repository import (
    AccessKeyGenerator,
    IntegrationRepository,
)


@pytest.fixture
def repository(mock_db):
    return IntegrationRepository(mock_db)


class TestAccessKeyGenerator:
    def test_access_key_format(self):
        key = AccessKeyGenerator.generate_access_key()

        assert key.startswith("SWIA")
        assert len(key) == 28
        assert key == key.upper()

    def test_keys_are_random(self):
        assert AccessKeyGenerator.generate_access_key() != AccessKeyGenerator.generate_access_key()
        assert (
            AccessKeyGenerator.generate_secret_access_key()
            != AccessKeyGenerator.generate_secret_access_key()
        )

    def test_hash_secret_is_sha256(self):
        assert AccessKeyGenerator.hash_secret("secret") == hashlib.sha256(b"secret").hexdigest()


class TestCreate:
    @pytest.mark.asyncio
    async def test_inserts_record_with_created_at(self, repository, mock_collection):
        integration_id = await repository.create({"_id": "integration-id", "label": "Usage Data"})

        assert integration_id == "integration-id"
        doc = mock_collection.insert_one.call_args[0][0]
        assert doc["_id"] == "integration-id"
        assert doc["label"] == "Usage Data"
        assert "createdAt" in doc


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_by_ids(self, repository, mock_collection):
        mock_collection.delete_many.return_value = MagicMock(deleted_count=1)

        await repository.delete(["integration-id"])

        mock_collection.delete_many.assert_called_once_with({"_id": {"$in": ["integration-id"]}})

    @pytest.mark.asyncio
    async def test_raises_not_found_when_nothing_deleted(self, repository, mock_collection):
        mock_collection.delete_many.return_value = MagicMock(deleted_count=0)

        with pytest.raises(EntityNotFoundException) as exc_info:
            await repository.delete(["missing-id"])

        assert exc_info.value.entity == "integration"
        assert exc_info.value.identifier == "missing-id"
        assert exc_info.value.status_code == 404
