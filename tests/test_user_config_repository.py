"""Unit tests for UserConfigRepository."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.usage_data.services.user_config_repository import UserConfigRepository


KEY = "core.usageData.hideConsentBanner"


@pytest.fixture
def repository(mock_db):
    return UserConfigRepository(mock_db)


@pytest.mark.asyncio
async def test_search_filters_by_user_and_key(repository, mock_collection, sample_user_id):
    record = {"userId": sample_user_id, "key": KEY, "value": {"_value": True}}
    cursor = MagicMock()
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[record])
    mock_collection.find.return_value = cursor

    result = await repository.search(sample_user_id, KEY)

    assert result == [record]
    mock_collection.find.assert_called_once_with({"userId": sample_user_id, "key": KEY})
    cursor.limit.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_upsert_wraps_value(repository, mock_collection, sample_user_id):
    await repository.upsert(sample_user_id, KEY, True)

    call_args = mock_collection.update_one.call_args
    assert call_args[0][0] == {"userId": sample_user_id, "key": KEY}
    assert call_args[0][1]["$set"]["value"] == {"_value": True}
    assert call_args[1]["upsert"] is True


@pytest.mark.asyncio
async def test_delete_by_key_returns_count(repository, mock_collection):
    mock_collection.delete_many.return_value = MagicMock(deleted_count=2)

    assert await repository.delete_by_key(KEY) == 2
    mock_collection.delete_many.assert_called_once_with({"key": KEY})
