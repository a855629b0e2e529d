"""Shared test fixtures for usage data tests."""

import pytest
from datetime import datetime, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

from app.usage_data.services.consent_reporter import ConsentReporter
from app.usage_data.services.consent_service import ConsentService
from app.usage_data.services.integration_repository import IntegrationRepository
from app.usage_data.services.user_config_repository import UserConfigRepository


class InMemorySystemConfig:
    """Dict-backed stand-in for SystemConfigService with the same async API."""

    def __init__(self, values: Optional[dict] = None):
        self.records: dict = {}
        for key, value in (values or {}).items():
            self.store(key, value)

    def store(self, key: str, value: Any, updated_at: Optional[datetime] = None) -> None:
        self.records[key] = {
            "configurationKey": key,
            "configurationValue": {"_value": value},
            "updatedAt": updated_at or datetime.now(timezone.utc),
        }

    def value(self, key: str) -> Any:
        record = self.records.get(key)
        return record["configurationValue"]["_value"] if record else None

    async def get(self, key: str) -> Any:
        return self.value(key)

    async def get_string(self, key: str) -> Optional[str]:
        value = self.value(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    async def get_bool(self, key: str) -> bool:
        return bool(self.value(key))

    async def set(self, key: str, value: Any) -> None:
        if value is None:
            await self.delete(key)
            return
        self.store(key, value)

    async def delete(self, key: str) -> None:
        self.records.pop(key, None)

    async def find_record(self, key: str, value: Any = None) -> Optional[dict]:
        record = self.records.get(key)
        if record and value is not None and record["configurationValue"]["_value"] != value:
            return None
        return record


@pytest.fixture
def sample_user_id():
    return "018a93bbe90570eda0d89c600de7dd19"


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config_store():
    """Factory for in-memory system config seeded with values."""
    return InMemorySystemConfig


@pytest.fixture
def integration_repository():
    return AsyncMock(spec=IntegrationRepository)


@pytest.fixture
def user_config_repository():
    repository = AsyncMock(spec=UserConfigRepository)
    repository.search.return_value = []
    return repository


@pytest.fixture
def consent_reporter():
    return AsyncMock(spec=ConsentReporter)


@pytest.fixture
def make_consent_service(integration_repository, user_config_repository, consent_reporter, fixed_now):
    """Build a ConsentService over the given system config values."""

    def _make(system_config=None):
        return ConsentService(
            system_config=system_config if system_config is not None else InMemorySystemConfig(),
            integration_repository=integration_repository,
            user_config_repository=user_config_repository,
            reporter=consent_reporter,
            clock=lambda: fixed_now,
        )

    return _make


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. find_one, update_one etc. stay AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db
