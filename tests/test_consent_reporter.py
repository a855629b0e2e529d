"""Unit tests for ConsentReporter and ShopIdProvider."""

import json

import httpx
import pytest

from app.usage_data.consent_state import ConsentState
from app.usage_data.services.consent_reporter import ConsentReporter
from app.usage_data.services.shop_id_provider import ShopIdProvider
from config.usage_data_config import SYSTEM_CONFIG_KEY_SHOP_ID


GATEWAY_URL = "https://gateway.test/"


class RecordingTransport:
    """Collects requests sent through an httpx.MockTransport."""

    def __init__(self, status_code: int = 200):
        self.requests = []
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def shop_config(config_store):
    return config_store({SYSTEM_CONFIG_KEY_SHOP_ID: "a1b2c3d4e5f60718"})


def make_reporter(system_config, recorder, enabled=True):
    return ConsentReporter(
        shop_id_provider=ShopIdProvider(system_config),
        gateway_url=GATEWAY_URL,
        app_url="https://shop.test",
        app_version="6.5.0",
        timeout=1.0,
        enabled=enabled,
        transport=recorder.transport,
    )


# ─────────────────────────────────────────────────────────────────
# ConsentReporter
# ─────────────────────────────────────────────────────────────────

class TestConsentReporter:
    @pytest.mark.asyncio
    async def test_posts_consent_state(self, shop_config):
        recorder = RecordingTransport()

        await make_reporter(shop_config, recorder).report(ConsentState.REVOKED)

        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://gateway.test/v1/consent"
        assert json.loads(request.content) == {
            "consent_state": "revoked",
            "shop_id": "a1b2c3d4e5f60718",
            "app_url": "https://shop.test",
            "app_version": "6.5.0",
        }

    @pytest.mark.asyncio
    async def test_includes_access_keys_when_given(self, shop_config):
        recorder = RecordingTransport()
        access_keys = {"accessKey": "SWIAKEY", "secretAccessKey": "secret"}

        await make_reporter(shop_config, recorder).report(ConsentState.ACCEPTED, access_keys)

        payload = json.loads(recorder.requests[0].content)
        assert payload["consent_state"] == "accepted"
        assert payload["access_keys"] == access_keys

    @pytest.mark.asyncio
    async def test_disabled_sends_nothing(self, shop_config):
        recorder = RecordingTransport()

        await make_reporter(shop_config, recorder, enabled=False).report(ConsentState.REQUESTED)

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_error_status_raises(self, shop_config):
        recorder = RecordingTransport(status_code=503)

        with pytest.raises(httpx.HTTPStatusError):
            await make_reporter(shop_config, recorder).report(ConsentState.REQUESTED)


# ─────────────────────────────────────────────────────────────────
# ShopIdProvider
# ─────────────────────────────────────────────────────────────────

class TestShopIdProvider:
    @pytest.mark.asyncio
    async def test_returns_stored_id(self, shop_config):
        assert await ShopIdProvider(shop_config).get_shop_id() == "a1b2c3d4e5f60718"

    @pytest.mark.asyncio
    async def test_generates_and_persists_id(self, config_store):
        system_config = config_store()
        provider = ShopIdProvider(system_config)

        shop_id = await provider.get_shop_id()

        assert len(shop_id) == 16
        assert system_config.value(SYSTEM_CONFIG_KEY_SHOP_ID) == shop_id
        assert await provider.get_shop_id() == shop_id
