"""Unit tests for JWTAuth and the auth dependency factory."""

import pytest

from common.auth import JWTAuth, create_auth_dependency
from common.utils.exceptions import UnauthorizedException


@pytest.fixture
def auth():
    return JWTAuth(secret="test-secret", access_token_expire_minutes=5)


class TestJWTAuth:
    @pytest.mark.asyncio
    async def test_token_round_trip(self, auth, sample_user_id):
        token = await auth.create_token(sample_user_id, role="admin")

        claims = await auth.verify_token(token)

        assert claims["sub"] == sample_user_id
        assert claims["role"] == "admin"

    @pytest.mark.asyncio
    async def test_revoked_token_rejected(self, auth, sample_user_id):
        token = await auth.create_token(sample_user_id)
        await auth.revoke_token(token)

        with pytest.raises(ValueError, match="revoked"):
            await auth.verify_token(token)

    @pytest.mark.asyncio
    async def test_foreign_signature_rejected(self, auth, sample_user_id):
        other = JWTAuth(secret="other-secret")
        token = await other.create_token(sample_user_id)

        with pytest.raises(ValueError, match="Invalid token"):
            await auth.verify_token(token)


class TestAuthDependency:
    @pytest.mark.asyncio
    async def test_returns_subject(self, auth, sample_user_id):
        dependency = create_auth_dependency(lambda: auth)
        token = await auth.create_token(sample_user_id)

        assert await dependency(f"Bearer {token}") == sample_user_id

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth):
        dependency = create_auth_dependency(lambda: auth)

        with pytest.raises(UnauthorizedException) as exc_info:
            await dependency("Bearer not-a-jwt")

        assert exc_info.value.code == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_empty_token(self, auth):
        dependency = create_auth_dependency(lambda: auth)

        with pytest.raises(UnauthorizedException) as exc_info:
            await dependency("Bearer ")

        assert exc_info.value.code == "EMPTY_TOKEN"
