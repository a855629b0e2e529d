"""
FastAPI dependencies for the shop backend.

Provides the admin auth dependency and one-shot service initialization.
"""

from functools import lru_cache
from typing import Optional

import httpx
from fastapi import Header
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import AuthProvider, JWTAuth, create_auth_dependency
from app.config import settings
from app.usage_data.dependencies import init_usage_data_services


# =============================================================================
# Auth Provider Dependencies
# =============================================================================
@lru_cache()
def get_auth_provider() -> AuthProvider:
    """
    Get the configured authentication provider.

    Raises:
        ValueError: If JWT_SECRET is not configured
    """
    if not settings.JWT_SECRET:
        raise ValueError("JWT_SECRET is required for JWT auth")

    return JWTAuth(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
    )


_get_current_user_id = create_auth_dependency(get_auth_provider)


async def require_admin(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> str:
    """
    Require an authenticated admin API user.

    Returns:
        Admin user ID from the token's sub claim
    """
    return await _get_current_user_id(authorization)


# =============================================================================
# Service Initialization
# =============================================================================
def init_all_services(
    db: AsyncIOMotorDatabase,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        transport: Optional httpx transport for outbound reporting
    """
    init_usage_data_services(
        db=db,
        gateway_url=settings.get_gateway_url(),
        app_url=settings.APP_URL,
        app_version=settings.APP_VERSION,
        gateway_timeout=settings.USAGE_DATA_GATEWAY_TIMEOUT,
        reporting_enabled=settings.USAGE_DATA_REPORTING_ENABLED,
        transport=transport,
    )
