"""
Shop backend application-specific code.

This package contains the shop-specific implementations:
- usage_data: Consent lifecycle, integration credentials, consent banner
- database: Collection names
- config: Application settings

Uses generic infrastructure from the common/ package.
"""

from app.config import settings

__all__ = ["settings"]
