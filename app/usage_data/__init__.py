"""
Usage Data System

Tracks the shop operator's consent to share usage data, manages the
integration credentials used for uploads and the per-admin consent banner.
"""

from app.usage_data.consent_state import ConsentState
from app.usage_data.services.consent_service import ConsentService

__all__ = [
    "ConsentState",
    "ConsentService",
]
