"""
Pydantic models for Usage Data request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ConsentResponse(BaseModel):
    """Consent status for the current admin user."""
    isConsentGiven: bool
    isBannerHidden: bool


class ConsentStateResponse(BaseModel):
    """Full consent state, for the settings page."""
    state: Optional[str] = None
    isConsentGiven: bool
    shouldPushData: bool
    lastConsentIsAcceptedDate: Optional[datetime] = None
