"""
FastAPI router for Usage Data endpoints.

Provides endpoints for the admin consent banner and the consent lifecycle.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import require_admin
from app.usage_data.dependencies import get_consent_service
from app.usage_data.services.consent_service import ConsentService
from app.usage_data.models import ConsentResponse, ConsentStateResponse
from app.usage_data import pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usage-data", tags=["usage-data"])


@router.get("/consent", response_model=ConsentResponse)
async def get_consent(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Get consent status for the current admin user.

    Used by the admin to decide whether to show the consent banner.
    """
    result = await pipelines.get_consent_pipeline(
        consent_service=consent_service,
        user_id=user_id
    )

    return ConsentResponse(**result)


@router.get("/consent/state", response_model=ConsentStateResponse)
async def get_consent_state(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Get the stored consent state with push flag and last acceptance date.
    """
    result = await pipelines.get_consent_state_pipeline(consent_service=consent_service)

    return ConsentStateResponse(**result)


@router.post("/request-consent", status_code=status.HTTP_204_NO_CONTENT)
async def request_consent(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Mark consent as requested.

    Fails with 409 CONSENT_ALREADY_REQUESTED once any state is stored.
    """
    await pipelines.request_consent_pipeline(consent_service=consent_service)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/accept-consent", status_code=status.HTTP_204_NO_CONTENT)
async def accept_consent(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Accept sharing usage data.

    Fails with 409 CONSENT_ALREADY_ACCEPTED if already accepted.
    """
    await pipelines.accept_consent_pipeline(
        consent_service=consent_service,
        user_id=user_id
    )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/revoke-consent", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_consent(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Revoke sharing usage data.

    Fails with 409 CONSENT_ALREADY_REVOKED if already revoked.
    """
    await pipelines.revoke_consent_pipeline(
        consent_service=consent_service,
        user_id=user_id
    )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/hide-consent-banner", status_code=status.HTTP_204_NO_CONTENT)
async def hide_consent_banner(
    user_id: Annotated[str, Depends(require_admin)],
    consent_service: Annotated[ConsentService, Depends(get_consent_service)],
):
    """
    Hide the consent banner for the current admin user.
    """
    await pipelines.hide_consent_banner_pipeline(
        consent_service=consent_service,
        user_id=user_id
    )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
