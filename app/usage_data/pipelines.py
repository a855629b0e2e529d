"""
Usage data pipeline functions.

Stateless orchestration logic for consent operations.
"""

import logging

from app.usage_data.services.consent_service import ConsentService

logger = logging.getLogger(__name__)


async def get_consent_pipeline(
    consent_service: ConsentService,
    user_id: str
) -> dict:
    """
    Get consent status for an admin user.

    Args:
        consent_service: For consent lookups
        user_id: Admin user ID

    Returns:
        dict with isConsentGiven and isBannerHidden
    """
    return {
        "isConsentGiven": await consent_service.is_consent_accepted(),
        "isBannerHidden": await consent_service.has_user_hidden_consent_banner(user_id),
    }


async def get_consent_state_pipeline(consent_service: ConsentService) -> dict:
    """
    Get the full consent state.

    Returns:
        dict with state, isConsentGiven, shouldPushData, lastConsentIsAcceptedDate
    """
    state = await consent_service.get_consent_state()

    return {
        "state": state.value if state else None,
        "isConsentGiven": await consent_service.is_consent_accepted(),
        "shouldPushData": await consent_service.should_push_data(),
        "lastConsentIsAcceptedDate": await consent_service.get_last_consent_is_accepted_date(),
    }


async def request_consent_pipeline(consent_service: ConsentService) -> None:
    await consent_service.request_consent()


async def accept_consent_pipeline(
    consent_service: ConsentService,
    user_id: str
) -> None:
    """
    Accept consent on behalf of the shop.

    Args:
        consent_service: For the state transition
        user_id: Admin user making the decision (logged)
    """
    await consent_service.accept_consent()
    logger.info(f"Usage data consent accepted by user {user_id}")


async def revoke_consent_pipeline(
    consent_service: ConsentService,
    user_id: str
) -> None:
    await consent_service.revoke_consent()
    logger.info(f"Usage data consent revoked by user {user_id}")


async def hide_consent_banner_pipeline(
    consent_service: ConsentService,
    user_id: str
) -> None:
    await consent_service.hide_consent_banner_for_user(user_id)
