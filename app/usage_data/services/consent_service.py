"""
Consent service for usage data sharing.

Owns the consent lifecycle of the shop operator:

    (not set) -> requested -> accepted <-> revoked

The state lives in system config. Accepting creates an integration whose
credentials are handed to the usage data gateway; revoking deletes it again.
Every stored transition is reported to the gateway on a best-effort basis.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from bson import ObjectId

from app.usage_data.consent_state import ConsentState
from app.usage_data.exceptions import (
    ConsentAlreadyAcceptedException,
    ConsentAlreadyRequestedException,
    ConsentAlreadyRevokedException,
    EntityNotFoundException,
)
from app.usage_data.services.consent_reporter import ConsentReporter
from app.usage_data.services.integration_repository import (
    AccessKeyGenerator,
    IntegrationRepository,
)
from app.usage_data.services.system_config_service import SystemConfigService
from app.usage_data.services.user_config_repository import UserConfigRepository
from config.usage_data_config import (
    INTEGRATION_LABEL,
    SYSTEM_CONFIG_KEY_CONSENT_STATE,
    SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED,
    SYSTEM_CONFIG_KEY_INTEGRATION_ID,
    USER_CONFIG_KEY_HIDE_CONSENT_BANNER,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class ConsentService:
    """
    Tracks the shop operator's consent to share usage data.
    """

    SYSTEM_CONFIG_KEY_CONSENT_STATE = SYSTEM_CONFIG_KEY_CONSENT_STATE
    SYSTEM_CONFIG_KEY_INTEGRATION_ID = SYSTEM_CONFIG_KEY_INTEGRATION_ID
    SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED = SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED
    USER_CONFIG_KEY_HIDE_CONSENT_BANNER = USER_CONFIG_KEY_HIDE_CONSENT_BANNER

    def __init__(
        self,
        system_config: SystemConfigService,
        integration_repository: IntegrationRepository,
        user_config_repository: UserConfigRepository,
        reporter: ConsentReporter,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize ConsentService.

        Args:
            system_config: Process-wide key/value config
            integration_repository: Stores integration credentials
            user_config_repository: Per-user preferences
            reporter: Sends state changes to the usage data gateway
            clock: Returns the current time (defaults to UTC now)
        """
        self._system_config = system_config
        self._integration_repository = integration_repository
        self._user_config_repository = user_config_repository
        self._reporter = reporter
        self._clock = clock or _utcnow

    # ─────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────

    async def request_consent(self) -> None:
        """
        Mark consent as requested.

        Raises:
            ConsentAlreadyRequestedException: A consent state is already stored
        """
        if await self.has_consent_state():
            raise ConsentAlreadyRequestedException()

        await self._system_config.set(self.SYSTEM_CONFIG_KEY_CONSENT_STATE, ConsentState.REQUESTED.value)
        logger.info("Usage data consent requested")

        await self._report(ConsentState.REQUESTED)

    async def accept_consent(self) -> None:
        """
        Accept consent and create the usage data integration.

        Raises:
            ConsentAlreadyAcceptedException: Consent is already accepted
        """
        if await self.is_consent_accepted():
            raise ConsentAlreadyAcceptedException()

        # a leftover integration from an earlier acceptance is replaced
        await self._remove_integration()
        access_keys = await self._create_integration()

        await self._system_config.set(self.SYSTEM_CONFIG_KEY_CONSENT_STATE, ConsentState.ACCEPTED.value)
        logger.info("Usage data consent accepted")

        await self._report(ConsentState.ACCEPTED, access_keys)

    async def revoke_consent(self) -> None:
        """
        Revoke consent and remove the usage data integration.

        If deleting the integration fails, the error propagates after REVOKED
        has been stored and reported; the integration id stays on record and
        is cleaned up by the next acceptance.

        Raises:
            ConsentAlreadyRevokedException: Consent is already revoked
        """
        if await self.is_consent_revoked():
            raise ConsentAlreadyRevokedException()

        await self._system_config.set(self.SYSTEM_CONFIG_KEY_CONSENT_STATE, ConsentState.REVOKED.value)
        logger.info("Usage data consent revoked")

        try:
            await self._remove_integration()
        finally:
            # REVOKED is stored, so it is reported even if the cleanup failed
            await self._report(ConsentState.REVOKED)

    # ─────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────

    async def get_consent_state(self) -> Optional[ConsentState]:
        """Stored consent state, None if not set or unrecognised."""
        value = await self._system_config.get_string(self.SYSTEM_CONFIG_KEY_CONSENT_STATE)
        if value is None:
            return None

        try:
            return ConsentState(value)
        except ValueError:
            logger.warning(f"Unknown consent state stored: {value}")
            return None

    async def has_consent_state(self) -> bool:
        return await self._system_config.get(self.SYSTEM_CONFIG_KEY_CONSENT_STATE) is not None

    async def is_consent_accepted(self) -> bool:
        return await self.get_consent_state() == ConsentState.ACCEPTED

    async def is_consent_revoked(self) -> bool:
        return await self.get_consent_state() == ConsentState.REVOKED

    async def should_push_data(self) -> bool:
        """Data push is on unless explicitly disabled, regardless of consent."""
        return not await self._system_config.get_bool(self.SYSTEM_CONFIG_KEY_DATA_PUSH_DISABLED)

    async def get_last_consent_is_accepted_date(self) -> Optional[datetime]:
        """
        Get the last moment consent was known to be accepted.

        Returns:
            Now, while consent is accepted. Otherwise the time consent was
            revoked, or None if it never was.
        """
        if await self.is_consent_accepted():
            return self._clock()

        record = await self._system_config.find_record(
            self.SYSTEM_CONFIG_KEY_CONSENT_STATE,
            ConsentState.REVOKED.value
        )
        if not record:
            return None

        return record.get("updatedAt")

    async def has_user_hidden_consent_banner(self, user_id: str) -> bool:
        """
        Check if an admin user dismissed the consent banner.

        Args:
            user_id: Admin user ID

        Returns:
            Stored preference, False if none
        """
        records = await self._user_config_repository.search(
            user_id,
            self.USER_CONFIG_KEY_HIDE_CONSENT_BANNER
        )
        if not records:
            return False

        value = records[0].get("value") or {}
        return bool(value.get("_value", False))

    # ─────────────────────────────────────────────────────────────
    # Banner preference
    # ─────────────────────────────────────────────────────────────

    async def hide_consent_banner_for_user(self, user_id: str) -> None:
        """Store that an admin user dismissed the consent banner."""
        await self._user_config_repository.upsert(
            user_id,
            self.USER_CONFIG_KEY_HIDE_CONSENT_BANNER,
            True
        )
        logger.info(f"Consent banner hidden for user {user_id}")

    async def reset_is_banner_hidden_for_all_users(self) -> int:
        """
        Show the consent banner to every admin user again.

        Returns:
            Number of preferences removed
        """
        removed = await self._user_config_repository.delete_by_key(
            self.USER_CONFIG_KEY_HIDE_CONSENT_BANNER
        )
        logger.info(f"Consent banner reset for {removed} user(s)")
        return removed

    # ─────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────

    async def _create_integration(self) -> dict:
        """Create the usage data integration and return its plain credentials."""
        access_key = AccessKeyGenerator.generate_access_key()
        secret_access_key = AccessKeyGenerator.generate_secret_access_key()
        integration_id = str(ObjectId())

        await self._integration_repository.create({
            "_id": integration_id,
            "label": INTEGRATION_LABEL,
            "accessKey": access_key,
            "secretAccessKeyHash": AccessKeyGenerator.hash_secret(secret_access_key),
            "admin": False,
        })
        await self._system_config.set(self.SYSTEM_CONFIG_KEY_INTEGRATION_ID, integration_id)

        return {
            "accessKey": access_key,
            "secretAccessKey": secret_access_key,
        }

    async def _remove_integration(self) -> None:
        integration_id = await self._system_config.get_string(self.SYSTEM_CONFIG_KEY_INTEGRATION_ID)
        if not integration_id:
            return

        try:
            await self._integration_repository.delete([integration_id])
        except EntityNotFoundException:
            # already gone
            logger.warning(f"Usage data integration {integration_id} not found, nothing to delete")

        await self._system_config.delete(self.SYSTEM_CONFIG_KEY_INTEGRATION_ID)

    async def _report(self, consent_state: ConsentState, access_keys: Optional[dict] = None) -> None:
        """Report a stored state; failures never undo the transition."""
        try:
            if access_keys is None:
                await self._reporter.report(consent_state)
            else:
                await self._reporter.report(consent_state, access_keys)
        except Exception as e:
            logger.warning(f"Failed to report consent state {consent_state.value}: {e}")
