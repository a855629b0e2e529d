"""
Usage data exceptions.

Guard failures of the consent lifecycle are 409s so the admin UI can show a
specific message per code.
"""

from common.utils.exceptions import ConflictException, NotFoundException


class ConsentAlreadyRequestedException(ConflictException):
    """Consent was already requested (or decided) before."""

    def __init__(self):
        super().__init__(
            message="Consent has already been requested",
            code="CONSENT_ALREADY_REQUESTED",
        )


class ConsentAlreadyAcceptedException(ConflictException):
    """Consent is already accepted."""

    def __init__(self):
        super().__init__(
            message="Consent has already been accepted",
            code="CONSENT_ALREADY_ACCEPTED",
        )


class ConsentAlreadyRevokedException(ConflictException):
    """Consent is already revoked."""

    def __init__(self):
        super().__init__(
            message="Consent has already been revoked",
            code="CONSENT_ALREADY_REVOKED",
        )


class EntityNotFoundException(NotFoundException):
    """A record addressed by id does not exist."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(
            message=f"{entity} with id {identifier} not found",
            code="ENTITY_NOT_FOUND",
            details={"entity": entity, "id": identifier},
        )
