"""Consent lifecycle states as stored in system config."""

from enum import Enum


class ConsentState(str, Enum):
    """
    Stored consent state.

    "Not set" has no member: it is the absence of the config value.
    """

    REQUESTED = "requested"
    ACCEPTED = "accepted"
    REVOKED = "revoked"
