"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.

    Status flow:
        REGISTERED → SENT → DELIVERED
        Address changes and deletion are only allowed while REGISTERED.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


def status_value(status) -> str:
    """Return the stored string for a status given as enum member or plain text."""
    if isinstance(status, ParcelStatus):
        return status.value
    return status
