"""Status of the user's contact data."""

from __future__ import annotations

from enum import Enum


class UserDataStatus(Enum):
    """State of a text-like contact field."""

    WRONG = "wrong"
    CORRECT = "correct"
    NEUTRAL = "neutral"


def contact_data_correct(mail_status: UserDataStatus, phone_status: UserDataStatus) -> bool:
    """True when the e-mail is correct and the optional phone is not wrong."""
    if mail_status is not UserDataStatus.CORRECT:
        return False
    return phone_status is not UserDataStatus.WRONG