# model/credential.py
from enum import Enum
from pydantic import BaseModel


class CredentialStatus(str, Enum):
    absent = "absent"
    pending_input = "pending_input"
    validating = "validating"
    confirmed = "confirmed"
    invalid = "invalid"


class InvalidReason(str, Enum):
    empty = "empty"
    format = "format"
    rejected = "rejected"


class CredentialState(BaseModel):
    status: CredentialStatus
    reason: InvalidReason | None = None
    message: str | None = None

    @property
    def has_key(self) -> bool:
        return self.status == CredentialStatus.confirmed
