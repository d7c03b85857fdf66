"""
Negotiation domain models.

WHAT: Session and message structures for scripted haggling
WHY: Consistent typing across engine, API schemas and tests
HOW: Pydantic v2 models; messages are frozen, sessions validate assignment
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal
from datetime import datetime, timezone
from uuid import uuid4


Sender = Literal["user", "ai"]
MessageType = Literal["offer", "counter", "accept", "reject", "chat"]
SessionStatus = Literal["active", "completed", "cancelled"]


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class NegotiationMessage(BaseModel):
    """A single turn in a negotiation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    sender: Sender
    message: str
    timestamp: datetime = Field(default_factory=utcnow)
    price: float | None = None
    type: MessageType


class NegotiationSession(BaseModel):
    """Complete state of one haggling session."""

    # Status and end_time are re-validated on every assignment
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    commodity: str
    market_price: float = Field(gt=0.0, allow_inf_nan=False, frozen=True)
    messages: list[NegotiationMessage] = Field(default_factory=list)
    status: SessionStatus = "active"
    start_time: datetime = Field(default_factory=utcnow)
    end_time: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"
