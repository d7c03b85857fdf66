"""
Pydantic API schemas for negotiation endpoints.

WHAT: Request and response models for FastAPI
WHY: Type-safe validation and serialization matching frontend interfaces
HOW: Pydantic v2 models with validators and constraints
"""

from typing import Optional, List, Literal
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from .negotiation import NegotiationMessage, NegotiationSession, SessionStatus


LanguageCode = Literal["hi", "en", "ta", "te", "kn"]


# ========== Negotiation ==========

class StartNegotiationRequest(BaseModel):
    """Start a haggling session for one commodity."""
    commodity: str = Field(..., min_length=1, max_length=50, description="Commodity ID")
    market_price: float = Field(..., gt=0, description="Reference market price")
    language: Optional[LanguageCode] = Field(default=None, description="Language for counterpart text")

    @field_validator("commodity")
    @classmethod
    def normalize_commodity(cls, v: str) -> str:
        """Strip surrounding whitespace from commodity ID."""
        return v.strip()


class SendMessageRequest(BaseModel):
    """A user turn: free text with an optional asking price."""
    message: str = Field(default="", max_length=1000, description="Message text")
    price: Optional[float] = Field(default=None, description="Asking price, if any")
    language: Optional[LanguageCode] = None


class SendMessageResponse(BaseModel):
    """Counterpart reply plus the session state after the turn."""
    session_id: str
    reply: NegotiationMessage
    status: SessionStatus


class SessionListResponse(BaseModel):
    """All known sessions."""
    sessions: List[NegotiationSession]
    total: int


class ShareMessageResponse(BaseModel):
    """Shareable deal summary text."""
    session_id: str
    language: LanguageCode
    text: str


# ========== Catalogue ==========

class LanguageResponse(BaseModel):
    """Supported language metadata."""
    code: LanguageCode
    name: str
    native_name: str
    flag: str
    speech_supported: bool
    tts_supported: bool


class CommodityResponse(BaseModel):
    """Commodity catalogue entry."""
    id: str
    name: str
    icon: str
    category: Literal["vegetables", "grains"]
    unit: Literal["kg", "quintal"]


# ========== Status ==========

class HealthResponse(BaseModel):
    """Application health."""
    status: Literal["healthy"] = "healthy"
    app: str
    version: str
    active_sessions: int
    total_sessions: int
    timestamp: datetime
