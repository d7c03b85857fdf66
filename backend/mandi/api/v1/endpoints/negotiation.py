"""
Negotiation endpoints.

WHAT: Start sessions, exchange turns, inspect, share and close negotiations
WHY: Presentation layer drives the scripted counterpart over HTTP
HOW: FastAPI router delegating to the singleton negotiation engine
"""

from fastapi import APIRouter
from typing import Optional

from ....agents.bargain_bot import get_engine
from ....agents.phrases import Language
from ....models.api_schemas import (
    StartNegotiationRequest,
    SendMessageRequest,
    SendMessageResponse,
    SessionListResponse,
    ShareMessageResponse,
    LanguageCode,
)
from ....models.negotiation import NegotiationSession, utcnow
from ....utils.exceptions import SessionNotFoundException
from ....utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _require_session(session_id: str) -> NegotiationSession:
    """Look a session up, turning absence into SESSION_NOT_FOUND."""
    session = get_engine().get_session(session_id)
    if session is None:
        raise SessionNotFoundException(session_id)
    return session


@router.post("/negotiation/start", response_model=NegotiationSession)
async def start_negotiation(request: StartNegotiationRequest):
    """
    Start a negotiation.

    WHAT: Open a session with the counterpart's opening bid
    WHY: Entry point for negotiation flow
    HOW: Delegate to engine in the request's language, return session
    """
    session = get_engine().start_negotiation(
        request.commodity, request.market_price, language=request.language
    )
    logger.info(f"Negotiation {session.id} started via API for {request.commodity}")
    return session


@router.get("/negotiation", response_model=SessionListResponse)
async def list_negotiations():
    """List every session the engine holds."""
    sessions = get_engine().get_all_sessions()
    return SessionListResponse(sessions=sessions, total=len(sessions))


@router.get("/negotiation/{session_id}", response_model=NegotiationSession)
async def get_negotiation(session_id: str):
    """Get a session with its full message history."""
    return _require_session(session_id)


@router.post("/negotiation/{session_id}/message", response_model=SendMessageResponse)
async def send_message(session_id: str, request: SendMessageRequest):
    """
    Send a user turn.

    WHAT: Record the user's message/price and return the counterpart reply
    WHY: Core haggling loop
    HOW: Engine applies the price heuristic; unknown sessions surface as 404
    """
    engine = get_engine()
    reply = engine.process_user_message(
        session_id, request.message, request.price, language=request.language
    )
    session = engine.get_session(session_id)
    return SendMessageResponse(session_id=session_id, reply=reply, status=session.status)


@router.get("/negotiation/{session_id}/share", response_model=ShareMessageResponse)
async def share_negotiation(session_id: str, language: Optional[LanguageCode] = None):
    """
    Build a shareable deal summary.

    WHAT: Text for forwarding the deal to a messaging app
    WHY: Users confirm deals with their counterparties outside the app
    HOW: Engine formats latest counterpart price into the share template
    """
    session = _require_session(session_id)
    engine = get_engine()
    resolved = Language.coerce(language) if language else engine.language

    text = engine.generate_whatsapp_message(session, language=resolved)
    return ShareMessageResponse(session_id=session_id, language=resolved.value, text=text)


@router.post("/negotiation/{session_id}/cancel", response_model=NegotiationSession)
async def cancel_negotiation(session_id: str):
    """
    Close a negotiation at the user's request.

    Only active sessions change; completed or cancelled ones come back as-is.
    """
    session = _require_session(session_id)
    if session.is_active:
        session.status = "cancelled"
        session.end_time = utcnow()
        logger.info(f"Negotiation {session_id} cancelled by user")
    return session
