"""
Status and health check endpoints.

WHAT: Health monitoring for the negotiation service
WHY: Quick diagnostics for frontend and ops
HOW: FastAPI endpoint reporting app metadata and session counts
"""

from fastapi import APIRouter

from ....agents.bargain_bot import get_engine
from ....core.config import settings
from ....models.api_schemas import HealthResponse
from ....models.negotiation import utcnow

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Overall application health check.

    Returns:
        App metadata with active and total session counts
    """
    sessions = get_engine().get_all_sessions()
    return HealthResponse(
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        active_sessions=sum(1 for s in sessions if s.is_active),
        total_sessions=len(sessions),
        timestamp=utcnow(),
    )
