"""
Scripted bargaining counterpart.

WHAT: Rule-based buyer that haggles with a human seller over one commodity
WHY: Lets the marketplace demo price negotiation without any model calls
HOW: In-memory session table plus a fixed price-convergence heuristic
"""

import math
from datetime import date
from typing import Dict, List, Optional

from ..core.config import settings
from ..models.negotiation import NegotiationMessage, NegotiationSession, utcnow
from ..utils.exceptions import SessionNotFoundException, ValidationException
from ..utils.logger import get_logger
from ..utils.prices import format_price, round_price
from .phrases import (
    ACCEPT_MESSAGES,
    CHAT_MESSAGES,
    COUNTER_MESSAGES,
    DEAL_CLOSED_MESSAGES,
    HIGH_PRICE_MESSAGES,
    OPENING_MESSAGES,
    QUALITY_MESSAGES,
    SHARE_TEMPLATES,
    Language,
    commodity_name,
    is_quality_question,
    phrase,
)

logger = get_logger(__name__)

OPENING_RATIO = 0.85  # counterpart opens 15% below market
FAIR_PRICE_RATIO = 0.95  # offers above this share of market are "too high"
ACCEPT_MARGIN = 1.05  # accept once the offer clears the last counter by 5%
HIGH_PRICE_STEP = 1.1


class AIBargainBot:
    """Deterministic negotiation counterpart owning every session it starts."""

    def __init__(self, language: Language | str | None = None):
        """
        Initialize the engine.

        Args:
            language: Default language for generated text (defaults to settings.DEFAULT_LANGUAGE)
        """
        self.sessions: Dict[str, NegotiationSession] = {}
        self.language = Language.coerce(language or settings.DEFAULT_LANGUAGE)

    def set_language(self, language: Language | str) -> None:
        """Switch the default language used for counterpart text."""
        self.language = Language.coerce(language)

    def _resolve_language(self, language: Language | str | None) -> Language:
        """Per-call language, or the engine default when none is given."""
        return Language.coerce(language) if language else self.language

    def start_negotiation(
        self,
        commodity: str,
        market_price: float,
        language: Language | str | None = None
    ) -> NegotiationSession:
        """
        Open a session with the counterpart's opening bid.

        Args:
            commodity: Commodity identifier, e.g. "tomato"
            market_price: Reference market price, must be positive and finite
            language: Language for this reply only (engine default otherwise)

        Returns:
            The new session, already holding the opening offer

        Raises:
            ValidationException: If market_price is not a positive number
        """
        if not math.isfinite(market_price) or market_price <= 0:
            raise ValidationException(
                f"market_price must be positive, got {market_price}",
                field_errors=[{"field": "market_price", "message": "must be a finite number greater than 0"}]
            )

        lang = self._resolve_language(language)
        opening_price = round_price(market_price * OPENING_RATIO)
        session = NegotiationSession(commodity=commodity, market_price=market_price)
        session.messages.append(NegotiationMessage(
            sender="ai",
            message=phrase(
                OPENING_MESSAGES,
                lang,
                commodity=commodity_name(commodity, lang),
                market_price=format_price(market_price),
                price=format_price(opening_price),
            ),
            price=opening_price,
            type="offer",
        ))
        self.sessions[session.id] = session

        logger.info(
            f"Started negotiation {session.id} for {commodity} "
            f"(market={market_price}, opening={opening_price}, lang={lang.value})"
        )
        return session

    def process_user_message(
        self,
        session_id: str,
        user_message: str,
        user_price: Optional[float] = None,
        language: Language | str | None = None
    ) -> NegotiationMessage:
        """
        Record the user's turn and produce the counterpart's reply.

        Closed sessions are left untouched and answered with a "reject"
        message that is not stored. Non-finite prices count as no price.

        Args:
            session_id: Session to continue
            user_message: Free text typed or spoken by the user
            user_price: Optional price the user is asking for
            language: Language for this reply only (engine default otherwise)

        Returns:
            The counterpart's reply

        Raises:
            SessionNotFoundException: If no such session exists
        """
        session = self.sessions.get(session_id)
        if session is None:
            logger.warning(f"Message for unknown session {session_id}")
            raise SessionNotFoundException(session_id)

        lang = self._resolve_language(language)

        if not session.is_active:
            logger.info(f"Session {session_id} is {session.status}; ignoring user turn")
            return NegotiationMessage(
                sender="ai",
                message=phrase(
                    DEAL_CLOSED_MESSAGES,
                    lang,
                    price=format_price(self._last_ai_price(session)),
                ),
                type="reject",
            )

        if user_price is not None and not math.isfinite(user_price):
            logger.warning(f"Session {session_id}: ignoring non-finite price {user_price}")
            user_price = None

        user_turn = NegotiationMessage(
            sender="user",
            message=user_message,
            price=user_price,
            type="offer" if user_price else "chat",
        )
        # Reply is built before anything is stored; both turns land together
        reply = self._generate_reply(session, user_message, user_price, lang)
        session.messages.append(user_turn)
        session.messages.append(reply)
        return reply

    def _generate_reply(
        self,
        session: NegotiationSession,
        user_message: str,
        user_price: Optional[float],
        lang: Language
    ) -> NegotiationMessage:
        """Apply the price-convergence heuristic to the latest user turn."""
        if not user_price:
            return NegotiationMessage(
                sender="ai",
                message=self._chat_reply(user_message, lang),
                type="chat",
            )

        last_ai_price = self._last_ai_price(session)
        market_price = session.market_price

        if user_price <= market_price * FAIR_PRICE_RATIO:
            if user_price >= last_ai_price * ACCEPT_MARGIN:
                deal_price = round_price(user_price)
                session.status = "completed"
                session.end_time = utcnow()
                logger.info(f"Session {session.id}: accepted {user_price} (last counter {last_ai_price})")
                return NegotiationMessage(
                    sender="ai",
                    message=phrase(ACCEPT_MESSAGES, lang, price=format_price(deal_price)),
                    price=deal_price,
                    type="accept",
                )

            new_price = round_price((user_price + last_ai_price) / 2)
            logger.info(f"Session {session.id}: countered {user_price} with midpoint {new_price}")
            return NegotiationMessage(
                sender="ai",
                message=phrase(COUNTER_MESSAGES, lang, price=format_price(new_price)),
                price=new_price,
                type="counter",
            )

        # Counterpart is the buyer, yet its bid moves up by 10% here.
        new_price = round_price(last_ai_price * HIGH_PRICE_STEP)
        logger.info(f"Session {session.id}: {user_price} above fair price, countered with {new_price}")
        return NegotiationMessage(
            sender="ai",
            message=phrase(
                HIGH_PRICE_MESSAGES,
                lang,
                market_price=format_price(market_price),
                price=format_price(new_price),
            ),
            price=new_price,
            type="counter",
        )

    @staticmethod
    def _chat_reply(user_message: str, lang: Language) -> str:
        if is_quality_question(user_message, lang):
            return phrase(QUALITY_MESSAGES, lang)
        return phrase(CHAT_MESSAGES, lang)

    @staticmethod
    def _last_ai_price(session: NegotiationSession) -> float:
        """Most recent price the counterpart put on the table."""
        for message in reversed(session.messages):
            if message.sender == "ai" and message.price:
                return message.price
        return session.market_price * OPENING_RATIO

    def generate_whatsapp_message(
        self,
        session: NegotiationSession,
        today: Optional[date] = None,
        language: Language | str | None = None
    ) -> str:
        """
        Format a shareable deal summary.

        Args:
            session: Session to summarise
            today: Date to print (defaults to today's local date)
            language: Template language (engine default otherwise)

        Returns:
            Message text
        """
        lang = self._resolve_language(language)
        today = today or date.today()
        return phrase(
            SHARE_TEMPLATES,
            lang,
            commodity=commodity_name(session.commodity, lang),
            price=format_price(self._last_ai_price(session)),
            date=f"{today.day}/{today.month}/{today.year}",
        )

    def get_session(self, session_id: str) -> Optional[NegotiationSession]:
        return self.sessions.get(session_id)

    def get_all_sessions(self) -> List[NegotiationSession]:
        return list(self.sessions.values())


# Singleton instance
_engine_instance: AIBargainBot | None = None


def get_engine() -> AIBargainBot:
    """Get the process-wide negotiation engine, creating it on first use."""
    global _engine_instance
    if _engine_instance is None:
        _engine_instance = AIBargainBot()
        logger.info(f"Negotiation engine initialized (lang={_engine_instance.language.value})")
    return _engine_instance


def reset_engine() -> None:
    """Drop the singleton engine and every session it holds."""
    global _engine_instance
    _engine_instance = None
