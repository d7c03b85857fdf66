"""Scripted negotiation counterpart."""

from .bargain_bot import AIBargainBot, get_engine, reset_engine
from .phrases import (
    COMMODITIES,
    FALLBACK_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Commodity,
    Language,
    LanguageInfo,
)

__all__ = [
    "AIBargainBot",
    "get_engine",
    "reset_engine",
    "COMMODITIES",
    "FALLBACK_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "Commodity",
    "Language",
    "LanguageInfo",
]
