"""
Catalogue endpoints.

WHAT: Supported languages and the commodity catalogue
WHY: Frontend builds its language picker and commodity list from these
HOW: Static phrasebook data rendered through API schemas
"""

from fastapi import APIRouter
from typing import List, Optional

from ....agents.bargain_bot import get_engine
from ....agents.phrases import COMMODITIES, SUPPORTED_LANGUAGES, Language
from ....models.api_schemas import CommodityResponse, LanguageCode, LanguageResponse

router = APIRouter()


@router.get("/languages", response_model=List[LanguageResponse])
async def list_languages():
    """List supported languages with speech capabilities."""
    return [
        LanguageResponse(
            code=info.code.value,
            name=info.name,
            native_name=info.native_name,
            flag=info.flag,
            speech_supported=info.speech_supported,
            tts_supported=info.tts_supported,
        )
        for info in SUPPORTED_LANGUAGES.values()
    ]


@router.get("/commodities", response_model=List[CommodityResponse])
async def list_commodities(language: Optional[LanguageCode] = None):
    """
    List tradable commodities.

    Names are localized to the requested language, or to the engine's
    current language when none is given.
    """
    lang = Language.coerce(language) if language else get_engine().language
    return [
        CommodityResponse(
            id=commodity.id,
            name=commodity.name_in(lang),
            icon=commodity.icon,
            category=commodity.category,
            unit=commodity.unit,
        )
        for commodity in COMMODITIES.values()
    ]
