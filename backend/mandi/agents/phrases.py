"""
Phrasebook for the scripted counterpart.

WHAT: Language enum, canned counterpart text and the commodity catalogue
WHY: Every reply the counterpart gives must exist in every supported language
HOW: Template strings keyed by Language, verified complete at import time
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class Language(str, Enum):
    """Languages the marketplace speaks."""
    HI = "hi"
    EN = "en"
    TA = "ta"
    TE = "te"
    KN = "kn"

    @classmethod
    def coerce(cls, value) -> "Language":
        """Map a language code to a member, falling back to Hindi."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return FALLBACK_LANGUAGE


FALLBACK_LANGUAGE = Language.HI


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for a supported language."""
    code: Language
    name: str
    native_name: str
    flag: str
    speech_supported: bool = True
    tts_supported: bool = True


SUPPORTED_LANGUAGES: Dict[Language, LanguageInfo] = {
    Language.HI: LanguageInfo(Language.HI, "Hindi", "हिंदी", "🇮🇳"),
    Language.EN: LanguageInfo(Language.EN, "English", "English", "🇬🇧"),
    Language.TA: LanguageInfo(Language.TA, "Tamil", "தமிழ்", "🇮🇳"),
    Language.TE: LanguageInfo(Language.TE, "Telugu", "తెలుగు", "🇮🇳"),
    Language.KN: LanguageInfo(Language.KN, "Kannada", "ಕನ್ನಡ", "🇮🇳"),
}


# ========== Counterpart text ==========
# Placeholders: {commodity}, {market_price}, {price} (prices arrive pre-formatted)

OPENING_MESSAGES: Dict[Language, str] = {
    Language.HI: "नमस्ते! मुझे {commodity} चाहिए। मार्केट रेट {market_price} है, लेकिन मैं {price} दे सकता हूं।",
    Language.EN: "Hello! I need {commodity}. Market rate is {market_price}, but I can pay {price}.",
    Language.TA: "வணக்கம்! எனக்கு {commodity} வேண்டும். சந்தை விலை {market_price}, ஆனால் நான் {price} கொடுக்க முடியும்.",
    Language.TE: "నమస్కారం! నాకు {commodity} కావాలి. మార్కెట్ రేట్ {market_price}, కానీ నేను {price} ఇవ్వగలను.",
    Language.KN: "ನಮಸ್ಕಾರ! ನನಗೆ {commodity} ಬೇಕು. ಮಾರುಕಟ್ಟೆ ದರ {market_price}, ಆದರೆ ನಾನು {price} ಕೊಡಬಹುದು.",
}

ACCEPT_MESSAGES: Dict[Language, str] = {
    Language.HI: "ठीक है! {price} में डील फाइनल। धन्यवाद!",
    Language.EN: "Alright! Deal finalized at {price}. Thank you!",
    Language.TA: "சரி! {price} க்கு ஒப்பந்தம் முடிந்தது. நன்றி!",
    Language.TE: "సరే! {price} కు డీల్ ఫైనల్. ధన్యవాదాలు!",
    Language.KN: "ಸರಿ! {price} ಗೆ ಒಪ್ಪಂದ ಮುಗಿದಿದೆ. ಧನ್ಯವಾದಗಳು!",
}

COUNTER_MESSAGES: Dict[Language, str] = {
    Language.HI: "{price} कैसा रहेगा? यह अच्छा रेट है।",
    Language.EN: "How about {price}? This is a good rate.",
    Language.TA: "{price} எப்படி? இது நல்ல விலை.",
    Language.TE: "{price} ఎలా ఉంటుంది? ఇది మంచి రేట్.",
    Language.KN: "{price} ಹೇಗೆ? ಇದು ಒಳ್ಳೆಯ ದರ.",
}

HIGH_PRICE_MESSAGES: Dict[Language, str] = {
    Language.HI: "यह तो बहुत ज्यादा है! मार्केट रेट {market_price} है। मैं {price} से ज्यादा नहीं दे सकता।",
    Language.EN: "That's too much! Market rate is {market_price}. I can't pay more than {price}.",
    Language.TA: "அது அதிகம்! சந்தை விலை {market_price}. நான் {price} க்கு மேல் கொடுக்க முடியாது.",
    Language.TE: "అది చాలా ఎక్కువ! మార్కెట్ రేట్ {market_price}. నేను {price} కంటే ఎక్కువ ఇవ్వలేను.",
    Language.KN: "ಅದು ತುಂಬಾ ಹೆಚ್ಚು! ಮಾರುಕಟ್ಟೆ ದರ {market_price}. ನಾನು {price} ಕ್ಕಿಂತ ಹೆಚ್ಚು ಕೊಡಲಾರೆ.",
}

QUALITY_MESSAGES: Dict[Language, str] = {
    Language.HI: "गुणवत्ता बहुत अच्छी है। फ्रेश माल है।",
    Language.EN: "Quality is very good. Fresh stock.",
    Language.TA: "தரம் மிகவும் நல்லது. புதிய பொருள்.",
    Language.TE: "నాణ్యత చాలా బాగుంది. తాజా స్టాక్.",
    Language.KN: "ಗುಣಮಟ್ಟ ತುಂಬಾ ಚೆನ್ನಾಗಿದೆ. ತಾಜಾ ಸ್ಟಾಕ್.",
}

CHAT_MESSAGES: Dict[Language, str] = {
    Language.HI: "हां, बताइए। क्या रेट लगेगा?",
    Language.EN: "Yes, tell me. What rate will you give?",
    Language.TA: "ஆம், சொல்லுங்கள். என்ன விலை கொடுப்பீர்கள்?",
    Language.TE: "అవును, చెప్పండి. ఎంత రేట్ ఇస్తారు?",
    Language.KN: "ಹೌದು, ಹೇಳಿ. ಎಷ್ಟು ದರ ಕೊಡುತ್ತೀರಿ?",
}

DEAL_CLOSED_MESSAGES: Dict[Language, str] = {
    Language.HI: "यह डील पहले ही बंद हो चुकी है। आखिरी रेट {price} था।",
    Language.EN: "This deal is already closed. The last rate was {price}.",
    Language.TA: "இந்த ஒப்பந்தம் ஏற்கனவே முடிந்துவிட்டது. கடைசி விலை {price}.",
    Language.TE: "ఈ డీల్ ఇప్పటికే ముగిసింది. చివరి రేటు {price}.",
    Language.KN: "ಈ ಒಪ್ಪಂದ ಈಗಾಗಲೇ ಮುಗಿದಿದೆ. ಕೊನೆಯ ದರ {price}.",
}

# Lower-case substrings that turn a chat message into a quality question
QUALITY_KEYWORDS: Dict[Language, List[str]] = {
    Language.HI: ["गुणवत्ता", "क्वालिटी"],
    Language.EN: ["quality"],
    Language.TA: ["தரம்"],
    Language.TE: ["నాణ్యత"],
    Language.KN: ["ಗುಣಮಟ್ಟ"],
}

# Placeholders: {commodity}, {price}, {date}
SHARE_TEMPLATES: Dict[Language, str] = {
    Language.HI: (
        "🛒 *मंडी डील*\n\n📦 वस्तु: {commodity}\n💰 फाइनल रेट: {price}\n📅 दिनांक: {date}\n\n"
        "✅ डील कन्फर्म करने के लिए रिप्लाई करें।\n\n_मल्टीलिंगुअल मंडी ऐप से भेजा गया_"
    ),
    Language.EN: (
        "🛒 *Mandi Deal*\n\n📦 Item: {commodity}\n💰 Final Rate: {price}\n📅 Date: {date}\n\n"
        "✅ Reply to confirm the deal.\n\n_Sent from Multilingual Mandi App_"
    ),
    Language.TA: (
        "🛒 *மண்டி ஒப்பந்தம்*\n\n📦 பொருள்: {commodity}\n💰 இறுதி விலை: {price}\n📅 தேதி: {date}\n\n"
        "✅ ஒப்பந்தத்தை உறுதிப்படுத்த பதிலளிக்கவும்.\n\n_பன்மொழி மண்டி ஆப்பிலிருந்து அனுப்பப்பட்டது_"
    ),
    Language.TE: (
        "🛒 *మండి ఒప్పందం*\n\n📦 వస్తువు: {commodity}\n💰 చివరి రేటు: {price}\n📅 తేదీ: {date}\n\n"
        "✅ ఒప్పందాన్ని నిర్ధారించడానికి రిప్లై చేయండి.\n\n_మల్టీలింగ్వల్ మండి యాప్ నుండి పంపబడింది_"
    ),
    Language.KN: (
        "🛒 *ಮಂಡಿ ಒಪ್ಪಂದ*\n\n📦 ವಸ್ತು: {commodity}\n💰 ಅಂತಿಮ ದರ: {price}\n📅 ದಿನಾಂಕ: {date}\n\n"
        "✅ ಒಪ್ಪಂದವನ್ನು ದೃಢೀಕರಿಸಲು ಉತ್ತರಿಸಿ.\n\n_ಬಹುಭಾಷಾ ಮಂಡಿ ಆ್ಯಪ್‌ನಿಂದ ಕಳುಹಿಸಲಾಗಿದೆ_"
    ),
}


# ========== Commodity catalogue ==========

@dataclass(frozen=True)
class Commodity:
    """A commodity traded at the mandi."""
    id: str
    names: Dict[Language, str]
    icon: str
    category: str

    @property
    def unit(self) -> str:
        return "quintal" if self.category == "grains" else "kg"

    def name_in(self, language: Language) -> str:
        return self.names.get(language) or self.names[FALLBACK_LANGUAGE]


def _commodity(commodity_id: str, icon: str, category: str, hi: str, en: str, ta: str, te: str, kn: str) -> Commodity:
    names = {Language.HI: hi, Language.EN: en, Language.TA: ta, Language.TE: te, Language.KN: kn}
    return Commodity(id=commodity_id, names=names, icon=icon, category=category)


COMMODITIES: Dict[str, Commodity] = {
    c.id: c for c in [
        _commodity("tomato", "🍅", "vegetables", "टमाटर", "Tomato", "தக்காளி", "టమాటో", "ಟೊಮೇಟೊ"),
        _commodity("onion", "🧅", "vegetables", "प्याज", "Onion", "வெங்காயம்", "ఉల్లిపాయ", "ಈರುಳ್ಳಿ"),
        _commodity("potato", "🥔", "vegetables", "आलू", "Potato", "உருளைக்கிழங்கு", "బంగాళాదుంప", "ಆಲೂಗಡ್ಡೆ"),
        _commodity("wheat", "🌾", "grains", "गेहूं", "Wheat", "கோதுமை", "గోధుమ", "ಗೋಧಿ"),
        _commodity("rice", "🍚", "grains", "चावल", "Rice", "அரிசி", "బియ్యం", "ಅಕ್ಕಿ"),
        _commodity("carrot", "🥕", "vegetables", "गाजर", "Carrot", "கேரட்", "క్యారెట్", "ಕ್ಯಾರೆಟ್"),
        _commodity("cabbage", "🥬", "vegetables", "पत्ता गोभी", "Cabbage", "முட்டைகோஸ்", "కాబేజీ", "ಎಲೆಕೋಸು"),
        _commodity("cauliflower", "🥦", "vegetables", "फूल गोभी", "Cauliflower", "காலிஃப்ளவர்", "కాలీఫ్లవర్", "ಹೂಕೋಸು"),
    ]
}


def commodity_name(commodity_id: str, language: Language) -> str:
    """Localized commodity name, or the id itself for unknown commodities."""
    commodity = COMMODITIES.get(commodity_id.strip().lower())
    if commodity is None:
        return commodity_id
    return commodity.name_in(language)


def phrase(table: Dict[Language, str], language: Language, **values) -> str:
    """
    Render a phrase from a language table.

    Args:
        table: One of the *_MESSAGES / *_TEMPLATES tables
        language: Requested language (falls back to Hindi if missing)
        **values: Placeholder values

    Returns:
        Formatted text
    """
    template = table.get(language) or table[FALLBACK_LANGUAGE]
    return template.format(**values)


def is_quality_question(text: str, language: Language) -> bool:
    """True if the text mentions quality in the given language or in English."""
    lowered = text.lower()
    keywords = QUALITY_KEYWORDS[language] + QUALITY_KEYWORDS[Language.EN]
    return any(keyword in lowered for keyword in keywords)


PHRASE_TABLES = {
    "OPENING_MESSAGES": OPENING_MESSAGES,
    "ACCEPT_MESSAGES": ACCEPT_MESSAGES,
    "COUNTER_MESSAGES": COUNTER_MESSAGES,
    "HIGH_PRICE_MESSAGES": HIGH_PRICE_MESSAGES,
    "QUALITY_MESSAGES": QUALITY_MESSAGES,
    "CHAT_MESSAGES": CHAT_MESSAGES,
    "DEAL_CLOSED_MESSAGES": DEAL_CLOSED_MESSAGES,
    "QUALITY_KEYWORDS": QUALITY_KEYWORDS,
    "SHARE_TEMPLATES": SHARE_TEMPLATES,
    "SUPPORTED_LANGUAGES": SUPPORTED_LANGUAGES,
}


def _check_tables_complete():
    """Fail at import if any table is missing a language."""
    for table_name, table in PHRASE_TABLES.items():
        missing = [lang.value for lang in Language if lang not in table]
        if missing:
            raise RuntimeError(f"{table_name} is missing languages: {missing}")
    for commodity in COMMODITIES.values():
        missing = [lang.value for lang in Language if lang not in commodity.names]
        if missing:
            raise RuntimeError(f"Commodity {commodity.id} is missing names for: {missing}")


_check_tables_complete()
