"""
Unit tests for the phrasebook and price helpers.

WHAT: Test language coverage, fallbacks, catalogue and rounding
WHY: A missing translation or wrong rounding shows up in every negotiation
HOW: Inspect tables directly and call helpers with edge values
"""

import pytest

from mandi.agents.phrases import (
    COMMODITIES,
    FALLBACK_LANGUAGE,
    PHRASE_TABLES,
    SUPPORTED_LANGUAGES,
    COUNTER_MESSAGES,
    Language,
    commodity_name,
    is_quality_question,
    phrase,
)
from mandi.utils.prices import format_price, round_price


@pytest.mark.unit
@pytest.mark.parametrize("table_name", sorted(PHRASE_TABLES))
def test_every_table_covers_every_language(table_name):
    table = PHRASE_TABLES[table_name]
    assert set(table) == set(Language)


@pytest.mark.unit
def test_every_commodity_is_named_in_every_language():
    for commodity in COMMODITIES.values():
        assert set(commodity.names) == set(Language)


@pytest.mark.unit
@pytest.mark.parametrize("code,expected", [
    ("hi", Language.HI),
    ("EN", Language.EN),
    (" ta ", Language.TA),
    (Language.KN, Language.KN),
    ("fr", Language.HI),
    ("", Language.HI),
    (None, Language.HI),
])
def test_language_coerce(code, expected):
    assert Language.coerce(code) is expected


@pytest.mark.unit
def test_fallback_language_is_hindi():
    assert FALLBACK_LANGUAGE is Language.HI


@pytest.mark.unit
def test_phrase_formats_placeholders():
    assert phrase(COUNTER_MESSAGES, Language.EN, price="₹50") == "How about ₹50? This is a good rate."


@pytest.mark.unit
def test_phrase_falls_back_when_language_missing():
    partial = {Language.HI: "नमस्ते {name}"}
    assert phrase(partial, Language.EN, name="राम") == "नमस्ते राम"


@pytest.mark.unit
def test_supported_languages_metadata():
    assert SUPPORTED_LANGUAGES[Language.TE].native_name == "తెలుగు"
    assert all(info.speech_supported for info in SUPPORTED_LANGUAGES.values())


@pytest.mark.unit
@pytest.mark.parametrize("commodity_id,language,expected", [
    ("tomato", Language.EN, "Tomato"),
    ("wheat", Language.HI, "गेहूं"),
    ("ONION", Language.KN, "ಈರುಳ್ಳಿ"),
    ("saffron", Language.EN, "saffron"),
])
def test_commodity_name(commodity_id, language, expected):
    assert commodity_name(commodity_id, language) == expected


@pytest.mark.unit
def test_commodity_units_follow_category():
    assert COMMODITIES["wheat"].unit == "quintal"
    assert COMMODITIES["rice"].unit == "quintal"
    assert COMMODITIES["tomato"].unit == "kg"


@pytest.mark.unit
@pytest.mark.parametrize("text,language,expected", [
    ("quality?", Language.EN, True),
    ("Is the Quality good", Language.TA, True),  # English keyword always counts
    ("தரம் எப்படி", Language.TA, True),
    ("தரம் எப்படி", Language.EN, False),
    ("price please", Language.EN, False),
])
def test_is_quality_question(text, language, expected):
    assert is_quality_question(text, language) is expected


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [
    (85.5, 86),
    (84.5, 85),
    (84.49, 84),
    (2057.0000000000005, 2057),
    (2262.7, 2263),
    (-2.5, -2),
    (0, 0),
])
def test_round_price_rounds_half_up(value, expected):
    assert round_price(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_round_price_rejects_non_finite(value):
    with pytest.raises(ValueError):
        round_price(value)


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [
    (85, "₹85"),
    (85.0, "₹85"),
    (45.25, "₹45.25"),
])
def test_format_price(value, expected):
    assert format_price(value) == expected
