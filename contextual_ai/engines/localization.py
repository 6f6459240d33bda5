"""
Localization lookup tables.

Two fixed tables:
- COUNTRY_SETTINGS: regional formatting keyed by country name
- MESSAGES: response template fragments keyed by (language, key)

Only Nigeria, Ghana and Kenya carry dedicated country settings. Other
countries fall back to the snapshot's own language and currency.
"""
from __future__ import annotations

DEFAULT_LANGUAGE = "en"
DEFAULT_DATE_FORMAT = "DD/MM/YYYY"
DEFAULT_NUMBER_FORMAT = "1,234.56"

# Used when an engine has no snapshot at all
UNCONFIGURED_SETTINGS = {
    "language": "en",
    "currency": "USD",
    "dateFormat": "MM/DD/YYYY",
    "numberFormat": "1,234.56",
}

COUNTRY_SETTINGS: dict[str, dict[str, str]] = {
    "Nigeria": {
        "language": "en",
        "currency": "NGN",
        "dateFormat": DEFAULT_DATE_FORMAT,
        "numberFormat": DEFAULT_NUMBER_FORMAT,
    },
    "Ghana": {
        "language": "en",
        "currency": "GHS",
        "dateFormat": DEFAULT_DATE_FORMAT,
        "numberFormat": DEFAULT_NUMBER_FORMAT,
    },
    "Kenya": {
        "language": "en",
        "currency": "KES",
        "dateFormat": DEFAULT_DATE_FORMAT,
        "numberFormat": DEFAULT_NUMBER_FORMAT,
    },
}

MESSAGES: dict[tuple[str, str], str] = {
    ("en", "intro"): "Based on your context in {country} and your {style} learning style, ",
    ("en", "offline"): "I'll provide offline-accessible content. ",
    ("en", "visual"): "I'll include visual elements to help you learn better. ",
    ("en", "question"): "Here's what I understand about your question: {user_input}",
    ("en", "fallback"): "I understand you're asking about: {user_input}",
    ("fr", "intro"): "Compte tenu de votre contexte au {country} et de votre style d'apprentissage {style}, ",
    ("fr", "offline"): "je fournirai du contenu accessible hors ligne. ",
    ("fr", "visual"): "j'inclurai des éléments visuels pour vous aider à mieux apprendre. ",
    ("fr", "question"): "Voici ce que je comprends de votre question : {user_input}",
    ("fr", "fallback"): "Je comprends que vous posez une question sur : {user_input}",
}


def settings_for_country(country: str, language: str, currency: str) -> dict[str, str]:
    """Regional settings for a country, or the snapshot's own language/currency."""
    settings = COUNTRY_SETTINGS.get(country)
    if settings is not None:
        return dict(settings)
    return {
        "language": language,
        "currency": currency,
        "dateFormat": DEFAULT_DATE_FORMAT,
        "numberFormat": DEFAULT_NUMBER_FORMAT,
    }


def message(language: str, key: str, **params: str) -> str:
    """Template fragment for (language, key), falling back to the base language."""
    template = MESSAGES.get((language, key))
    if template is None:
        template = MESSAGES[(DEFAULT_LANGUAGE, key)]
    return template.format(**params)
