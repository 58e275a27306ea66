import logging

from models import LanguageCode
from translations import translations

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = LanguageCode.ENGLISH.value


def _language_name(language):
    return language.value if isinstance(language, LanguageCode) else language


# Active language table, without fallback
def translations_for(language):
    return translations.get(_language_name(language), {})


# Translation utility
def get_translation(key, language=DEFAULT_LANGUAGE):
    language = _language_name(language)
    try:
        return translations.get(language, translations[DEFAULT_LANGUAGE])[key]
    except KeyError:
        logger.debug(f"Translation key '{key}' not found for language '{language}', falling back to English")
        return translations[DEFAULT_LANGUAGE].get(key, f"Missing translation: {key}")


def get_translated_text(notification, field, table):
    """Resolve the display text of a notification field ('title' or 'message').

    Uses the field's translation key when ``table`` has a template for it,
    otherwise the notification's literal text. Each ``{param}`` placeholder
    in the resolved string is then replaced once, first occurrence only, by
    its parameter value.
    """
    if field == 'title':
        key, fallback = notification.translation_key_title, notification.title
    else:
        key, fallback = notification.translation_key_message, notification.message

    text = table[key] if key and table.get(key) else fallback
    for param, value in (notification.translation_params or {}).items():
        text = text.replace(f"{{{param}}}", str(value), 1)
    return text


# Keys present in English but missing for each other language
def missing_keys(required=None):
    required = set(required if required is not None else translations[DEFAULT_LANGUAGE])
    report = {}
    for language in LanguageCode:
        table = translations.get(language.value, {})
        missing = sorted(required - set(table))
        if missing:
            report[language.value] = missing
    return report
