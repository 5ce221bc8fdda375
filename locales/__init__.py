"""
i18n module - dict-based UI strings with fallback to English.
Flash messages and form notices go through t(); CMS content is not translated.
"""

from locales.en import EN_STRINGS

_STRINGS = {"en": EN_STRINGS}


def t(key: str, lang: str = "en", **kwargs) -> str:
    """Get translated string. Falls back to EN if key missing."""
    strings = _STRINGS.get(lang, _STRINGS["en"])
    text = strings.get(key, _STRINGS["en"].get(key, key))
    return text.format(**kwargs) if kwargs else text
