"""
Locale-aware pluralization of entry names.

English rules are built in. Other languages get rules through
``register_inflections`` or the ``RAIL_PAGINATOR["inflections"]`` setting;
a language without rules leaves words unchanged.
"""

import logging
import re
from typing import Iterable, Optional, Sequence, Tuple

from django.utils.translation import get_language

from ..config_proxy import get_setting

logger = logging.getLogger(__name__)

PluralRule = Tuple["re.Pattern[str]", str]

_ENGLISH_PLURALS: Sequence[Tuple[str, str]] = (
    (r"(quiz)$", r"\1zes"),
    (r"^(oxen)$", r"\1"),
    (r"^(ox)$", r"\1en"),
    (r"^(m|l)ice$", r"\1ice"),
    (r"^(m|l)ouse$", r"\1ice"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])a$", r"\1a"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias|status)$", r"\1es"),
    (r"(octop|vir)i$", r"\1i"),
    (r"(octop|vir)us$", r"\1i"),
    (r"^(ax|test)is$", r"\1es"),
    (r"s$", "s"),
    (r"$", "s"),
)

_ENGLISH_IRREGULARS = {
    "person": "people",
    "man": "men",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}

_ENGLISH_UNCOUNTABLES = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
    }
)


class Inflections:
    """Plural rules, irregular forms and uncountable words for one language."""

    def __init__(
        self,
        plurals: Iterable[Tuple[str, str]] = (),
        irregulars: Optional[dict] = None,
        uncountables: Iterable[str] = (),
    ):
        self.plurals: list[PluralRule] = [
            (re.compile(pattern, re.IGNORECASE), replacement)
            for pattern, replacement in plurals
        ]
        self.irregulars = {k.lower(): v for k, v in (irregulars or {}).items()}
        self.uncountables = {word.lower() for word in uncountables}

    def pluralize(self, word: str) -> str:
        if not word:
            return word
        lowered = word.lower()
        if lowered in self.uncountables:
            return word
        for singular, plural in self.irregulars.items():
            if lowered.endswith(singular):
                prefix = word[: len(word) - len(singular)]
                if word[len(prefix):][:1].isupper():
                    plural = plural[:1].upper() + plural[1:]
                return prefix + plural
        for pattern, replacement in self.plurals:
            if pattern.search(word):
                return pattern.sub(replacement, word, count=1)
        return word


_registry: dict[str, Inflections] = {
    "en": Inflections(_ENGLISH_PLURALS, _ENGLISH_IRREGULARS, _ENGLISH_UNCOUNTABLES),
}


def register_inflections(
    language: str,
    plurals: Iterable[Tuple[str, str]] = (),
    irregulars: Optional[dict] = None,
    uncountables: Iterable[str] = (),
) -> Inflections:
    """
    Register plural rules for a language.

    Rules are ``(pattern, replacement)`` pairs tried in order; the first
    matching pattern wins.
    """
    inflections = Inflections(plurals, irregulars, uncountables)
    _registry[language.lower()] = inflections
    logger.debug("Registered inflections for language '%s'", language)
    return inflections


def unregister_inflections(language: str) -> None:
    _registry.pop(language.lower(), None)


def _configured_inflections(language: str) -> Optional[Inflections]:
    configured = get_setting("inflections", {}) or {}
    config = configured.get(language)
    if config is None:
        return None
    if isinstance(config, dict):
        return Inflections(
            config.get("plurals", ()),
            config.get("irregulars"),
            config.get("uncountables", ()),
        )
    return Inflections(config)


def get_inflections(language: Optional[str] = None) -> Optional[Inflections]:
    """Return the rules for ``language`` (or its base language), if any."""
    language = (language or get_language() or "en").lower()
    candidates = [language]
    if "-" in language:
        candidates.append(language.split("-", 1)[0])
    for candidate in candidates:
        configured = _configured_inflections(candidate)
        if configured is not None:
            return configured
        if candidate in _registry:
            return _registry[candidate]
    return None


def pluralize(word: str, count: Optional[int] = None, language: Optional[str] = None) -> str:
    """
    Pluralize ``word`` for ``count`` in ``language`` (active language by default).

    A count of 1 keeps the singular form.
    """
    if count == 1:
        return word
    inflections = get_inflections(language)
    if inflections is None:
        return word
    return inflections.pluralize(word)


__all__ = [
    "Inflections",
    "get_inflections",
    "pluralize",
    "register_inflections",
    "unregister_inflections",
]
