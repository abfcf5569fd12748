"""Locale selection helpers for application start-up.

negotiate_initial_locale() chooses the locale a UI should start in from a
stored preference, the user's/system's preferred locales, and a default.
language_options() lists loaded locales with human-readable labels for a
language picker.

Both use Babel's CLDR data; neither is consulted during resolution.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from babel import UnknownLocaleError, negotiate_locale

from keyglot.constants import DEFAULT_LOCALE
from keyglot.locale_utils import get_babel_locale, get_system_locale, normalize_locale
from keyglot.localization.types import LocaleCode

__all__ = [
    "LanguageOption",
    "language_options",
    "negotiate_initial_locale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageOption:
    """One entry of a language picker.

    Attributes:
        code: Locale code exactly as loaded in the catalog
        label: Display name (e.g. "português (Brasil)")
    """

    code: LocaleCode
    label: str


def negotiate_initial_locale(
    available: Iterable[LocaleCode],
    *,
    stored: LocaleCode | None = None,
    preferred: Iterable[LocaleCode] | None = None,
    default: LocaleCode = DEFAULT_LOCALE,
) -> LocaleCode:
    """Pick the locale to activate at start-up.

    Order:
        1. stored, if it is exactly one of available
        2. the first preferred locale Babel can match against available,
           either fully ("pt-BR" ~ "pt_BR") or by primary language
           ("pt_BR" -> "pt")
        3. default

    Args:
        available: Locale codes with a loaded bundle
        stored: Previously persisted user choice
        preferred: Preferred locales, most preferred first
                   (default: the detected system locale)
        default: Locale used when nothing matches

    Returns:
        A code from available (in its catalog spelling), or default

    Examples:
        >>> negotiate_initial_locale(["pt", "en"], stored="en")
        'en'
        >>> negotiate_initial_locale(["pt", "en"], preferred=["pt-BR"])
        'pt'
        >>> negotiate_initial_locale(["pt-BR"], preferred=["de_DE"], default="pt-BR")
        'pt-BR'
    """
    available_codes = tuple(available)

    if stored is not None and stored in available_codes:
        logger.debug("Using stored locale preference: %s", stored)
        return stored

    if preferred is None:
        preferred = (get_system_locale(),)

    by_normalized = {normalize_locale(code).lower(): code for code in available_codes if code}
    matched = negotiate_locale(
        [normalize_locale(code) for code in preferred if code],
        list(by_normalized),
        sep="_",
        aliases=None,
    )
    if matched is not None:
        chosen = by_normalized[matched.lower()]
        logger.debug("Negotiated locale %s from preferences", chosen)
        return chosen

    logger.debug("No preferred locale available; using default %s", default)
    return default


def language_options(
    available: Iterable[LocaleCode], *, display_locale: LocaleCode | None = None
) -> tuple[LanguageOption, ...]:
    """Build language picker entries for the given locales.

    Args:
        available: Locale codes (e.g. Catalog.locales)
        display_locale: Language the labels are written in
                        (default: each locale names itself)

    Returns:
        One LanguageOption per code, in input order. Codes Babel does not
        know are labeled with the code itself.

    Example:
        >>> language_options(["pt"])
        (LanguageOption(code='pt', label='português'),)
    """
    display = None
    if display_locale is not None:
        try:
            display = get_babel_locale(display_locale)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("Unknown display locale '%s': %s", display_locale, e)

    options: list[LanguageOption] = []
    for code in available:
        try:
            babel_locale = get_babel_locale(code)
        except (UnknownLocaleError, ValueError):
            options.append(LanguageOption(code=code, label=code))
            continue
        label = babel_locale.get_display_name(display if display is not None else babel_locale)
        options.append(LanguageOption(code=code, label=label or code))
    return tuple(options)
