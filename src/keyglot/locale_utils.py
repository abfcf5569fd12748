"""Locale code helpers shared by negotiation and language labels.

Catalog lookups compare locale codes exactly; only the start-up helpers in
keyglot.localization.negotiation go through these functions.

Python 3.13+. External dependency: Babel (imported lazily).
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from keyglot.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

# Environment variables consulted after locale.getlocale(), strongest first.
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Rewrite a BCP-47 tag with underscores, the separator Babel expects.

    Examples:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("pt_BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


def _posix_code(raw: str) -> str | None:
    """Strip ".UTF-8" / "@modifier" suffixes; None for empty or pseudo-locales."""
    code = raw.split(".", 1)[0].split("@", 1)[0]
    if not code or code in _PSEUDO_LOCALES:
        return None
    return normalize_locale(code)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel Locale.

    Args:
        locale_code: "pt-BR" or "pt_BR" style code

    Raises:
        babel.UnknownLocaleError: No CLDR data for the code
        ValueError: Code is not a syntactically valid locale identifier

    Example:
        >>> get_babel_locale("pt-BR").territory
        'BR'
    """
    # CLDR data is loaded on first use only
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop every cached get_babel_locale() result."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Best guess at the user's locale, in POSIX form.

    locale.getlocale() is tried first, then LC_ALL, LC_MESSAGES and LANG.
    Encoding and modifier suffixes are removed, and the "C"/"POSIX"
    pseudo-locales count as no answer.

    Args:
        raise_on_failure: Raise instead of falling back to DEFAULT_LOCALE

    Returns:
        e.g. "pt_BR"; DEFAULT_LOCALE in POSIX form when nothing is detected

    Raises:
        RuntimeError: Nothing detected and raise_on_failure is True
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        os_locale, _ = locale_module.getlocale()
    except ValueError:
        # getlocale() rejects some malformed LC_* values
        os_locale = None
    if os_locale:
        candidates.append(os_locale)
    candidates.extend(os.environ.get(var, "") for var in _LOCALE_ENV_VARS)

    for raw in candidates:
        code = _posix_code(raw)
        if code is not None:
            return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale; "
            f"set one of {', '.join(_LOCALE_ENV_VARS)}"
        )
        raise RuntimeError(msg)
    return normalize_locale(DEFAULT_LOCALE)
